# needahand/routes/intake.py
from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status

from ..models.intake import AdvanceIn, AnswerIn, ChatView, ProblemIn
from ..models.job import JobAccepted
from ..services import intake_sessions
from ..services.booking import submit_job
from ..services.intake import IntakeWizard, chat_view
from ..utils.auth import require_customer

intake_router = APIRouter(prefix="/intake", tags=["Intake"])


async def get_wizard(current_user: dict = Depends(require_customer)) -> IntakeWizard:
    wizard = intake_sessions.get(current_user["id"])
    if wizard is None:
        raise HTTPException(status_code=404, detail="No open intake session")
    return wizard


@intake_router.post("/open", response_model=ChatView, status_code=status.HTTP_201_CREATED)
async def open_intake(current_user: dict = Depends(require_customer)):
    wizard = intake_sessions.open(current_user["id"])
    return chat_view(wizard.state)


@intake_router.get("", response_model=ChatView)
async def get_intake(wizard: IntakeWizard = Depends(get_wizard)):
    return chat_view(wizard.state)


@intake_router.post("/problem", response_model=ChatView)
async def submit_problem(body: ProblemIn, wizard: IntakeWizard = Depends(get_wizard)):
    return chat_view(wizard.submit_problem(body.text))


@intake_router.post("/answer", response_model=ChatView)
async def answer_question(body: AnswerIn, wizard: IntakeWizard = Depends(get_wizard)):
    return chat_view(wizard.answer(body.value))


@intake_router.post("/next", response_model=ChatView)
async def next_question(body: AdvanceIn = AdvanceIn(), wizard: IntakeWizard = Depends(get_wizard)):
    return chat_view(wizard.advance(body.text))


@intake_router.post("/back", response_model=ChatView)
async def previous_question(wizard: IntakeWizard = Depends(get_wizard)):
    return chat_view(wizard.retreat())


@intake_router.post(
    "/book/{worker_id}",
    response_model=JobAccepted,
    status_code=status.HTTP_202_ACCEPTED
)
async def book_worker(
    worker_id: str,
    background_tasks: BackgroundTasks,
    current_user: dict = Depends(require_customer),
    wizard: IntakeWizard = Depends(get_wizard)
):
    request = wizard.select(worker_id, current_user["id"])
    if request is None:
        raise HTTPException(status_code=404, detail="Worker is not among the recommendations")

    intake_sessions.close(current_user["id"])
    # Settle now; the store write happens after the response
    background_tasks.add_task(submit_job, request)
    return JobAccepted(
        worker_id=request.worker_id,
        category=request.category,
        description=request.description
    )


@intake_router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def close_intake(current_user: dict = Depends(require_customer)):
    intake_sessions.close(current_user["id"])
