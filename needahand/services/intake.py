# needahand/services/intake.py
import logging
import time
from typing import Callable, Dict, Optional, Sequence, Tuple

from ..config import settings
from ..models.category import CategoryDefinition, FaqItem, FaqType
from ..models.intake import AnswerValue, ChatState, ChatStep, ChatView
from ..models.job import JobCreate
from ..models.worker import WorkerProfile
from .booking import book
from .catalog import lookup
from .classifier import classify
from .matcher import TOP_N, rank

logger = logging.getLogger(__name__)

CandidateSource = Callable[[], Sequence[WorkerProfile]]


def category_def(state: ChatState) -> CategoryDefinition:
    return lookup(state.category)


def faqs(state: ChatState) -> Tuple[FaqItem, ...]:
    return category_def(state).faqs


def current_faq(state: ChatState) -> FaqItem:
    questions = faqs(state)
    if 0 <= state.faq_index < len(questions):
        return questions[state.faq_index]
    return questions[0]


def chat_view(state: ChatState) -> ChatView:
    definition = category_def(state)
    return ChatView(
        **state.model_dump(),
        category_title=definition.title,
        category_icon=definition.icon,
        current_faq=current_faq(state) if state.step == ChatStep.ANSWERING_FAQS else None,
        faq_count=len(definition.faqs)
    )


class IntakeWizard:
    """
    Problem description -> category questionnaire -> ranked workers.

    Every operation is total: a call that does not fit the current step is
    ignored rather than raised, so the caller can forward user actions as-is.
    """

    def __init__(self, candidates: CandidateSource, limit: int = settings.max_recommendations):
        self._candidates = candidates
        self._limit = min(limit, TOP_N)
        self.state = ChatState()

    def _in_step(self, step: ChatStep, action: str) -> bool:
        if self.state.is_open and self.state.step == step:
            return True
        logger.debug(f"Ignoring '{action}' while wizard is {self.state.step.value}")
        return False

    def submit_problem(self, text: str) -> ChatState:
        if not self._in_step(ChatStep.COLLECTING_PROBLEM, "submit_problem"):
            return self.state
        problem = text.strip()
        if not problem:
            return self.state

        category = classify(problem)
        self.state = self.state.model_copy(update={
            "step": ChatStep.ANSWERING_FAQS,
            "problem": problem,
            "category": category,
            "faq_index": 0,
            "answers": {},
        })
        logger.info(f"Problem classified as {category.value}")
        return self.state

    def answer(self, value: AnswerValue) -> ChatState:
        if not self._in_step(ChatStep.ANSWERING_FAQS, "answer"):
            return self.state
        faq = current_faq(self.state)
        self.state.answers[faq.id] = value
        return self.state

    def advance(self, text: str = "") -> ChatState:
        if not self._in_step(ChatStep.ANSWERING_FAQS, "advance"):
            return self.state

        faq = current_faq(self.state)
        if faq.type == FaqType.TEXT:
            typed = text.strip()
            if typed:
                self.state.answers[faq.id] = typed
            elif not self.state.answers.get(faq.id):
                # not yet answered
                return self.state

        if self.state.faq_index < len(faqs(self.state)) - 1:
            self.state.faq_index += 1
        else:
            self._finish()
        return self.state

    def retreat(self) -> ChatState:
        if not self._in_step(ChatStep.ANSWERING_FAQS, "retreat"):
            return self.state
        self.state.faq_index = max(0, self.state.faq_index - 1)
        return self.state

    def _finish(self) -> None:
        candidates = list(self._candidates())
        ranked = rank(candidates, self.state.category, self.state.answers, limit=self._limit)
        self.state.ranked = ranked
        self.state.step = ChatStep.SHOWING_RESULTS
        logger.info(
            f"Ranked {len(candidates)} workers for {self.state.category.value}, "
            f"top {len(ranked)}"
        )

    def select(self, worker_id: str, customer_id: str) -> Optional[JobCreate]:
        """Book one of the ranked workers and close the wizard."""
        if not self._in_step(ChatStep.SHOWING_RESULTS, "select"):
            return None
        worker = next((w for w in self.state.ranked if w.id == worker_id), None)
        if worker is None:
            return None

        request = book(
            worker,
            self.state.category,
            self.state.problem,
            self.state.answers,
            customer_id
        )
        self.close()
        return request

    def close(self) -> None:
        self.state = ChatState(is_open=False)


class IntakeSessions:
    """
    One wizard per user; opening again throws the old one away.

    A wizard nobody has touched for `idle_seconds` is closed and dropped
    the next time the registry is used.
    """

    def __init__(
        self,
        candidates: CandidateSource,
        idle_seconds: float = settings.intake_idle_minutes * 60,
        clock: Callable[[], float] = time.monotonic
    ):
        self._candidates = candidates
        self._idle_seconds = idle_seconds
        self._clock = clock
        self._sessions: Dict[str, IntakeWizard] = {}
        self._last_seen: Dict[str, float] = {}

    def _expire_idle(self) -> None:
        cutoff = self._clock() - self._idle_seconds
        for user_id in [u for u, seen in self._last_seen.items() if seen < cutoff]:
            logger.info(f"Dropping idle intake session for {user_id}")
            self.close(user_id)

    def open(self, user_id: str) -> IntakeWizard:
        self._expire_idle()
        wizard = IntakeWizard(self._candidates)
        self._sessions[user_id] = wizard
        self._last_seen[user_id] = self._clock()
        return wizard

    def get(self, user_id: str) -> Optional[IntakeWizard]:
        self._expire_idle()
        wizard = self._sessions.get(user_id)
        if wizard is None:
            return None
        if not wizard.state.is_open:
            self.close(user_id)
            return None
        self._last_seen[user_id] = self._clock()
        return wizard

    def close(self, user_id: str) -> None:
        self._last_seen.pop(user_id, None)
        wizard = self._sessions.pop(user_id, None)
        if wizard is not None:
            wizard.close()

    def __len__(self) -> int:
        return len(self._sessions)
