# needahand/models/intake.py
from pydantic import BaseModel, Field
from typing import Dict, List, Optional, Union
from enum import Enum

from .category import CategoryId, FaqItem
from .worker import WorkerProfile

AnswerValue = Union[bool, str]

class ChatStep(str, Enum):
    COLLECTING_PROBLEM = "collecting-problem"
    ANSWERING_FAQS = "answering-faqs"
    SHOWING_RESULTS = "showing-results"

class ChatState(BaseModel):
    is_open: bool = True
    step: ChatStep = ChatStep.COLLECTING_PROBLEM
    category: CategoryId = CategoryId.GENERAL
    problem: str = ""
    faq_index: int = 0
    answers: Dict[str, AnswerValue] = Field(default_factory=dict)
    ranked: List[WorkerProfile] = Field(default_factory=list)

class ChatView(ChatState):
    category_title: str
    category_icon: str
    current_faq: Optional[FaqItem] = None
    faq_count: int

class ProblemIn(BaseModel):
    text: str

class AnswerIn(BaseModel):
    value: AnswerValue

class AdvanceIn(BaseModel):
    text: str = ""
