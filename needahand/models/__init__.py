# needahand/models/__init__.py
from .category import CategoryId, FaqType, FaqItem, CategoryDefinition
from .worker import (
    CustomerProfile,
    WorkerProfile,
    WorkerProfileUpdate,
    CustomerProfileUpdate,
    WorkerAvailability,
    WorkerEarnings
)
from .job import JobStatus, JobCreate, JobOut, JobAccepted, can_transition
from .intake import ChatStep, ChatState, ChatView, ProblemIn, AnswerIn, AdvanceIn

__all__ = [
    'CategoryId', 'FaqType', 'FaqItem', 'CategoryDefinition',
    'CustomerProfile', 'WorkerProfile', 'WorkerProfileUpdate', 'CustomerProfileUpdate',
    'WorkerAvailability', 'WorkerEarnings',
    'JobStatus', 'JobCreate', 'JobOut', 'JobAccepted', 'can_transition',
    'ChatStep', 'ChatState', 'ChatView', 'ProblemIn', 'AnswerIn', 'AdvanceIn'
]
