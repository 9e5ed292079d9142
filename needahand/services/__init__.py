# needahand/services/__init__.py
from .roster import worker_roster
from .intake import IntakeSessions

# Wizards rank against whatever the roster holds at the moment they finish
intake_sessions = IntakeSessions(lambda: worker_roster.workers)

__all__ = [
    "worker_roster",
    "intake_sessions"
]
