# needahand/utils/__init__.py
from .auth import (
    oauth2_scheme,
    get_current_user,
    require_customer,
    require_worker
)
from .logging import setup_logging

__all__ = [
    "oauth2_scheme",
    "get_current_user",
    "require_customer",
    "require_worker",
    "setup_logging"
]
