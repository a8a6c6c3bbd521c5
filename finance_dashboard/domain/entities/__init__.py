from .record import Record
from .session_user import SessionUser
from .view_state import FormMode, FormState, ListQuery, ViewState

__all__ = [
    "Record",
    "SessionUser",
    "FormMode",
    "FormState",
    "ListQuery",
    "ViewState",
]
