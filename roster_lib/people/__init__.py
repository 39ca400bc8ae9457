"""People module: person records, their store and the CRUD controller."""

from .controller import PeopleController
from .interfaces import DuplicatePersonError, PersonStoreProtocol
from .model_state import ModelState
from .models import PersonModel
from .person_store import PersonStore
from .results import ActionResult, NotFoundResult, RedirectToActionResult, ViewResult

__all__ = [
    "PeopleController",
    "DuplicatePersonError",
    "PersonStoreProtocol",
    "ModelState",
    "PersonModel",
    "PersonStore",
    "ActionResult",
    "NotFoundResult",
    "RedirectToActionResult",
    "ViewResult",
]
