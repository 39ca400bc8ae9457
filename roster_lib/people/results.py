"""Controller action results.

Every action returns exactly one of these; the web layer decides how each
kind is rendered. `kind` is the tag callers may switch on.
"""
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Optional, Union

from .model_state import ModelState


@dataclass
class ViewResult:
    kind: ClassVar[str] = "view"

    view_name: str
    model: Any = None
    model_state: ModelState = field(default_factory=ModelState)


@dataclass
class RedirectToActionResult:
    kind: ClassVar[str] = "redirect"

    action_name: str
    route_values: Dict[str, Any] = field(default_factory=dict)


@dataclass
class NotFoundResult:
    kind: ClassVar[str] = "not_found"

    detail: Optional[str] = None


ActionResult = Union[ViewResult, RedirectToActionResult, NotFoundResult]
