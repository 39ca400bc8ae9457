"""Per-request validation state.

Mirrors the key -> messages dictionary a form re-display needs: errors are
kept in insertion order and returned verbatim.
"""
from __future__ import annotations
from typing import Dict, Iterator, List

from pydantic import ValidationError


class ModelState:
    def __init__(self) -> None:
        self._errors: Dict[str, List[str]] = {}

    def add_model_error(self, key: str, message: str) -> None:
        self._errors.setdefault(key, []).append(message)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    @property
    def error_count(self) -> int:
        return sum(len(messages) for messages in self._errors.values())

    def get_errors(self, key: str) -> List[str]:
        return list(self._errors.get(key, []))

    def keys(self) -> List[str]:
        return list(self._errors.keys())

    def merge(self, other: ModelState) -> None:
        for key, messages in other._errors.items():
            for message in messages:
                self.add_model_error(key, message)

    def to_dict(self) -> Dict[str, List[str]]:
        return {key: list(messages) for key, messages in self._errors.items()}

    def __contains__(self, key: object) -> bool:
        return key in self._errors

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> ModelState:
        """Build a state from a pydantic ValidationError.

        Keys are the dotted field location (e.g. `first_name`); errors with an
        empty location (the whole body) are filed under `person`.
        """
        state = cls()
        for err in exc.errors():
            key = ".".join(str(part) for part in err.get("loc", ())) or "person"
            state.add_model_error(key, err.get("msg", "Invalid value"))
        return state
