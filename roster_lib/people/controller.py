"""PeopleController: request handling for the people CRUD pages.

A controller is built per request from a logger and a person store. It keeps
the request's validation state in `model_state` and never holds data across
requests; the store owns the collection.
"""
from __future__ import annotations

import logging
from typing import Optional

from .interfaces import DuplicatePersonError, PersonStoreProtocol
from .model_state import ModelState
from .models import PersonModel
from .results import ActionResult, NotFoundResult, RedirectToActionResult, ViewResult

INDEX_ACTION = "Index"


class PeopleController:
    def __init__(self, logger: logging.Logger, person_store: PersonStoreProtocol):
        self._logger = logger
        self._people = person_store
        self.model_state = ModelState()

    def index(self) -> ActionResult:
        people = list(self._people.get_all())
        self._logger.debug("Listing %d people", len(people))
        return ViewResult("Index", model=people)

    def add_form(self) -> ActionResult:
        return ViewResult("Add", model=None, model_state=self.model_state)

    def add(self, person: Optional[PersonModel]) -> ActionResult:
        if not self.model_state.is_valid:
            self._logger.debug("Add rejected: %d validation error(s)", self.model_state.error_count)
            return ViewResult("Add", model=person, model_state=self.model_state)
        if person is None:
            self.model_state.add_model_error("person", "A person is required")
            return ViewResult("Add", model=None, model_state=self.model_state)

        try:
            stored = self._people.add(person) or person
        except DuplicatePersonError as e:
            self._logger.warning("Add rejected by store: %s", e)
            self.model_state.add_model_error("id", str(e))
            return ViewResult("Add", model=person, model_state=self.model_state)

        self._logger.debug("Added person %s", stored.id)
        return RedirectToActionResult(INDEX_ACTION)

    def edit_form(self, person_id: int) -> ActionResult:
        try:
            person = self._people.detail(person_id)
        except KeyError:
            return self._not_found(person_id)
        return ViewResult("Edit", model=person, model_state=self.model_state)

    def edit(self, person: Optional[PersonModel]) -> ActionResult:
        if not self.model_state.is_valid:
            self._logger.debug("Edit rejected: %d validation error(s)", self.model_state.error_count)
            return ViewResult("Edit", model=person, model_state=self.model_state)
        if person is None:
            self.model_state.add_model_error("person", "A person is required")
            return ViewResult("Edit", model=None, model_state=self.model_state)

        try:
            self._people.edit(person)
        except KeyError:
            return self._not_found(person.id)

        self._logger.debug("Edited person %s", person.id)
        return RedirectToActionResult(INDEX_ACTION)

    def delete(self, person_id: int) -> ActionResult:
        try:
            person = self._people.detail(person_id)
        except KeyError:
            return self._not_found(person_id)

        self._people.delete(person_id)
        self._logger.debug("Deleted person %s", person_id)
        return ViewResult("Delete", model=person)

    def detail(self, person_id: int) -> ActionResult:
        try:
            person = self._people.detail(person_id)
        except KeyError:
            return self._not_found(person_id)
        return ViewResult("Detail", model=person)

    def _not_found(self, person_id: Optional[int]) -> NotFoundResult:
        self._logger.warning("Person %s not found", person_id)
        return NotFoundResult(f"Person {person_id} not found")
