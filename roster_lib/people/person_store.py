"""PersonStore: person records persisted through a storage backend."""
from __future__ import annotations

from datetime import date
from pathlib import Path
from threading import RLock
from typing import Any, Dict, List, Optional, Tuple
import logging

from pydantic import ValidationError

from roster_lib.people.interfaces import DuplicatePersonError, PersonStoreProtocol
from roster_lib.people.models import PersonModel
from roster_lib.storage.base import StorageBackend
from roster_lib.storage.serializer import YAMLSerializer

logger = logging.getLogger(__name__)

PEOPLE_NS = "people"


class PersonStore(PersonStoreProtocol):
    """Store people under the `people` namespace, one key per ID.

    Records are kept as JSON-compatible dicts so any serializer can
    persist them. IDs are assigned on add when the caller leaves them unset.
    """

    def __init__(self, storage: StorageBackend):
        self._storage = storage
        self._lock = RLock()

    def _ids(self) -> List[int]:
        return sorted(int(k) for k in self._storage.list_keys(PEOPLE_NS) if str(k).isdigit())

    def _load(self, person_id: int) -> PersonModel:
        raw = self._storage.load(PEOPLE_NS, str(person_id))
        return PersonModel.model_validate(raw)

    def _save(self, person: PersonModel) -> None:
        self._storage.save(PEOPLE_NS, str(person.id), person.model_dump(mode="json"))

    def get_all(self) -> List[PersonModel]:
        with self._lock:
            return [self._load(person_id) for person_id in self._ids()]

    def add(self, person: PersonModel) -> PersonModel:
        with self._lock:
            if person.id is None:
                next_id = max(self._ids(), default=0) + 1
                person = person.model_copy(update={"id": next_id})
            elif self._storage.exists(PEOPLE_NS, str(person.id)):
                raise DuplicatePersonError(f"A person with ID {person.id} already exists")
            self._save(person)
            logger.debug("Added person %s", person.id)
            return person

    def edit(self, person: PersonModel) -> None:
        with self._lock:
            if person.id is None or not self._storage.exists(PEOPLE_NS, str(person.id)):
                raise KeyError(person.id)
            self._save(person)
            logger.debug("Edited person %s", person.id)

    def detail(self, person_id: int) -> PersonModel:
        with self._lock:
            return self._load(person_id)

    def delete(self, person_id: int) -> None:
        with self._lock:
            self._storage.delete(PEOPLE_NS, str(person_id))
            logger.debug("Deleted person %s", person_id)

    def seed_from_file(self, database_file: str | Path) -> int:
        """Add people from a YAML database file.

        The file holds a mapping `database: {people: [...]}` whose entries use
        the PersonModel field names. Entries whose ID is already stored are
        left untouched. Entries without an ID are matched on name and date of
        birth instead, so seeding the same file twice adds nothing the second
        time. Invalid entries are skipped with a warning.

        Returns:
            Number of people added
        """
        entries = _load_database_file(Path(database_file))
        added = 0
        with self._lock:
            known = {_identity(p) for p in self.get_all()}
            for entry in entries:
                try:
                    person = PersonModel.model_validate(entry)
                except ValidationError as e:
                    logger.warning("Skipping invalid person entry %r: %s", entry, e)
                    continue
                if person.id is not None:
                    if self._storage.exists(PEOPLE_NS, str(person.id)):
                        continue
                elif _identity(person) in known:
                    continue
                known.add(_identity(self.add(person)))
                added += 1
        logger.info("Seeded %d people from %s", added, database_file)
        return added


def _identity(person: PersonModel) -> Tuple[str, str, Optional[date]]:
    return (person.first_name, person.last_name, person.date_of_birth)


def _load_database_file(file_path: Path) -> List[Dict[str, Any]]:
    if not file_path.exists():
        logger.warning("Database file not found: %s", file_path)
        return []

    with open(file_path, "rb") as f:
        data = YAMLSerializer().load(f.read())

    if isinstance(data, dict):
        database = data.get("database", {})
        if isinstance(database, dict):
            people = database.get("people", [])
            if isinstance(people, list):
                return people

    logger.warning("Database file has unexpected structure: %s", file_path)
    return []
