"""Protocol definitions for the person store."""
from typing import List, Protocol, runtime_checkable

from .models import PersonModel


class DuplicatePersonError(ValueError):
    """Raised by a store when a record with the same ID already exists."""


@runtime_checkable
class PersonStoreProtocol(Protocol):
    """Data-access surface the people controller depends on.

    Implementations own the canonical collection. Lookups by an unknown ID
    raise `KeyError`, following the storage backend convention.
    """

    def get_all(self) -> List[PersonModel]:
        """Return every person, in a stable order."""
        ...

    def add(self, person: PersonModel) -> PersonModel:
        """Store a new person and return the stored record.

        Raises DuplicatePersonError if `person.id` is already taken.
        """
        ...

    def edit(self, person: PersonModel) -> None:
        """Replace the record identified by `person.id`."""
        ...

    def detail(self, person_id: int) -> PersonModel:
        """Return the person with `person_id`."""
        ...

    def delete(self, person_id: int) -> None:
        """Remove the person with `person_id`."""
        ...
