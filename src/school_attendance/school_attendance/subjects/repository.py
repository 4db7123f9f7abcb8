from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Subject, SubjectPatch


class SubjectRepository(Protocol):
    def get_by_id(self, subject_id: int) -> Optional[Subject]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Subject]:
        raise NotImplementedError

    def create(self, *, name: str, is_basket: bool) -> int:
        raise NotImplementedError

    def update(self, subject_id: int, patch: SubjectPatch) -> bool:
        """Apply the fields present in ``patch``.

        Returns False when the subject does not exist.
        """

        raise NotImplementedError

    def delete(self, subject_id: int) -> bool:
        raise NotImplementedError
