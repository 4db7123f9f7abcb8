from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import require_non_empty, require_positive_int
from ..core.exceptions import NotFoundError, ValidationError
from .model import Subject, SubjectPatch
from .repository import SubjectRepository

logger = logging.getLogger(__name__)


class SubjectService:
    """Use case: maintain the subject catalog and its basket flag."""

    def __init__(self, subjects: SubjectRepository):
        self._subjects = subjects

    def create(self, *, name: str, is_basket: bool = False) -> Subject:
        name = require_non_empty(name, "name")
        subject_id = self._subjects.create(name=name, is_basket=bool(is_basket))
        logger.info("Created subject %s (%s, basket=%s)", subject_id, name, bool(is_basket))
        return Subject(subject_id=subject_id, name=name, is_basket=bool(is_basket))

    def get(self, subject_id: int) -> Subject:
        subject_id = require_positive_int(subject_id, "subject_id")
        subject = self._subjects.get_by_id(subject_id)
        if not subject:
            raise NotFoundError("subject", subject_id)
        return subject

    def list_all(self) -> Sequence[Subject]:
        return self._subjects.list_all()

    def update(self, subject_id: int, patch: SubjectPatch) -> Subject:
        subject_id = require_positive_int(subject_id, "subject_id")
        if patch.is_empty():
            raise ValidationError("Nothing to update", fields=["name", "is_basket"])
        if patch.name is not None:
            patch = SubjectPatch(name=require_non_empty(patch.name, "name"), is_basket=patch.is_basket)

        if not self._subjects.update(subject_id, patch):
            raise NotFoundError("subject", subject_id)
        if patch.is_basket is not None:
            logger.info("Subject %s basket flag set to %s", subject_id, patch.is_basket)
        return self.get(subject_id)

    def delete(self, subject_id: int) -> None:
        subject_id = require_positive_int(subject_id, "subject_id")
        if not self._subjects.delete(subject_id):
            raise NotFoundError("subject", subject_id)
        logger.info("Deleted subject %s", subject_id)
