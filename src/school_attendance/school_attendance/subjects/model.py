from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Subject:
    """Domain entity: a subject, either core (whole class) or basket (elective)."""

    subject_id: int
    name: str
    is_basket: bool = False


@dataclass(frozen=True)
class SubjectPatch:
    """Partial update; only fields that are not None are applied."""

    name: Optional[str] = None
    is_basket: Optional[bool] = None

    def is_empty(self) -> bool:
        return self.name is None and self.is_basket is None
