from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from .model import Subject

SUBJECTS = (
    Subject(id="sub1", name="Mathematics", code="MATH101"),
    Subject(id="sub2", name="Science", code="SCI101"),
    Subject(id="sub3", name="History", code="HIST101"),
    Subject(id="sub4", name="English", code="ENG101"),
    Subject(id="sub5", name="Computer Science", code="CS101"),
)


class SubjectRepository(Protocol):
    def get_by_id(self, subject_id: str) -> Optional[Subject]:
        raise NotImplementedError

    def get_by_name(self, name: str) -> Optional[Subject]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Subject]:
        raise NotImplementedError


class StaticSubjectRepository(SubjectRepository):
    """Read-only subject catalogue."""

    def __init__(self, subjects: Iterable[Subject] = SUBJECTS):
        self._subjects = tuple(subjects)

    def get_by_id(self, subject_id: str) -> Optional[Subject]:
        return next((s for s in self._subjects if s.id == subject_id), None)

    def get_by_name(self, name: str) -> Optional[Subject]:
        wanted = (name or "").lower()
        return next((s for s in self._subjects if s.name.lower() == wanted), None)

    def list_all(self) -> Sequence[Subject]:
        return list(self._subjects)
