from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Subject:
    """Static reference data: a taught subject."""

    id: str
    name: str
    code: str
