from __future__ import annotations

import random
import secrets
from dataclasses import dataclass, field

from ..core.constants import ROOM_CODE_ALPHABET, ROOM_CODE_LENGTH


@dataclass
class RoomCodeGenerator:
    """Produces short upper-case join codes for rooms."""

    length: int = ROOM_CODE_LENGTH
    alphabet: str = ROOM_CODE_ALPHABET
    rng: random.Random = field(default_factory=secrets.SystemRandom)

    def generate(self) -> str:
        return "".join(self.rng.choice(self.alphabet) for _ in range(self.length))
