"""Password hash configurations for user import.

Nothing is hashed here: these records only describe how existing password
hashes were produced so the import API can verify them.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict


@dataclass(frozen=True)
class RepeatableHash:
    rounds: int

    name: ClassVar[str] = ""
    min_rounds: ClassVar[int] = 0
    max_rounds: ClassVar[int] = 0

    def __post_init__(self) -> None:
        if isinstance(self.rounds, bool) or not isinstance(self.rounds, int):
            raise ValueError(f"rounds must be an integer, got {self.rounds!r}")
        if not self.min_rounds <= self.rounds <= self.max_rounds:
            raise ValueError(
                f"rounds must be between {self.min_rounds} and {self.max_rounds} (inclusive)"
            )

    def to_options(self) -> Dict[str, Any]:
        return {"hashAlgorithm": self.name, "rounds": self.rounds}


@dataclass(frozen=True)
class Sha256(RepeatableHash):
    """SHA256 hashing algorithm, usable when importing users."""

    name: ClassVar[str] = "SHA256"
    min_rounds: ClassVar[int] = 1
    max_rounds: ClassVar[int] = 8192
