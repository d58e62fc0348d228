from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from fingerspelling.constants import (
    DEFAULT_SPEED, MIN_SPEED, MAX_SPEED, WORD_LENGTH_CHOICES,
)

# A word is a plain lowercase str from the vocabulary (len >= 3)
Word = str


def clamp_speed(value) -> int:
    try:
        v = int(round(float(value)))
    except (TypeError, ValueError):
        return DEFAULT_SPEED
    return max(MIN_SPEED, min(MAX_SPEED, v))


def check_word_length(value: Optional[int]) -> Optional[int]:
    if value not in WORD_LENGTH_CHOICES:
        raise ValueError(f"max word length must be one of {WORD_LENGTH_CHOICES}, got {value!r}")
    return value


@dataclass(slots=True)
class GameSettings:
    """Per-session settings. Not persisted."""
    speed: int = DEFAULT_SPEED
    max_word_length: Optional[int] = None

    def __post_init__(self):
        self.speed = clamp_speed(self.speed)
        check_word_length(self.max_word_length)
