from __future__ import annotations
from pathlib import Path
from typing import Optional

from kivy.logger import Logger

from fingerspelling.constants import LETTER_IMAGE_DIR, LETTER_IMAGE_PATTERN


class MissingAssetError(LookupError):
    """No hand-sign image exists for a letter."""

    def __init__(self, letter: str, path: Path):
        super().__init__(f"no image for letter {letter!r} at {path}")
        self.letter = letter
        self.path = path


def letter_image_path(letter: str, image_dir: Path = LETTER_IMAGE_DIR) -> Path:
    if not letter or len(letter) != 1:
        raise ValueError(f"expected a single letter, got {letter!r}")
    p = Path(image_dir) / LETTER_IMAGE_PATTERN.format(letter=letter.upper())
    if not p.exists():
        raise MissingAssetError(letter.upper(), p)
    return p


class LetterImages:
    """Letter -> image source lookup.

    Missing artwork is not fatal: `get` returns None so the view can draw a
    placeholder glyph, and each missing letter is warned about once.
    """

    def __init__(self, image_dir: Path = LETTER_IMAGE_DIR):
        self.image_dir = Path(image_dir)
        self._cache: dict[str, Optional[str]] = {}

    def get(self, letter: str) -> Optional[str]:
        key = (letter or "").upper()
        if key in self._cache:
            return self._cache[key]
        try:
            src: Optional[str] = str(letter_image_path(key, self.image_dir))
        except MissingAssetError as e:
            Logger.warning(f"Fingerspelling: {e}; using placeholder glyph")
            src = None
        self._cache[key] = src
        return src

    @property
    def missing(self) -> list[str]:
        return sorted(k for k, v in self._cache.items() if v is None)
