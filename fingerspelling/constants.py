# constants.py
# Central knobs for playback tempo, answer sequencing and the window.

from pathlib import Path

# Speed slider bounds (letters per interval)
MIN_SPEED = 1
MAX_SPEED = 11
DEFAULT_SPEED = 3

# Higher value = slower playback. Interval between letters is NUMERATOR / speed.
PLAYBACK_NUMERATOR = 2.0

# Deferred actions (seconds)
POST_SUBMIT_DELAY = 2.0
WRONG_ANSWER_DELAY = 0.5
NEXT_WORD_DELAY = 1.0

# Max word length picker; None means "any length"
WORD_LENGTH_CHOICES = (3, 4, 5, 6, None)
MIN_WORD_LENGTH = 3

# Letter artwork
RES_DIR = Path(__file__).resolve().parent / "res"
LETTER_IMAGE_DIR = RES_DIR / "letters"
LETTER_IMAGE_PATTERN = "{letter}-lauren-nobg.png"

# Layout
WINDOW_SIZE = (480, 860)
REPEAT_LETTER_OFFSET = 20

THEME = {
    "bg": (0.07, 0.08, 0.10, 1),
    "surface": (0.12, 0.14, 0.18, 1),
    "text": (0.95, 0.98, 1, 1),
    "muted": (0.78, 0.82, 0.88, 1),
    "primary": (0.20, 0.52, 0.90, 1),
    "success": (0.25, 0.65, 0.38, 1),
    "danger": (0.85, 0.32, 0.35, 1),
    "closeButton": (0.5, 0.5, 0.5, 1),
}
