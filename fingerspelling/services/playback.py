from __future__ import annotations
from typing import Optional

from kivy.clock import Clock
from kivy.event import EventDispatcher
from kivy.logger import Logger
from kivy.properties import (
    AliasProperty, BooleanProperty, BoundedNumericProperty, NumericProperty, StringProperty,
)

from fingerspelling.constants import DEFAULT_SPEED, MIN_SPEED, MAX_SPEED, PLAYBACK_NUMERATOR
from fingerspelling.models.state import clamp_speed
from fingerspelling.models.words import WordSource
from fingerspelling.services.assets import LetterImages


class PlaybackService(EventDispatcher):
    """Steps through the current word one letter per timer tick.

    Idle -> Playing -> Idle (last letter shown, or stop())
                    -> PendingNext (set_next_word(), waiting for auto-play)
    """

    current_word = StringProperty("")
    letter_index = NumericProperty(0)
    is_playing = BooleanProperty(False)
    is_pending_next_word = BooleanProperty(False)
    speed = BoundedNumericProperty(DEFAULT_SPEED, min=MIN_SPEED, max=MAX_SPEED, errorhandler=clamp_speed)
    # bumps on every draw, so the same word drawn twice still counts as new
    words_drawn = NumericProperty(0)

    def _get_is_active(self):
        return self.is_playing or self.is_pending_next_word

    is_active = AliasProperty(_get_is_active, None, bind=("is_playing", "is_pending_next_word"))

    def _get_current_letter(self):
        w = self.current_word
        if not w:
            return ""
        return w[min(int(self.letter_index), len(w) - 1)]

    current_letter = AliasProperty(_get_current_letter, None, bind=("current_word", "letter_index"))

    def _get_current_letter_is_repeat(self):
        i = int(self.letter_index)
        w = self.current_word
        return 0 < i < len(w) and w[i - 1] == w[i]

    current_letter_is_repeat = AliasProperty(
        _get_current_letter_is_repeat, None, bind=("current_word", "letter_index")
    )

    def __init__(self, word_source: WordSource, clock=Clock, images: Optional[LetterImages] = None, speed=DEFAULT_SPEED, **kwargs):
        super().__init__(**kwargs)
        self.word_source = word_source
        self.images = images or LetterImages()
        self._clock = clock
        self._timer = None
        self.speed = speed
        self._draw_word()

    @property
    def interval(self) -> float:
        return PLAYBACK_NUMERATOR / float(self.speed)

    @property
    def current_letter_image(self) -> Optional[str]:
        letter = self.current_letter
        return self.images.get(letter) if letter else None

    def play(self):
        self._reset_timer()
        self.letter_index = 0
        self.is_playing = True
        self.is_pending_next_word = False
        self._timer = self._clock.schedule_interval(self._on_tick, self.interval)
        Logger.debug(f"Fingerspelling: playing {self.current_word!r} every {self.interval:.2f}s")

    def stop(self):
        self._reset_timer()
        self.letter_index = 0
        self.is_playing = False
        self.is_pending_next_word = False

    def set_next_letter(self):
        if self.letter_index >= len(self.current_word) - 1:
            self.is_playing = False
        else:
            self.letter_index += 1

    def set_next_word(self):
        self._draw_word()
        self.is_pending_next_word = True

    def _draw_word(self):
        self.current_word = self.word_source.get_random_word()
        self.words_drawn += 1

    def _on_tick(self, dt):
        if self.is_playing:
            self.set_next_letter()
        if not self.is_playing:
            # unschedules the interval
            self._timer = None
            return False

    def _reset_timer(self):
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
