from __future__ import annotations
from typing import Optional

from kivy.clock import Clock
from kivy.event import EventDispatcher
from kivy.logger import Logger
from kivy.properties import NumericProperty, StringProperty

from fingerspelling.constants import NEXT_WORD_DELAY, POST_SUBMIT_DELAY, WRONG_ANSWER_DELAY
from fingerspelling.models.state import GameSettings, check_word_length, clamp_speed
from fingerspelling.services.feedback import FeedbackService
from fingerspelling.services.playback import PlaybackService


def compare_answer(answer: Optional[str], word: Optional[str]) -> bool:
    return (answer or "").strip().lower() == (word or "").lower()


class GameController(EventDispatcher):
    """Wires user actions to the playback and feedback state machines.

    Two deferred slots are kept on the clock:
      - auto-play of the next word (cancelled by stop/reveal)
      - the post-answer action (hide or advance); scheduling a new one
        cancels the one it replaces
    """

    score = NumericProperty(0)
    answer = StringProperty("")

    def __init__(self, playback: PlaybackService, feedback: FeedbackService, settings: Optional[GameSettings] = None, clock=Clock, **kwargs):
        super().__init__(**kwargs)
        self.playback = playback
        self.feedback = feedback
        self.settings = settings or GameSettings()
        self._clock = clock
        self._autoplay_ev = None
        self._pending_ev = None
        self.apply_settings()

    @property
    def answer_is_correct(self) -> bool:
        return compare_answer(self.answer, self.playback.current_word)

    # ---- Settings ----
    def apply_settings(self):
        self.playback.speed = self.settings.speed
        self.playback.word_source.max_length = self.settings.max_word_length

    def set_speed(self, value):
        self.settings.speed = clamp_speed(value)
        self.playback.speed = self.settings.speed

    def set_max_word_length(self, value: Optional[int]):
        self.settings.max_word_length = check_word_length(value)
        self.playback.word_source.max_length = self.settings.max_word_length

    # ---- Handlers ----
    def play(self):
        if self.feedback.should_disable_controls:
            return
        self._play_word()

    def stop(self):
        self._cancel_autoplay()
        self.playback.stop()
        self.feedback.hide()

    def submit(self, answer: Optional[str] = None):
        # return key can fire repeatedly after a correct answer; input is
        # also locked while a revealed word waits to be replaced
        if self.feedback.should_disable_controls:
            return
        if answer is not None:
            self.answer = answer
        self.stop()
        self.feedback.show()
        if self.answer_is_correct:
            self.feedback.mark_correct()
            self.score += 1
            Logger.info(f"Fingerspelling: correct answer {self.playback.current_word!r}, score {self.score}")
            self._defer(POST_SUBMIT_DELAY, self.advance_to_next_word)
        else:
            Logger.debug(f"Fingerspelling: wrong answer {self.answer!r}")
            self._defer(WRONG_ANSWER_DELAY, self.feedback.hide)

    def reveal(self):
        if self.feedback.should_disable_controls:
            return
        self._cancel_autoplay()
        self.playback.stop()
        self.feedback.reveal()
        Logger.debug(f"Fingerspelling: revealed {self.playback.current_word!r}")
        self._defer(POST_SUBMIT_DELAY, self._finish_reveal)

    def advance_to_next_word(self):
        self.answer = ""
        self.playback.stop()
        self.playback.set_next_word()
        self.feedback.reset()
        self._cancel_autoplay()
        self._autoplay_ev = self._clock.schedule_once(self._on_autoplay, NEXT_WORD_DELAY)

    def cleanup(self):
        self._cancel_autoplay()
        self._cancel_pending()
        self.playback.stop()

    # ---- Internals ----
    def _play_word(self):
        self.playback.play()
        self.feedback.hide()

    def _finish_reveal(self):
        self.feedback.hide()
        self.advance_to_next_word()

    def _on_autoplay(self, dt):
        self._autoplay_ev = None
        self._play_word()

    def _defer(self, delay: float, action):
        self._cancel_pending()

        def _fire(dt):
            self._pending_ev = None
            action()

        self._pending_ev = self._clock.schedule_once(_fire, delay)

    def _cancel_autoplay(self):
        if self._autoplay_ev is not None:
            self._autoplay_ev.cancel()
            self._autoplay_ev = None

    def _cancel_pending(self):
        if self._pending_ev is not None:
            self._pending_ev.cancel()
            self._pending_ev = None
