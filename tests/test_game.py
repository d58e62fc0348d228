import pytest

from fingerspelling.models.state import GameSettings
from fingerspelling.models.words import WordSource
from fingerspelling.services.feedback import FeedbackService
from fingerspelling.services.game import GameController, compare_answer
from fingerspelling.services.playback import PlaybackService


@pytest.mark.parametrize("answer, word, expected", [
    (" Cat ", "cat", True),
    ("CAT", "cat", True),
    ("cat\t", "Cat", True),
    ("cats", "cat", False),
    ("ca t", "cat", False),
    ("", "cat", False),
    (None, "cat", False),
])
def test_compare_answer(answer, word, expected):
    assert compare_answer(answer, word) is expected


def _correct(controller):
    return "  " + controller.playback.current_word.upper() + " "


def test_settings_pushed_into_services(clock, images):
    pb = PlaybackService(WordSource(), clock=clock, images=images)
    ctl = GameController(pb, FeedbackService(), GameSettings(speed=7, max_word_length=4), clock=clock)
    assert pb.speed == 7
    assert pb.word_source.max_length == 4


def test_play_delegates_and_hides_feedback(controller):
    controller.feedback.show()
    controller.play()
    assert controller.playback.is_playing
    assert not controller.feedback.is_shown


def test_play_ignored_while_controls_disabled(controller):
    controller.feedback.reveal()
    controller.play()
    assert not controller.playback.is_playing


def test_stop_resets_playback_and_hides_feedback(controller, clock):
    controller.play()
    controller.feedback.show()
    controller.stop()
    assert not controller.playback.is_playing
    assert not controller.feedback.is_shown
    assert clock.pending == []


def test_correct_submit_scores_and_advances(controller, clock):
    pb, fb = controller.playback, controller.feedback
    drawn = pb.words_drawn
    controller.play()
    controller.submit(_correct(controller))
    assert controller.score == 1
    assert fb.has_correct_answer
    assert fb.is_shown
    assert not pb.is_playing

    clock.advance(1.9)
    assert pb.words_drawn == drawn
    clock.advance(0.1)
    assert pb.words_drawn == drawn + 1
    assert pb.is_pending_next_word
    assert controller.answer == ""
    assert not fb.has_correct_answer
    assert not fb.is_shown

    clock.advance(1.0)
    assert pb.is_playing
    assert not pb.is_pending_next_word
    assert pb.letter_index == 0


def test_submit_is_idempotent_after_correct_answer(controller, clock):
    controller.submit(_correct(controller))
    snapshot = (controller.score, controller.answer, controller.feedback.is_shown, len(clock.pending))
    controller.submit(_correct(controller))
    controller.submit("something else")
    assert (controller.score, controller.answer, controller.feedback.is_shown, len(clock.pending)) == snapshot


def test_wrong_submit_hides_feedback_and_keeps_answer(controller, clock):
    controller.play()
    controller.submit("zzzzzzzz")
    fb = controller.feedback
    assert controller.score == 0
    assert fb.is_shown
    assert not fb.has_correct_answer
    assert not controller.playback.is_playing
    clock.advance(0.5)
    assert not fb.is_shown
    assert controller.answer == "zzzzzzzz"
    assert not controller.playback.is_pending_next_word


def test_submit_uses_bound_answer_text(controller):
    controller.answer = controller.playback.current_word
    controller.submit()
    assert controller.score == 1


def test_score_counts_each_correct_submission(controller, clock):
    for expected in range(1, 4):
        controller.submit("nope!")
        clock.advance(0.5)
        assert controller.score == expected - 1
        controller.submit(_correct(controller))
        assert controller.score == expected
        clock.advance(3.0)


def test_reveal_then_delay_resets_feedback_and_draws_word(controller, clock):
    pb, fb = controller.playback, controller.feedback
    drawn = pb.words_drawn
    controller.play()
    controller.reveal()
    assert fb.is_revealed
    assert not fb.is_shown
    assert fb.should_disable_controls
    assert not pb.is_playing

    clock.advance(2.0)
    assert not fb.is_shown
    assert not fb.is_revealed
    assert not fb.has_correct_answer
    assert pb.words_drawn == drawn + 1
    assert controller.score == 0


def test_reveal_ignored_when_already_revealed(controller, clock):
    controller.reveal()
    clock.advance(1.0)
    controller.reveal()
    clock.advance(1.0)
    # only the first reveal advanced; the new word is waiting for auto-play
    assert controller.playback.is_pending_next_word
    clock.advance(1.0)
    assert controller.playback.is_playing


def test_reveal_supersedes_pending_wrong_answer_hide(controller, clock):
    controller.submit("wrong answer")
    controller.reveal()
    clock.advance(0.5)
    # the superseded hide must not clear the reveal early
    assert controller.feedback.is_revealed


def test_stop_cancels_pending_autoplay(controller, clock):
    controller.advance_to_next_word()
    assert controller.playback.is_pending_next_word
    controller.stop()
    clock.advance(5.0)
    assert not controller.playback.is_playing
    assert not controller.playback.is_active


def test_set_speed_and_word_length(controller):
    controller.set_speed(30)
    assert controller.settings.speed == 11
    assert controller.playback.speed == 11
    controller.set_max_word_length(3)
    assert controller.playback.word_source.max_length == 3
    for _ in range(20):
        controller.advance_to_next_word()
        assert len(controller.playback.current_word) == 3
    with pytest.raises(ValueError):
        controller.set_max_word_length(10)


def test_cleanup_cancels_everything(controller, clock):
    controller.play()
    controller.submit("nope")
    controller.advance_to_next_word()
    controller.cleanup()
    assert clock.pending == []
    assert not controller.playback.is_playing


def test_submit_during_reveal_delay_is_ignored(controller, clock):
    pb, fb = controller.playback, controller.feedback
    drawn = pb.words_drawn
    controller.reveal()
    controller.submit("zzzz")
    controller.submit(pb.current_word)
    assert controller.score == 0
    assert fb.is_revealed
    clock.advance(2.0)
    assert pb.words_drawn == drawn + 1
    assert not fb.is_revealed
    assert not fb.is_shown
    assert pb.is_pending_next_word


def test_reveal_during_correct_answer_delay_is_ignored(controller, clock):
    pb, fb = controller.playback, controller.feedback
    drawn = pb.words_drawn
    controller.submit(_correct(controller))
    controller.reveal()
    assert not fb.is_revealed
    clock.advance(2.0)
    assert pb.words_drawn == drawn + 1
    assert controller.score == 1
    assert not fb.has_correct_answer


def test_stop_during_correct_answer_delay_still_advances(controller, clock):
    pb = controller.playback
    drawn = pb.words_drawn
    controller.submit(_correct(controller))
    controller.stop()
    clock.advance(2.0)
    assert pb.words_drawn == drawn + 1
    assert not controller.feedback.has_correct_answer
    clock.advance(1.0)
    assert pb.is_playing


def test_advance_while_playing_leaves_only_pending(controller, clock):
    pb = controller.playback
    controller.play()
    controller.advance_to_next_word()
    assert pb.is_pending_next_word
    assert not pb.is_playing
    assert [e for e in clock.pending if e.repeat] == []
