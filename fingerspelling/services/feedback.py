from kivy.event import EventDispatcher
from kivy.properties import AliasProperty, BooleanProperty


class FeedbackService(EventDispatcher):
    is_shown = BooleanProperty(False)
    has_correct_answer = BooleanProperty(False)
    is_revealed = BooleanProperty(False)

    def _get_should_disable_controls(self):
        return self.has_correct_answer or self.is_revealed

    should_disable_controls = AliasProperty(
        _get_should_disable_controls, None, bind=("has_correct_answer", "is_revealed")
    )

    def show(self):
        self.is_shown = True

    def hide(self):
        # keeps has_correct_answer; reset() clears it
        self.is_shown = False
        self.is_revealed = False

    def reveal(self):
        self.is_revealed = True
        self.is_shown = False

    def mark_correct(self):
        self.has_correct_answer = True

    def reset(self):
        self.has_correct_answer = False
        self.is_shown = False
