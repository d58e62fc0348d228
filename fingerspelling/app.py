from kivy.app import App
from kivy.core.window import Window
from fingerspelling.constants import WINDOW_SIZE
from fingerspelling.models.state import GameSettings
from fingerspelling.models.words import WordSource
from fingerspelling.screens.main import FingerspellingScreen
from fingerspelling.services.assets import LetterImages
from fingerspelling.services.feedback import FeedbackService
from fingerspelling.services.game import GameController
from fingerspelling.services.playback import PlaybackService
Window.size = WINDOW_SIZE


class FingerspellingApp(App):
    title = "Fingerspelling"

    def build(self):
        # one set of state objects per session, handed to the screen explicitly
        settings = GameSettings()
        words = WordSource(max_length=settings.max_word_length)
        playback = PlaybackService(words, images=LetterImages(), speed=settings.speed)
        feedback = FeedbackService()
        self.controller = GameController(playback, feedback, settings)
        return FingerspellingScreen(self.controller)

    def on_stop(self):
        controller = getattr(self, "controller", None)
        if controller:
            controller.cleanup()


def main():
    FingerspellingApp().run()


if __name__ == "__main__":
    main()
