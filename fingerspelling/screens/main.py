from kivy.uix.boxlayout import BoxLayout
from kivy.uix.anchorlayout import AnchorLayout
from kivy.uix.label import Label
from kivy.uix.slider import Slider
from kivy.uix.textinput import TextInput
from kivy.uix.widget import Widget
from kivy.core.window import Window
from kivy.graphics import Color, Rectangle
from kivy.clock import Clock
from kivy.metrics import sp
from fingerspelling.constants import MIN_SPEED, MAX_SPEED, REPEAT_LETTER_OFFSET, THEME
from fingerspelling.services.game import GameController
from fingerspelling.ui.widgets import FeedbackIcon, LetterDisplay, PillButton
from .settings import SettingsScreen


class FingerspellingScreen(SettingsScreen, BoxLayout):
    def __init__(self, controller: GameController, **kwargs):
        super().__init__(**kwargs)
        self.orientation = 'vertical'
        self.padding = (20, 10, 20, 10)
        self.spacing = 10
        self.theme = dict(THEME)

        self.controller = controller
        self.playback = controller.playback
        self.feedback = controller.feedback
        self._refresh_scheduled = False

        with self.canvas.before:
            Color(*self.theme["bg"])
            self.rect = Rectangle(size=Window.size, pos=self.pos)
        self.bind(size=self._update_rect, pos=self._update_rect)

        self._build_ui()

        cb = lambda *_: self.schedule_refresh()
        self.controller.bind(score=cb, answer=self._on_controller_answer)
        self.playback.bind(
            current_word=cb, letter_index=cb, is_playing=cb,
            is_pending_next_word=cb, speed=cb,
        )
        self.feedback.bind(is_shown=cb, has_correct_answer=cb, is_revealed=cb)
        self.refresh()

    # ---- UI building ----
    def _build_ui(self):
        # Status bar: score, speed, settings
        header = BoxLayout(size_hint=(1, None), height=44, spacing=10)
        self.score_label = Label(text="", font_size=sp(18), bold=True, size_hint=(None, 1), width=120, color=self.theme["text"], halign='left')
        self.speed_label = Label(text="", font_size=sp(16), size_hint=(None, 1), width=120, color=self.theme["muted"], halign='left')
        settings_btn = PillButton(text="Settings", font_size=16, size_hint=(None, 1), width=110, ghost=True, fill_color=self.theme["primary"])
        settings_btn.bind(on_release=self.open_settings_popup)
        header.add_widget(self.score_label)
        header.add_widget(self.speed_label)
        header.add_widget(Widget())
        header.add_widget(settings_btn)
        self.add_widget(header)

        # Revealed / correct word
        self.word_label = Label(text="", font_size=sp(34), size_hint=(1, None), height=0, opacity=0, color=self.theme["text"])
        self.add_widget(self.word_label)

        # Answer input + reveal
        answer_row = BoxLayout(size_hint=(1, None), height=44, spacing=8)
        self.answer_input = TextInput(
            hint_text="WORD", multiline=False, font_size=sp(18), write_tab=False,
            text_validate_unfocus=False,
        )
        self.answer_input.bind(text=self._on_input_text)
        self.answer_input.bind(on_text_validate=lambda *_: self.controller.submit())
        self.reveal_btn = PillButton(text="Reveal", font_size=14, size_hint=(None, 1), width=90, ghost=True, fill_color=self.theme["primary"])
        self.reveal_btn.bind(on_release=lambda *_: self.controller.reveal())
        answer_row.add_widget(self.answer_input)
        answer_row.add_widget(self.reveal_btn)
        self.add_widget(answer_row)

        # Main display
        display = AnchorLayout(size_hint=(1, 1), anchor_x='center', anchor_y='center')
        self.main_box = BoxLayout(size_hint=(None, None), size=(225, 225))
        self.letter_display = LetterDisplay(size_hint=(1, 1))
        self.feedback_icon = FeedbackIcon(size_hint=(1, 1))
        display.add_widget(self.main_box)
        self.add_widget(display)

        # Speed slider
        speed_row = BoxLayout(size_hint=(1, None), height=44, spacing=8)
        speed_row.add_widget(Label(text="slow", font_size=sp(14), size_hint=(None, 1), width=50, color=(0.6, 0.6, 0.6, 1)))
        self.speed_slider = Slider(min=MIN_SPEED, max=MAX_SPEED, step=1, value=self.playback.speed)
        self.speed_slider.bind(value=lambda inst, val: self.controller.set_speed(val))
        speed_row.add_widget(self.speed_slider)
        speed_row.add_widget(Label(text="fast", font_size=sp(14), size_hint=(None, 1), width=50, color=(0.6, 0.6, 0.6, 1)))
        self.add_widget(speed_row)

        # Play / stop
        self.playback_btn = PillButton(text="Play", font_size=20, size_hint=(1, None), height=56, fill_color=self.theme["primary"])
        self.playback_btn.bind(on_release=self._on_playback_btn)
        self.add_widget(self.playback_btn)

    def _update_rect(self, instance, value):
        self.rect.pos = instance.pos
        self.rect.size = instance.size

    # ---- Handlers ----
    def _on_playback_btn(self, *_):
        if self.playback.is_active:
            self.controller.stop()
        else:
            self.controller.play()

    def _on_input_text(self, inst, value):
        if self.controller.answer != value:
            self.controller.answer = value

    def _on_controller_answer(self, inst, value):
        if self.answer_input.text != value:
            self.answer_input.text = value

    # ---- Rendering ----
    def schedule_refresh(self):
        if self._refresh_scheduled:
            return
        self._refresh_scheduled = True
        Clock.schedule_once(self._run_refresh, 0)

    def _run_refresh(self, dt):
        self._refresh_scheduled = False
        self.refresh()

    def refresh(self):
        pb, fb = self.playback, self.feedback
        disabled = fb.should_disable_controls

        self.score_label.text = f"Score {int(self.controller.score)}"
        self.speed_label.text = f"Speed {int(pb.speed)}"

        if disabled:
            self.word_label.text = pb.current_word.upper()
            self.word_label.height, self.word_label.opacity = 44, 1
        else:
            self.word_label.text = ""
            self.word_label.height, self.word_label.opacity = 0, 0

        # input stays in the tree so the keyboard does not close
        self.answer_input.opacity = 0 if disabled else 1
        self.answer_input.disabled = disabled
        self.reveal_btn.opacity = 0 if disabled else 1
        self.reveal_btn.disabled = disabled or pb.is_playing

        self.main_box.clear_widgets()
        if pb.is_playing:
            self.letter_display.source = pb.current_letter_image
            self.letter_display.glyph = pb.current_letter
            self.letter_display.offset_x = -REPEAT_LETTER_OFFSET if pb.current_letter_is_repeat else 0
            self.main_box.add_widget(self.letter_display)
        elif fb.is_shown or fb.has_correct_answer:
            self.feedback_icon.is_correct = fb.has_correct_answer
            self.main_box.add_widget(self.feedback_icon)

        self.speed_slider.disabled = pb.is_playing
        if self.speed_slider.value != pb.speed:
            self.speed_slider.value = pb.speed

        if pb.is_active:
            self.playback_btn.text = "Stop"
            self.playback_btn.ghost = True
            self.playback_btn.disabled = False
        else:
            self.playback_btn.text = "Play"
            self.playback_btn.ghost = False
            self.playback_btn.disabled = disabled
