from kivy.uix.boxlayout import BoxLayout
from kivy.uix.popup import Popup
from kivy.uix.label import Label
from kivy.uix.togglebutton import ToggleButton
from fingerspelling.constants import WORD_LENGTH_CHOICES
from fingerspelling.models.words import word_length_label
from fingerspelling.ui.widgets import PillButton


class SettingsScreen:
    def open_settings_popup(self, *_):
        root = BoxLayout(orientation='vertical', spacing=10, padding=12)
        root.add_widget(Label(text="MAX WORD LENGTH", font_size=18, size_hint=(1, 0.2), color=self.theme["muted"]))

        # Segmented picker
        picker = BoxLayout(size_hint=(1, 0.3), spacing=4)
        current = self.controller.settings.max_word_length

        def _on_pick(btn, state, value):
            if state == 'down':
                self.controller.set_max_word_length(value)

        for n in WORD_LENGTH_CHOICES:
            btn = ToggleButton(
                text=word_length_label(n), group="max_word_length", font_size=16,
                state='down' if n == current else 'normal', allow_no_selection=False,
            )
            btn.bind(state=lambda inst, val, n=n: _on_pick(inst, val, n))
            picker.add_widget(btn)
        root.add_widget(picker)

        root.add_widget(BoxLayout(size_hint=(1, 0.25)))
        done_btn = PillButton(text="Done", font_size=20, size_hint=(1, 0.25), fill_color=self.theme["primary"])
        root.add_widget(done_btn)

        self.settings_popup = Popup(title="Settings", content=root, size_hint=(0.95, 0.45), auto_dismiss=True)
        done_btn.bind(on_release=lambda *_: self.settings_popup.dismiss())
        self.settings_popup.open()
