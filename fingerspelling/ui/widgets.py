from kivy.uix.button import Button
from kivy.uix.widget import Widget
from kivy.properties import BooleanProperty, ListProperty, NumericProperty, StringProperty
from kivy.graphics import Color, Line, Rectangle, RoundedRectangle
from kivy.core.text import Label as CoreLabel
from kivy.metrics import sp


class PillButton(Button):
    """Full-width rounded button. `ghost` draws an outline instead of a fill."""
    corner_radius = NumericProperty(40)
    ghost = BooleanProperty(False)
    fill_color = ListProperty([0.20, 0.52, 0.90, 1])

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.background_normal = ""
        self.background_down = ""
        self.background_color = (0, 0, 0, 0)
        self.bind(
            pos=self._update_canvas,
            size=self._update_canvas,
            state=self._update_canvas,
            disabled=self._update_canvas,
            ghost=self._update_canvas,
            fill_color=self._update_canvas,
            corner_radius=self._update_canvas,
        )
        self._update_canvas()

    def _update_canvas(self, *_):
        r = float(min(self.corner_radius, self.height / 2.0 if self.height else self.corner_radius))
        rgba = list(self.fill_color)
        if self.disabled:
            rgba[3] = rgba[3] * 0.5
        elif self.state == "down":
            rgba = [c * 0.85 for c in rgba[:3]] + [rgba[3]]
        self.canvas.before.clear()
        with self.canvas.before:
            Color(*rgba)
            if self.ghost:
                Line(rounded_rectangle=(self.x, self.y, self.width, self.height, r), width=1)
            else:
                RoundedRectangle(pos=self.pos, size=self.size, radius=[(r, r)] * 4)
        self.color = rgba if self.ghost else (1, 1, 1, 0.5 if self.disabled else 1)


class LetterDisplay(Widget):
    """Hand-sign image for one letter; draws the letter itself when no image exists."""
    source = StringProperty("", allownone=True)
    glyph = StringProperty("")
    offset_x = NumericProperty(0)
    glyph_sp = NumericProperty(120)
    glyph_color = ListProperty([0.95, 0.98, 1.00, 1.0])

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        cb = self._redraw
        self.bind(pos=cb, size=cb, source=cb, glyph=cb, offset_x=cb, glyph_sp=cb, glyph_color=cb)

    def _redraw(self, *_):
        self.canvas.clear()
        x = self.x + self.offset_x
        with self.canvas:
            if self.source:
                Color(1, 1, 1, 1)
                side = min(self.width, self.height)
                Rectangle(source=self.source, pos=(x + (self.width - side) / 2.0, self.y + (self.height - side) / 2.0), size=(side, side))
            elif self.glyph:
                lbl = CoreLabel(text=self.glyph.upper(), font_size=sp(self.glyph_sp), bold=True); lbl.refresh()
                tw, th = lbl.texture.size
                Color(*self.glyph_color)
                Rectangle(texture=lbl.texture, pos=(x + (self.width - tw) / 2.0, self.y + (self.height - th) / 2.0), size=(tw, th))


class FeedbackIcon(Widget):
    """Check mark in a green circle, or a cross in a red one."""
    is_correct = BooleanProperty(False)
    good_color = ListProperty([0.25, 0.65, 0.38, 1])
    bad_color = ListProperty([0.85, 0.32, 0.35, 1])
    line_width = NumericProperty(6)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        cb = self._redraw
        self.bind(pos=cb, size=cb, is_correct=cb, good_color=cb, bad_color=cb, line_width=cb)

    def _redraw(self, *_):
        self.canvas.clear()
        cx, cy = self.center
        rad = max(1.0, min(self.width, self.height) / 2.0 - self.line_width)
        with self.canvas:
            Color(*(self.good_color if self.is_correct else self.bad_color))
            Line(circle=(cx, cy, rad), width=self.line_width)
            k = rad * 0.45
            if self.is_correct:
                Line(points=[cx - k, cy, cx - k * 0.25, cy - k * 0.75, cx + k, cy + k * 0.7], width=self.line_width)
            else:
                Line(points=[cx - k, cy - k, cx + k, cy + k], width=self.line_width)
                Line(points=[cx - k, cy + k, cx + k, cy - k], width=self.line_width)
