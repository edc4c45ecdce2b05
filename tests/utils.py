from types import SimpleNamespace


class RecordingSurface:
    """Drawing surface double that records every call it receives."""

    char_width = 6.0

    def __init__(self):
        self.fill_style = ""
        self.stroke_style = ""
        self.line_width = 1
        self.font = ""
        self.line_dash = []
        self.canvas = SimpleNamespace(width=0, height=0)
        self.calls = []

    def _record(self, name, *args):
        self.calls.append((name, *args))

    def names(self):
        return [call[0] for call in self.calls]

    def set_line_dash(self, segments):
        self.line_dash = list(segments)
        self._record("set_line_dash", list(segments))

    def begin_path(self):
        self._record("begin_path")

    def close_path(self):
        self._record("close_path")

    def move_to(self, x, y):
        self._record("move_to", x, y)

    def line_to(self, x, y):
        self._record("line_to", x, y)

    def arc(self, x, y, radius, start_angle, end_angle, counterclockwise=False):
        self._record("arc", x, y, radius, start_angle, end_angle, counterclockwise)

    def ellipse(self, x, y, radius_x, radius_y, rotation, start_angle, end_angle, counterclockwise=False):
        self._record("ellipse", x, y, radius_x, radius_y, rotation, start_angle, end_angle, counterclockwise)

    def stroke(self):
        self._record("stroke")

    def fill(self):
        self._record("fill")

    def fill_rect(self, x, y, width, height):
        # Keep the fill style in effect at the time of the call
        self._record("fill_rect", x, y, width, height, self.fill_style)

    def fill_text(self, text, x, y):
        self._record("fill_text", text, x, y)

    def stroke_text(self, text, x, y):
        self._record("stroke_text", text, x, y)

    def measure_text(self, text):
        return SimpleNamespace(width=len(text) * self.char_width)
