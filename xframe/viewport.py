"""Screen-space viewport rectangle reset every frame."""

from __future__ import annotations

from dataclasses import dataclass

from xframe.simpledraw import WHITE, SimpleDraw


@dataclass
class Viewport:
    """A rectangle on screen, optionally outlined when drawn."""

    pos_x: float = 0.0
    pos_y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    visible: bool = False

    def on_new_frame(self) -> None:
        """Reset to an empty, hidden viewport."""
        self.pos_x = 0.0
        self.pos_y = 0.0
        self.width = 0.0
        self.height = 0.0
        self.visible = False

    def set_viewport(self, x: float, y: float, width: float, height: float) -> None:
        """Set the rectangle; negative values are clamped to zero."""
        self.pos_x = max(float(x), 0.0)
        self.pos_y = max(float(y), 0.0)
        self.width = max(float(width), 0.0)
        self.height = max(float(height), 0.0)

    def show_viewport(self, show: bool) -> None:
        self.visible = bool(show)

    @property
    def min_x(self) -> float:
        return self.pos_x

    @property
    def max_x(self) -> float:
        return self.pos_x + self.width

    @property
    def min_y(self) -> float:
        return self.pos_y

    @property
    def max_y(self) -> float:
        return self.pos_y + self.height

    def draw(self, simple_draw: SimpleDraw) -> None:
        """Outline the viewport in white if it is shown."""
        if self.visible:
            simple_draw.add_screen_rect(
                self.min_x, self.min_y, self.max_x, self.max_y, WHITE
            )