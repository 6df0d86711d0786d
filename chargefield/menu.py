"""A text menu driven by cursor movement, clicks and arrow keys."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

Color = tuple[float, float, float]

_CHAR_WIDTH = 15.0
_LINE_HEIGHT = 24.0


class Key(enum.IntEnum):
    """Keyboard keys the application reacts to."""

    ESCAPE = 256
    ENTER = 257
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265


class MouseButton(enum.IntEnum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class Action(enum.IntEnum):
    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class TextSink(Protocol):
    def render_text(
        self, text: str, x: float, y: float, scale: float, color: Color
    ) -> None: ...


@dataclass
class MenuItem:
    """One line of the menu; position and size are in pixels, bottom-left origin."""

    text: str
    x: float
    y: float
    width: float
    height: float
    normal_color: Color
    hover_color: Color
    callback: Optional[Callable[[], None]] = None
    hovered: bool = False

    @property
    def scale(self) -> float:
        return self.height / _LINE_HEIGHT

    @property
    def color(self) -> Color:
        return self.hover_color if self.hovered else self.normal_color

    def contains(self, xpos: float, ypos: float, window_height: float) -> bool:
        """Whether a cursor position (top-left origin) lies on this item."""
        gl_y = window_height - ypos
        return (
            self.x <= xpos <= self.x + self.width
            and self.y <= gl_y <= self.y + self.height
        )

    def activate(self) -> None:
        if self.callback is not None:
            self.callback()


class Menu:
    """A list of selectable text items, shown or hidden as a whole."""

    def __init__(self, text_renderer: Optional[TextSink] = None, window_height: float = 720) -> None:
        self.text_renderer = text_renderer
        self.window_height = window_height
        self.items: list[MenuItem] = []
        self.visible = False
        self.last_mouse: tuple[float, float] = (0.0, 0.0)

    def add_item(
        self,
        text: str,
        x: float,
        y: float,
        scale: float,
        normal_color: Color,
        hover_color: Color,
        callback: Optional[Callable[[], None]],
    ) -> MenuItem:
        """Append an item whose size is estimated from its text length and scale."""
        width = len(text.encode("utf-8")) * _CHAR_WIDTH * scale
        height = _LINE_HEIGHT * scale
        item = MenuItem(text, x, y, width, height, normal_color, hover_color, callback)
        self.items.append(item)
        return item

    def _hovered_index(self) -> Optional[int]:
        return next((i for i, item in enumerate(self.items) if item.hovered), None)

    def _activate_hovered(self) -> None:
        index = self._hovered_index()
        if index is not None:
            self.items[index].activate()

    def process_mouse_movement(self, xpos: float, ypos: float) -> None:
        """Update hover state from a cursor position (top-left origin)."""
        if not self.visible:
            return
        self.last_mouse = (xpos, ypos)
        for item in self.items:
            item.hovered = item.contains(xpos, ypos, self.window_height)

    def process_mouse_click(self, button: int, action: int) -> None:
        """Run the hovered item's callback on a left-button press."""
        if not self.visible or button != MouseButton.LEFT or action != Action.PRESS:
            return
        self._activate_hovered()

    def process_key_press(self, key: int, action: int) -> None:
        """Run the hovered item's callback when Enter is pressed."""
        if not self.visible or key != Key.ENTER or action != Action.PRESS:
            return
        self._activate_hovered()

    def _step(self, offset: int) -> None:
        if not self.items:
            return
        current = self._hovered_index()
        if current is None:
            target = 0 if offset > 0 else len(self.items) - 1
        else:
            self.items[current].hovered = False
            target = (current + offset) % len(self.items)
        self.items[target].hovered = True

    def switch_option_down(self, key: int, action: int) -> None:
        """Move the selection to the next item, wrapping around."""
        if not self.visible or key != Key.DOWN or action != Action.PRESS:
            return
        self._step(1)

    def switch_option_up(self, key: int, action: int) -> None:
        """Move the selection to the previous item, wrapping around."""
        if not self.visible or key != Key.UP or action != Action.PRESS:
            return
        self._step(-1)

    def render(self) -> None:
        """Draw every item through the text renderer when the menu is visible."""
        if not self.visible or self.text_renderer is None:
            return
        for item in self.items:
            self.text_renderer.render_text(item.text, item.x, item.y, item.scale, item.color)