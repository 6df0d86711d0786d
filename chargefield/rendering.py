"""Drawing of text, charges and the field sensor onto a pygame surface."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence

import pygame

from chargefield.field import ElectricCharge
from chargefield.geometry import Triangle, Vector, circle_vertices, world_to_screen
from chargefield.sensor import Sensor, sensor_arrow_vertices, sensor_circle_vertices

Color = tuple[float, float, float]

WHITE: Color = (1.0, 1.0, 1.0)
RED: Color = (1.0, 0.0, 0.0)
YELLOW: Color = (1.0, 1.0, 0.0)

_MIN_CHARGE_SIZE = 0.05
_CHARGE_SIZE_STEP = 0.03
_MIN_LABEL_SCALE = 0.4
_SENSOR_TEXT_SCALE = 0.5
_SENSOR_TEXT_OFFSET = 15.0


def _rgb(color: Color) -> tuple[int, int, int]:
    """Convert a colour with channels in [0, 1] to 8-bit channels."""
    return tuple(max(0, min(255, round(channel * 255))) for channel in color)


class TextRenderer:
    """Draws text onto a surface; positions are pixels with a bottom-left origin and y on the baseline."""

    def __init__(self, surface: pygame.Surface, font_path: Optional[str] = None, font_size: int = 24) -> None:
        if font_size <= 0:
            raise ValueError(f"font size must be positive, got {font_size}")
        if not pygame.font.get_init():
            pygame.font.init()
        self.surface = surface
        self.font = pygame.font.Font(font_path, font_size)

    def render_text(self, text: str, x: float, y: float, scale: float, color: Color) -> pygame.Rect:
        """Draw ``text`` with its baseline starting at (x, y) and return the area covered."""
        surface_height = self.surface.get_height()
        ascent = self.font.get_ascent()
        top = surface_height - y - ascent * scale
        if not text or scale <= 0:
            return pygame.Rect(round(x), round(top), 0, 0)
        rendered = self.font.render(text, True, _rgb(color))
        width = round(rendered.get_width() * scale)
        height = round(rendered.get_height() * scale)
        if width <= 0 or height <= 0:
            return pygame.Rect(round(x), round(top), 0, 0)
        if (width, height) != rendered.get_size():
            rendered = pygame.transform.smoothscale(rendered, (width, height))
        destination = pygame.Rect(round(x), round(top), width, height)
        self.surface.blit(rendered, destination)
        return destination


def charge_radius(charge: float) -> float:
    """World radius of a drawn charge, growing with its magnitude."""
    return _MIN_CHARGE_SIZE + _CHARGE_SIZE_STEP * abs(charge)


def charge_label(charge: float) -> str:
    """Text shown on a charge: its value with one decimal and the unit."""
    return f"{charge:.1f}C"


def _to_world(point: Vector, position: Vector, cos_a: float, sin_a: float, scale: float) -> Vector:
    px, py = point[0] * scale, point[1] * scale
    return (
        position[0] + px * cos_a - py * sin_a,
        position[1] + px * sin_a + py * cos_a,
    )


def draw_shape(
    surface: pygame.Surface,
    vertices: Sequence[Triangle],
    position: Vector,
    angle: float,
    scale: float,
    color: Color,
) -> list[Triangle]:
    """Scale, rotate and place model triangles in the world and fill them on ``surface``.

    Returns the triangles in surface pixels (top-left origin).
    """
    width, height = surface.get_size()
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    rgb = _rgb(color)
    drawn = []
    for triangle in vertices:
        pixels = []
        for point in triangle:
            wx, wy = _to_world(point, position, cos_a, sin_a, scale)
            sx, sy = world_to_screen(wx, wy, width, height)
            pixels.append((sx, height - sy))
        pixel_triangle = tuple(pixels)
        pygame.draw.polygon(surface, rgb, pixel_triangle)
        drawn.append(pixel_triangle)
    return drawn


class ChargeRenderer:
    """Draws charges as discs sized by magnitude, each labelled with its value."""

    def __init__(
        self,
        text_renderer: TextRenderer,
        segments: int = 32,
        positive_color: Color = (0.9, 0.2, 0.2),
        negative_color: Color = (0.2, 0.4, 0.9),
        neutral_color: Color = (0.6, 0.6, 0.6),
        label_color: Color = WHITE,
    ) -> None:
        self.text_renderer = text_renderer
        self.disc = circle_vertices(segments)
        self.positive_color = positive_color
        self.negative_color = negative_color
        self.neutral_color = neutral_color
        self.label_color = label_color

    def color_for(self, charge: float) -> Color:
        if charge > 0:
            return self.positive_color
        if charge < 0:
            return self.negative_color
        return self.neutral_color

    def draw(self, charges: Iterable[ElectricCharge]) -> None:
        """Draw every disc first, then every label on top."""
        charges = list(charges)
        surface = self.text_renderer.surface
        for charge in charges:
            draw_shape(
                surface,
                self.disc,
                charge.position,
                0.0,
                charge_radius(charge.charge),
                self.color_for(charge.charge),
            )
        width, height = surface.get_size()
        for charge in charges:
            screen_x, screen_y = world_to_screen(charge.x, charge.y, width, height)
            text_scale = max(_MIN_LABEL_SCALE, charge_radius(charge.charge) * 10.0)
            self.text_renderer.render_text(
                charge_label(charge.charge),
                screen_x - abs(charge.charge) * 10.0 - 20.0,
                screen_y - 7.5,
                text_scale,
                self.label_color,
            )


class SensorRenderer:
    """Draws an active sensor: its field arrow, its disc and a text readout."""

    def __init__(self, text_renderer: TextRenderer) -> None:
        self.text_renderer = text_renderer
        self.arrow = sensor_arrow_vertices()
        self.disc = sensor_circle_vertices()

    def draw(self, sensor: Sensor) -> None:
        if not sensor.active:
            return
        surface = self.text_renderer.surface
        if sensor.significant:
            draw_shape(
                surface,
                self.arrow,
                sensor.position,
                sensor.arrow_angle,
                sensor.arrow_length,
                RED,
            )
        draw_shape(surface, self.disc, sensor.position, 0.0, 1.0, YELLOW)

        width, height = surface.get_size()
        screen_x, screen_y = world_to_screen(sensor.x, sensor.y, width, height)
        for line_number, line in enumerate(sensor.readout(), start=1):
            self.text_renderer.render_text(
                line,
                screen_x + 15.0,
                screen_y - line_number * _SENSOR_TEXT_OFFSET,
                _SENSOR_TEXT_SCALE,
                WHITE,
            )