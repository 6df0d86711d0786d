"""Interactive electric field simulation: input handling and the main loop."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Optional, Sequence

from chargefield.field import ElectricField
from chargefield.geometry import arrow_vertices, field_grid, screen_to_world
from chargefield.menu import Action, Key, Menu, MouseButton
from chargefield.sensor import Sensor

DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 720
GRID_DENSITY = 25
WINDOW_TITLE = "Campos Eléctricos"
TITLE_TEXT = "Simulación de cargas eléctricas"

_MENU_X = 20.0
_MENU_TOP_MARGIN = 50.0
_MENU_SPACING = 50.0
_MENU_SCALE = 0.66
_MENU_NORMAL = (0.75, 0.75, 0.75)
_MENU_HOVER = (0.95, 0.95, 0.95)
_SPAWN_EXTENT = 0.8
_BACKGROUND = (0.1, 0.1, 0.15)
_ARROW_COLOR = (1.0, 1.0, 1.0)


class Simulation:
    """State of the simulation and its reaction to window input events."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        text_renderer=None,
        rng: Optional[random.Random] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.field = ElectricField()
        self.sensor = Sensor()
        self.menu = Menu(text_renderer, height)
        self.dragging_charge = False
        self.dragging_sensor = False
        self.selected_charge: Optional[int] = None
        self.should_close = False
        self.fps = 0.0
        self._frame_count = 0
        self._last_time = 0.0
        self._setup_menu()

    @property
    def show_menu(self) -> bool:
        return self.menu.visible

    @show_menu.setter
    def show_menu(self, value: bool) -> None:
        self.menu.visible = value

    def _random_spot(self) -> tuple[float, float]:
        x = (self.rng.random() * 2.0 - 1.0) * _SPAWN_EXTENT
        y = (self.rng.random() * 2.0 - 1.0) * _SPAWN_EXTENT
        return x, y

    def _continue(self) -> None:
        self.show_menu = False

    def _add_positive(self) -> None:
        self.field.add_charge(*self._random_spot(), 1.0)

    def _add_negative(self) -> None:
        self.field.add_charge(*self._random_spot(), -1.0)

    def _exit(self) -> None:
        self.should_close = True

    def _toggle_sensor(self) -> None:
        self.sensor.active = not self.sensor.active
        self.show_menu = False

    def _setup_menu(self) -> None:
        entries = (
            ("Continue simulation", self._continue),
            ("Add positive charge", self._add_positive),
            ("Add negative charge", self._add_negative),
            ("Clear charges", self.field.clear_charges),
            ("Exit", self._exit),
            ("Toggle sensor", self._toggle_sensor),
        )
        menu_y = self.height - _MENU_TOP_MARGIN
        for text, callback in entries:
            self.menu.add_item(
                text, _MENU_X, menu_y, _MENU_SCALE, _MENU_NORMAL, _MENU_HOVER, callback
            )
            menu_y -= _MENU_SPACING

    def handle_mouse_button(self, button: int, action: int, xpos: float, ypos: float) -> None:
        """React to a mouse button event at a cursor position (top-left origin)."""
        if self.show_menu:
            self.menu.process_mouse_click(button, action)
            return
        if button != MouseButton.LEFT:
            return
        world_x, world_y = screen_to_world(xpos, ypos, self.width, self.height)
        if action == Action.PRESS:
            if self.sensor.active and self.sensor.is_point_on_sensor(world_x, world_y):
                self.dragging_sensor = True
            else:
                self.selected_charge = self.field.find_charge_at(world_x, world_y)
                if self.selected_charge is not None:
                    self.dragging_charge = True
        elif action == Action.RELEASE:
            self.dragging_charge = False
            self.selected_charge = None
            self.dragging_sensor = False

    def handle_cursor(self, xpos: float, ypos: float) -> None:
        """React to cursor movement: hover the menu or drag a charge or the sensor."""
        world_x, world_y = screen_to_world(xpos, ypos, self.width, self.height)
        if self.show_menu:
            self.menu.process_mouse_movement(xpos, ypos)
        elif self.dragging_sensor:
            self.sensor.position = (world_x, world_y)
            self.sensor.update_field_vector(self.field)
        elif self.dragging_charge and self.selected_charge is not None:
            self.field.move_charge(self.selected_charge, world_x, world_y)
            if self.sensor.active:
                self.sensor.update_field_vector(self.field)

        if not self.dragging_sensor:
            self.selected_charge = self.field.find_charge_at(world_x, world_y)

    def handle_scroll(self, xoffset: float, yoffset: float) -> None:
        """Change the selected charge with the vertical scroll amount."""
        if yoffset != 0 and self.selected_charge is not None:
            self.field.change_charge_size(self.selected_charge, yoffset)

    def handle_key(self, key: int, action: int) -> None:
        """React to a key event: toggle, navigate and activate the menu."""
        if action != Action.PRESS:
            return
        if key == Key.ESCAPE:
            self.show_menu = not self.show_menu
        if key == Key.ENTER:
            self.menu.process_key_press(key, action)
        if key in (Key.DOWN, Key.UP):
            if not self.show_menu:
                self.show_menu = True
            elif key == Key.DOWN:
                self.menu.switch_option_down(key, action)
            else:
                self.menu.switch_option_up(key, action)

    def resize(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.menu.window_height = height

    def update_fps(self, now: float) -> float:
        """Count a frame at time ``now`` (seconds); refresh the rate once a second."""
        self._frame_count += 1
        elapsed = now - self._last_time
        if elapsed >= 1.0:
            self.fps = self._frame_count / elapsed
            self._frame_count = 0
            self._last_time = now
        return self.fps


def _pygame_button(button: int) -> Optional[MouseButton]:
    return {1: MouseButton.LEFT, 2: MouseButton.MIDDLE, 3: MouseButton.RIGHT}.get(button)


def _pygame_key(pygame, key: int) -> Optional[Key]:
    mapping = {
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_RETURN: Key.ENTER,
        pygame.K_KP_ENTER: Key.ENTER,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
    }
    return mapping.get(key)


def run(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT, font_path: Optional[str] = None) -> int:
    """Open a window and run the simulation until it is closed."""
    import pygame

    from chargefield.rendering import (
        ChargeRenderer,
        SensorRenderer,
        TextRenderer,
        _rgb,
        draw_shape,
    )

    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        text = TextRenderer(screen, font_path, 24)
        sim = Simulation(width, height, text_renderer=text)
        charges_renderer = ChargeRenderer(text)
        sensor_renderer = SensorRenderer(text)
        arrow = arrow_vertices()
        clock = pygame.time.Clock()

        while not sim.should_close:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    sim.should_close = True
                elif event.type == pygame.VIDEORESIZE:
                    sim.resize(max(1, event.w), max(1, event.h))
                    text.surface = pygame.display.get_surface()
                elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                    button = _pygame_button(event.button)
                    if button is not None:
                        action = Action.PRESS if event.type == pygame.MOUSEBUTTONDOWN else Action.RELEASE
                        sim.handle_mouse_button(button, action, *event.pos)
                elif event.type == pygame.MOUSEMOTION:
                    sim.handle_cursor(*event.pos)
                elif event.type == pygame.MOUSEWHEEL:
                    sim.handle_scroll(event.x, event.y)
                elif event.type == pygame.KEYDOWN:
                    key = _pygame_key(pygame, event.key)
                    if key is not None:
                        sim.handle_key(key, Action.PRESS)

            surface = text.surface
            surface.fill(_rgb(_BACKGROUND))
            grid = field_grid(
                sim.field.vector_field(), sim.field.charges, sim.width, sim.height, GRID_DENSITY
            )
            for item in grid:
                if item.length > 0.0:
                    draw_shape(surface, arrow, (item.x, item.y), item.angle, item.length, _ARROW_COLOR)

            charges_renderer.draw(sim.field.charges)
            if sim.show_menu:
                sim.menu.render()
            if sim.sensor.active:
                sim.sensor.update_field_vector(sim.field)
                sensor_renderer.draw(sim.sensor)

            fps = sim.update_fps(pygame.time.get_ticks() / 1000.0)
            text.render_text(
                f"FPS: {fps:.1f}", 20.0, sim.height - (sim.height / 2.0 + 30.0), 0.75, (1.0, 1.0, 0.0)
            )
            text.render_text(TITLE_TEXT, 20.0, 17.5, 0.66, (1.0, 1.0, 1.0))

            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="chargefield", description="Electric field simulation.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="window width in pixels")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="window height in pixels")
    parser.add_argument("--font", default=None, help="path of a TrueType font to use")
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("window size must be positive")
    try:
        return run(args.width, args.height, args.font)
    except (OSError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())