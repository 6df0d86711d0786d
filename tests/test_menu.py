import pytest

from chargefield.menu import Action, Key, Menu, MenuItem, MouseButton

NORMAL = (0.75, 0.75, 0.75)
HOVER = (0.95, 0.95, 0.95)


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def render_text(self, text, x, y, scale, color):
        self.calls.append((text, x, y, scale, color))


def build_menu(visible=True, count=3):
    renderer = RecordingRenderer()
    menu = Menu(renderer, window_height=720)
    clicks = []
    for i in range(count):
        menu.add_item(
            f"Item {i}", 20.0, 670.0 - 50.0 * i, 0.66, NORMAL, HOVER,
            lambda i=i: clicks.append(i),
        )
    menu.visible = visible
    return menu, renderer, clicks


def test_add_item_size_scales_with_text_and_scale():
    menu = Menu(None, 720)
    short = menu.add_item("ab", 0, 0, 1.0, NORMAL, HOVER, None)
    long = menu.add_item("abcd", 0, 0, 1.0, NORMAL, HOVER, None)
    big = menu.add_item("ab", 0, 0, 2.0, NORMAL, HOVER, None)
    assert long.width == pytest.approx(2 * short.width)
    assert big.width == pytest.approx(2 * short.width)
    assert big.height == pytest.approx(2 * short.height)
    assert short.scale == pytest.approx(1.0)
    assert len(menu.items) == 3


def test_hover_uses_bottom_left_origin():
    menu, _, _ = build_menu()
    item = menu.items[0]
    cursor_y = 720 - (item.y + item.height / 2)
    menu.process_mouse_movement(item.x + 1, cursor_y)
    assert [i.hovered for i in menu.items] == [True, False, False]
    assert menu.last_mouse == (item.x + 1, cursor_y)


def test_movement_outside_clears_hover():
    menu, _, _ = build_menu()
    item = menu.items[1]
    menu.process_mouse_movement(item.x + 1, 720 - item.y - 1)
    assert menu.items[1].hovered
    menu.process_mouse_movement(item.x + item.width + 50, 720 - item.y - 1)
    assert not any(i.hovered for i in menu.items)


def test_hidden_menu_ignores_movement():
    menu, _, _ = build_menu(visible=False)
    item = menu.items[0]
    menu.process_mouse_movement(item.x + 1, 720 - item.y - 1)
    assert not item.hovered
    assert menu.last_mouse == (0.0, 0.0)


def test_click_runs_hovered_callback_only_on_left_press():
    menu, _, clicks = build_menu()
    menu.items[2].hovered = True
    menu.process_mouse_click(MouseButton.RIGHT, Action.PRESS)
    menu.process_mouse_click(MouseButton.LEFT, Action.RELEASE)
    assert clicks == []
    menu.process_mouse_click(MouseButton.LEFT, Action.PRESS)
    assert clicks == [2]


def test_click_without_hover_does_nothing():
    menu, _, clicks = build_menu()
    menu.process_mouse_click(MouseButton.LEFT, Action.PRESS)
    assert clicks == []


def test_enter_runs_hovered_callback():
    menu, _, clicks = build_menu()
    menu.items[1].hovered = True
    menu.process_key_press(Key.ESCAPE, Action.PRESS)
    assert clicks == []
    menu.process_key_press(Key.ENTER, Action.PRESS)
    assert clicks == [1]


def test_hidden_menu_ignores_enter():
    menu, _, clicks = build_menu(visible=False)
    menu.items[0].hovered = True
    menu.process_key_press(Key.ENTER, Action.PRESS)
    assert clicks == []


def test_item_without_callback_is_harmless():
    menu = Menu(None, 720)
    item = menu.add_item("x", 0, 0, 1.0, NORMAL, HOVER, None)
    menu.visible = True
    item.hovered = True
    menu.process_key_press(Key.ENTER, Action.PRESS)
    assert item.hovered


def test_switch_down_selects_first_then_wraps():
    menu, _, _ = build_menu()
    selected = []
    for _ in range(4):
        menu.switch_option_down(Key.DOWN, Action.PRESS)
        selected.append([i for i, item in enumerate(menu.items) if item.hovered])
    assert selected == [[0], [1], [2], [0]]


def test_switch_up_selects_last_then_wraps():
    menu, _, _ = build_menu()
    selected = []
    for _ in range(4):
        menu.switch_option_up(Key.UP, Action.PRESS)
        selected.append([i for i, item in enumerate(menu.items) if item.hovered])
    assert selected == [[2], [1], [0], [2]]


def test_switch_requires_matching_key():
    menu, _, _ = build_menu()
    menu.switch_option_down(Key.UP, Action.PRESS)
    menu.switch_option_up(Key.DOWN, Action.PRESS)
    menu.switch_option_down(Key.DOWN, Action.RELEASE)
    assert not any(item.hovered for item in menu.items)


def test_switch_on_empty_menu_keeps_it_empty():
    menu = Menu(None, 720)
    menu.visible = True
    menu.switch_option_down(Key.DOWN, Action.PRESS)
    menu.switch_option_up(Key.UP, Action.PRESS)
    assert menu.items == []


def test_render_uses_hover_colour_and_scale():
    menu, renderer, _ = build_menu()
    menu.items[1].hovered = True
    menu.render()
    assert [call[0] for call in renderer.calls] == ["Item 0", "Item 1", "Item 2"]
    assert [call[4] for call in renderer.calls] == [NORMAL, HOVER, NORMAL]
    for call, item in zip(renderer.calls, menu.items):
        assert call[1:3] == (item.x, item.y)
        assert call[3] == pytest.approx(0.66)


def test_render_hidden_draws_nothing():
    menu, renderer, _ = build_menu(visible=False)
    menu.render()
    assert renderer.calls == []


def test_menu_item_contains_edges():
    item = MenuItem("x", 10.0, 100.0, 50.0, 20.0, NORMAL, HOVER)
    assert item.contains(10.0, 200.0 - 100.0, 200.0)
    assert item.contains(60.0, 200.0 - 120.0, 200.0)
    assert not item.contains(60.5, 200.0 - 110.0, 200.0)
    assert not item.contains(30.0, 200.0 - 121.0, 200.0)