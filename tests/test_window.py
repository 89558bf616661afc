import pytest

from promethean.events import MouseButtonDown, MouseButtonUp
from promethean.uibutton import UIButton
from promethean.widget import Renderer
from promethean.window import State, UIManager, UIOverlay, UIWindow


def counting_button(clicks):
    btn = UIButton("play", on_click=lambda: clicks.append(1))
    btn.set_position((0.0, 0.0))
    btn.set_size((100.0, 40.0))
    return btn


def test_push_pop_callbacks():
    mgr = UIManager()
    shown, hidden, clicks = [], [], []
    win = UIWindow(on_show=lambda: shown.append(1), on_hide=lambda: hidden.append(1))
    win.add_child(counting_button(clicks))

    mgr.push_window(win)
    assert len(shown) == 1
    assert len(mgr) == 1

    mgr.handle_event(MouseButtonDown(10, 10))
    mgr.handle_event(MouseButtonUp(10, 10))
    assert len(clicks) == 1

    mgr.pop_window()
    assert len(hidden) == 1
    assert len(mgr) == 0


def test_show_and_hide_are_idempotent():
    shown, hidden = [], []
    win = UIWindow(on_show=lambda: shown.append(1), on_hide=lambda: hidden.append(1))
    win.hide()
    assert hidden == []
    win.show()
    win.show()
    assert win.visible is True
    assert len(shown) == 1
    win.hide()
    win.hide()
    assert win.visible is False
    assert len(hidden) == 1


def test_hidden_window_ignores_events_and_drawing():
    clicks = []
    win = UIWindow()
    win.add_child(counting_button(clicks))
    assert win.handle_event(MouseButtonDown(10, 10)) is False
    renderer = Renderer()
    win.draw(renderer)
    assert renderer.quads == []


def test_only_top_window_receives_events():
    mgr = UIManager()
    bottom_clicks, top_clicks = [], []
    bottom, top = UIWindow(), UIWindow()
    bottom.add_child(counting_button(bottom_clicks))
    top.add_child(counting_button(top_clicks))
    mgr.push_window(bottom)
    mgr.push_window(top)
    assert mgr.top_window() is top

    mgr.handle_event(MouseButtonDown(10, 10))
    mgr.handle_event(MouseButtonUp(10, 10))
    assert top_clicks == [1]
    assert bottom_clicks == []


def test_render_draws_every_window():
    mgr = UIManager()
    for _ in range(2):
        win = UIWindow()
        win.add_child(UIButton("b"))
        mgr.push_window(win)
    renderer = Renderer()
    mgr.render(renderer)
    assert len(renderer.quads) == 2


def test_pop_and_push_none_on_empty_manager():
    mgr = UIManager()
    mgr.pop_window()
    mgr.push_window(None)
    assert len(mgr) == 0
    assert mgr.top_window() is None


def test_overlay_forwards_to_manager():
    overlay = UIOverlay()
    clicks = []
    win = UIWindow()
    win.add_child(counting_button(clicks))
    overlay.manager.push_window(win)

    overlay.handle_event(MouseButtonDown(5, 5))
    overlay.handle_event(MouseButtonUp(5, 5))
    overlay.update(0.016)
    renderer = Renderer()
    overlay.render(renderer)
    assert clicks == [1]
    assert renderer.quads == [((0.0, 0.0), (100.0, 40.0))]


def test_state_is_abstract():
    with pytest.raises(TypeError):
        State()