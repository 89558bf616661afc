import pytest

from promethean.layout import HorizontalLayout, VerticalLayout
from promethean.widget import Renderer, Widget


class DummyWidget(Widget):
    def __init__(self):
        self.pos = (0.0, 0.0)
        self.size = (0.0, 0.0)
        self.drawn = 0

    def draw(self, renderer):
        self.drawn += 1

    def handle_event(self, event):
        return False

    def set_position(self, pos):
        self.pos = pos

    def set_size(self, size):
        self.size = size


def test_horizontal_basic_positions():
    layout = HorizontalLayout()
    w1, w2 = DummyWidget(), DummyWidget()
    layout.add_child(w1)
    layout.add_child(w2)
    layout.set_position((0.0, 0.0))
    layout.set_size((200.0, 50.0))

    assert w1.pos[0] == pytest.approx(0.0)
    assert w2.pos[0] == pytest.approx(102.5)
    assert w1.size[0] == pytest.approx(97.5)
    assert w2.size[0] == pytest.approx(97.5)
    assert w1.size[1] == pytest.approx(50.0)


def test_vertical_basic_positions():
    layout = VerticalLayout()
    w1, w2 = DummyWidget(), DummyWidget()
    layout.add_child(w1)
    layout.add_child(w2)
    layout.set_position((10.0, 20.0))
    layout.set_size((100.0, 200.0))

    assert w1.pos[0] == pytest.approx(10.0)
    assert w1.pos[1] == pytest.approx(20.0)
    assert w2.pos[0] == pytest.approx(10.0)
    assert w2.pos[1] == pytest.approx(122.5)
    assert w1.size[1] == pytest.approx(97.5)
    assert w2.size[1] == pytest.approx(97.5)
    assert w1.size[0] == pytest.approx(100.0)


def test_resizing():
    layout = HorizontalLayout()
    w1, w2, w3 = DummyWidget(), DummyWidget(), DummyWidget()
    layout.add_child(w1)
    layout.add_child(w2)
    layout.add_child(w3)
    layout.set_position((0.0, 0.0))
    layout.set_size((300.0, 60.0))
    assert w3.pos[0] == pytest.approx(203.33333333)

    layout.set_size((150.0, 30.0))
    assert w3.pos[0] == pytest.approx(103.33333333)
    assert w2.size[0] == pytest.approx(46.66666667)
    assert w3.size[1] == pytest.approx(30.0)


def test_spacing():
    layout = HorizontalLayout(10.0)
    w1, w2 = DummyWidget(), DummyWidget()
    layout.add_child(w1)
    layout.add_child(w2)
    layout.set_position((0.0, 0.0))
    layout.set_size((210.0, 40.0))

    assert w2.pos[0] == pytest.approx(110.0)
    assert w1.size[0] == pytest.approx(100.0)


def test_add_child_after_sizing_replaces_children():
    layout = HorizontalLayout()
    w1, w2 = DummyWidget(), DummyWidget()
    layout.add_child(w1)
    layout.set_size((200.0, 50.0))
    assert w1.size[0] == pytest.approx(200.0)
    layout.add_child(w2)
    assert w1.size[0] == pytest.approx(97.5)
    assert w2.size == w1.size


@pytest.mark.parametrize("layout_cls", [HorizontalLayout, VerticalLayout])
def test_draw_without_children_raises(layout_cls):
    with pytest.raises(RuntimeError):
        layout_cls().draw(Renderer())


@pytest.mark.parametrize("layout_cls", [HorizontalLayout, VerticalLayout])
def test_draw_forwards_to_children(layout_cls):
    layout = layout_cls()
    w1, w2 = DummyWidget(), DummyWidget()
    layout.add_child(w1)
    layout.add_child(w2)
    layout.draw(Renderer())
    assert (w1.drawn, w2.drawn) == (1, 1)