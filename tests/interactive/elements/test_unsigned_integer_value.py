from __future__ import annotations

from surfkit.core.archetype import NodeElementArchetype, unsigned_integer
from surfkit.core.node import SurfaceNode
from surfkit.core.values import Float3, Int32, Int64, UInt32
from surfkit.interactive.elements import UnsignedIntegerValue


class RecordingNode(SurfaceNode):
    def __init__(self, values=()) -> None:
        super().__init__(values, title="recording")
        self.set_calls: list[tuple[int, object]] = []

    def set_value(self, index: int, value: object) -> None:
        self.set_calls.append((index, value))
        super().set_value(index, value)


class DrawList:
    def __init__(self) -> None:
        self.rects: list[tuple[float, float, float, float, int]] = []

    def add_rect(self, x0: float, y0: float, x1: float, y1: float, color: int) -> None:
        self.rects.append((x0, y0, x1, y1, color))


class DummyImGui:
    def __init__(self, *, active: bool = False) -> None:
        self.active = active
        self.draw_list = DrawList()

    def push_item_width(self, _width: float) -> None:
        return None

    def pop_item_width(self) -> None:
        return None

    def drag_int(self, _label: str, value: int, *_args: float) -> tuple[bool, int]:
        return False, value

    def is_item_active(self) -> bool:
        return self.active

    def is_item_focused(self) -> bool:
        return self.active

    def get_item_rect_min(self) -> tuple[float, float]:
        return 1.0, 2.0

    def get_item_rect_max(self) -> tuple[float, float]:
        return 51.0, 22.0

    def get_color_u32_rgba(self, r: float, g: float, b: float, a: float) -> int:
        _ = (r, g, b, a)
        return 0xFF555555

    def get_window_draw_list(self) -> DrawList:
        return self.draw_list


def _element(node: SurfaceNode, arch: NodeElementArchetype) -> UnsignedIntegerValue:
    return UnsignedIntegerValue(node, arch, width=50, slide_speed=1.0)


def test_construction_seeds_value_and_subscribes():
    node = RecordingNode([Int32(0), Int32(0), Float3(1.0, 2.0, 3.0)])

    element = _element(node, unsigned_integer(0, 0, value_index=2, component=2))

    assert element.value == 3
    assert len(node.values_changed) == 1
    assert node.set_calls == []


def test_commit_writes_only_the_bound_component():
    node = SurfaceNode([Float3(1.0, 2.0, 3.0)])
    element = _element(node, unsigned_integer(0, 0, value_index=0, component=2))

    element.edit(10)
    element.commit()

    assert node.values[0] == Float3(1.0, 2.0, 10.0)
    assert element.value == 10


def test_commit_writes_once_despite_self_notification():
    node = RecordingNode([UInt32(4)])
    element = _element(node, unsigned_integer(0, 0, value_index=0))

    element.edit(5)
    element.commit()

    assert node.set_calls == [(0, UInt32(5))]
    assert element.value == 5


def test_commit_without_change_does_not_write():
    node = RecordingNode([UInt32(4)])
    element = _element(node, unsigned_integer(0, 0, value_index=0))

    element.edit(4)
    element.commit()

    assert node.set_calls == []


def test_other_elements_on_same_node_follow_the_write():
    node = SurfaceNode([Float3(1.0, 2.0, 3.0), Int64(7)])
    editor = _element(node, unsigned_integer(0, 0, value_index=0, component=2))
    mirror = _element(node, unsigned_integer(0, 0, value_index=0, component=2))
    sibling = _element(node, unsigned_integer(0, 0, value_index=0, component=0))
    other_slot = _element(node, unsigned_integer(0, 0, value_index=1))

    editor.edit(10)
    editor.commit()

    assert mirror.value == 10
    assert sibling.value == 1
    assert other_slot.value == 7


def test_external_change_is_reread():
    node = SurfaceNode([Int32(1)])
    element = _element(node, unsigned_integer(0, 0, value_index=0))

    node.set_value(0, Int32(42))

    assert element.value == 42


def test_external_change_does_not_clobber_edit_in_progress():
    node = SurfaceNode([Int32(1)])
    element = _element(node, unsigned_integer(0, 0, value_index=0))

    element.edit(5)
    node.set_value(0, Int32(42))

    assert element.is_editing is True
    assert element.displayed_value == 5
    assert element.value == 1

    element.commit()

    assert node.values[0] == Int32(5)
    assert element.value == 5


def test_commit_equal_to_stale_value_picks_up_external_change():
    node = SurfaceNode([Int32(1)])
    element = _element(node, unsigned_integer(0, 0, value_index=0))

    element.begin_edit()
    node.set_value(0, Int32(42))
    element.commit()

    assert element.value == 42
    assert node.values[0] == Int32(42)


def test_cancel_picks_up_external_change_made_while_editing():
    node = RecordingNode([Int32(1)])
    element = _element(node, unsigned_integer(0, 0, value_index=0))

    element.edit(5)
    node.set_value(0, Int32(42))
    element.cancel()

    assert element.is_editing is False
    assert element.value == 42
    assert element.displayed_value == 42
    assert node.set_calls == [(0, Int32(42))]


def test_cancel_without_slot_keeps_value():
    node = SurfaceNode([Int32(1)])
    element = _element(node, NodeElementArchetype(value_index=-1))
    element.set_value_silently(7)

    element.edit(3)
    element.cancel()

    assert element.value == 7


def test_element_without_slot_never_writes():
    node = RecordingNode([Int32(1)])
    element = _element(node, NodeElementArchetype(value_index=-1))

    assert element.value == 0

    element.edit(6)
    element.commit()

    assert element.value == 6
    assert node.set_calls == []


def test_displayed_value_is_clamped_to_archetype_range():
    node = SurfaceNode([Int32(500)])
    element = _element(node, unsigned_integer(0, 0, value_index=0, value_max=100))

    assert element.value == 100
    assert node.values[0] == Int32(500)


def test_close_unsubscribes():
    node = SurfaceNode([Int32(1)])
    element = _element(node, unsigned_integer(0, 0, value_index=0))

    element.close()
    element.close()
    node.set_value(0, Int32(42))

    assert element.is_closed is True
    assert len(node.values_changed) == 0
    assert element.value == 1


def test_context_manager_unsubscribes_on_error():
    node = SurfaceNode([Int32(1)])

    try:
        with _element(node, unsigned_integer(0, 0, value_index=0)):
            raise RuntimeError("teardown")
    except RuntimeError:
        pass

    assert len(node.values_changed) == 0


def test_draw_border_only_when_not_focused():
    node = SurfaceNode([Int32(1)])
    element = _element(node, unsigned_integer(0, 0, value_index=0))

    idle = DummyImGui(active=False)
    element.draw(idle)
    assert idle.draw_list.rects == [(1.0, 2.0, 51.0, 22.0, 0xFF555555)]

    focused = DummyImGui(active=True)
    element.draw(focused)
    assert focused.draw_list.rects == []
