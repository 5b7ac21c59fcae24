# どこで: `src/surfkit/interactive/runtime/node_gui_system.py`。
# 何を: ノード GUI を「1フレーム描画できるサブシステム」として提供し、pyglet の app loop で回す。
# なぜ: window 生成/描画/後始末を 1 箇所にまとめ、呼び出し側を `run_node_gui()` だけにするため。

from __future__ import annotations

from collections.abc import Iterable

from surfkit.core.archetype import NodeElementArchetype
from surfkit.core.node import SurfaceNode
from surfkit.interactive.surface_gui import NodeElementsGUI, open_node_window


class NodeGUIWindowSystem:
    """ノード GUI（別ウィンドウ）のサブシステム。"""

    def __init__(
        self,
        *,
        node: SurfaceNode,
        archetypes: Iterable[NodeElementArchetype],
    ) -> None:
        """GUI 用の window と NodeElementsGUI を初期化する。"""

        self.window = open_node_window(node.title)
        self._gui = NodeElementsGUI(self.window, node=node, archetypes=archetypes)

    def draw_frame(self) -> None:
        """1 フレーム分の GUI を描画する（`flip()` は呼ばない）。"""

        self._gui.draw_frame()

    def close(self) -> None:
        """GUI を終了し、ウィンドウを破棄する。"""

        self._gui.close()


def run_node_gui(
    node: SurfaceNode,
    archetypes: Iterable[NodeElementArchetype],
    *,
    fps: float = 60.0,
) -> None:
    """node の値ボックスを別ウィンドウに表示し、閉じられるまでループする。

    Parameters
    ----------
    node : SurfaceNode
        編集対象のノード。
    archetypes : Iterable[NodeElementArchetype]
        表示する要素の記述子。
    fps : float
        目標フレームレート。`<=0` の場合はスロットリングしない。
    """

    import pyglet

    system = NodeGUIWindowSystem(node=node, archetypes=archetypes)

    def request_exit(*_: object) -> None:
        # pyglet の on_close から呼ばれるコールバックは引数が来る場合があるため *args を受ける。
        pyglet.app.exit()

    system.window.push_handlers(on_close=request_exit, on_draw=system.draw_frame)

    def draw(dt: float) -> None:
        # 閉じられたウィンドウへ draw すると例外になり得るため、開いている間だけ描く。
        if system.window in pyglet.app.windows:
            system.window.draw(dt)

    if fps <= 0:
        pyglet.clock.schedule(draw)
    else:
        pyglet.clock.schedule_interval(draw, 1.0 / float(fps))

    try:
        pyglet.app.run(interval=None)
    finally:
        pyglet.clock.unschedule(draw)
        system.close()


__all__ = ["NodeGUIWindowSystem", "run_node_gui"]
