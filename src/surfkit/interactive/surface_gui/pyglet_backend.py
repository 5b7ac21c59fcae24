# どこで: `src/surfkit/interactive/surface_gui/pyglet_backend.py`。
# 何を: ノード GUI 用の pyglet ウィンドウ生成、pyimgui renderer の生成、フレームごとの IO 同期とクリアを提供する。
# なぜ: NodeElementsGUI と手動ランナーが、ウィンドウ既定値（config）と backend 固有処理を共有するため。

from __future__ import annotations

import logging
from typing import Any

from surfkit.core.runtime_config import runtime_config

_logger = logging.getLogger(__name__)

# ImGui は delta_time <= 0 を受け付けない。
_MIN_DELTA_TIME = 1e-4


def open_node_window(
    caption: str,
    *,
    size: tuple[int, int] | None = None,
    position: tuple[int, int] | None = None,
    vsync: bool = False,
) -> Any:
    """ノード GUI 用の pyglet ウィンドウを開く。

    Parameters
    ----------
    caption : str
        ウィンドウタイトル（通常はノード名）。
    size, position : tuple[int, int] | None
        None の場合は `ui.node_gui.window_size` / `ui.node_gui.window_pos` を使う。
    vsync : bool
        垂直同期を有効にするか。
    """

    import pyglet

    cfg = runtime_config()
    w, h = cfg.node_gui_window_size if size is None else size
    x, y = cfg.node_gui_window_pos if position is None else position

    window = pyglet.window.Window(
        width=int(w),
        height=int(h),
        caption=str(caption),
        resizable=False,
        vsync=bool(vsync),
        config=pyglet.gl.Config(double_buffer=True),
    )
    window.set_location(int(x), int(y))
    _logger.debug("node window opened: caption=%r size=%dx%d pos=(%d, %d)", caption, w, h, x, y)
    return window


def create_renderer(gui_window: Any) -> Any:
    """gui_window に描く pyimgui の pyglet renderer を作る（current context が必要）。"""

    try:
        from imgui.integrations.pyglet import create_renderer as _create  # type: ignore[import-untyped]
    except Exception as exc:
        raise RuntimeError(f"imgui.integrations.pyglet を import できない: {exc}") from exc
    return _create(gui_window)


def sync_io(
    io: Any,
    *,
    window_size: tuple[int, int],
    framebuffer_size: tuple[int, int],
    dt: float,
) -> None:
    """ImGui の IO に表示サイズ、Retina 倍率、経過時間を書き込む。"""

    win_w, win_h = window_size
    fb_w, fb_h = framebuffer_size
    io.delta_time = max(float(dt), _MIN_DELTA_TIME)
    io.display_size = (float(win_w), float(win_h))
    io.display_fb_scale = (fb_w / max(1, win_w), fb_h / max(1, win_h))


def sync_io_for_window(imgui: Any, gui_window: Any, *, dt: float) -> None:
    sync_io(
        imgui.get_io(),
        window_size=(gui_window.width, gui_window.height),
        framebuffer_size=tuple(gui_window.get_framebuffer_size()),
        dt=dt,
    )


def clear_window(gui_window: Any) -> None:
    """`ui.node_gui.background_color` でウィンドウをクリアする。"""

    import pyglet

    pyglet.gl.glClearColor(*runtime_config().node_gui_background_color)
    gui_window.clear()


__all__ = ["clear_window", "create_renderer", "open_node_window", "sync_io", "sync_io_for_window"]
