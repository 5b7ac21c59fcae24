# どこで: `src/surfkit/interactive/elements/value_box.py`。
# 何を: レンジ付き符号なし整数入力（UIntValueBox）の編集状態と pyimgui 描画を提供する。
# なぜ: 「編集中の値」と「確定値」を分けて持ち、確定時だけ変更フックを呼べるようにするため。

from __future__ import annotations

from typing import Any

from surfkit.core.runtime_config import runtime_config
from surfkit.core.values import UINT32_MAX

# pyimgui の drag_int は C の int を受け取るため、表示/編集レンジは int32 の正側に収める。
_IMGUI_INT_MAX = 2_147_483_647


def _clamp_uint(value: float) -> int:
    return max(0, min(UINT32_MAX, int(value)))


def _drag_range(value_min: int, value_max: int) -> tuple[int, int]:
    """drag_int に渡せるレンジ (min, max) を返す。"""

    lo = min(value_min, _IMGUI_INT_MAX)
    hi = min(value_max, _IMGUI_INT_MAX)
    return lo, hi


class UIntValueBox:
    """符号なし 32bit 整数を編集する値ボックス。

    Notes
    -----
    - `value` は常に [value_min, value_max] にクランプされる。
    - 編集中（`is_editing`）は `edit()` の値を表示だけに使い、`commit()` で確定する。
    - 確定値が変わったときだけ `on_value_changed()` を呼ぶ。
    """

    def __init__(
        self,
        value: int = 0,
        x: float = 0.0,
        y: float = 0.0,
        width: float | None = None,
        value_min: float = 0,
        value_max: float = UINT32_MAX,
        slide_speed: float | None = None,
    ) -> None:
        cfg = runtime_config()
        self.x = float(x)
        self.y = float(y)
        self.width = float(cfg.value_box_width if width is None else width)
        self.slide_speed = float(cfg.value_box_slide_speed if slide_speed is None else slide_speed)
        self.border_color = cfg.value_box_border_color

        lo = _clamp_uint(value_min)
        hi = _clamp_uint(value_max)
        if lo > hi:
            lo, hi = hi, lo
        self._value_min = lo
        self._value_max = hi

        self._value = self._clamp(value)
        self._edit_value: int | None = None
        self.is_focused = False

    @property
    def value_min(self) -> int:
        return self._value_min

    @property
    def value_max(self) -> int:
        return self._value_max

    @property
    def value(self) -> int:
        """確定値。"""

        return self._value

    @value.setter
    def value(self, value: int) -> None:
        v = self._clamp(value)
        if v == self._value:
            return
        self._value = v
        self.on_value_changed()

    @property
    def is_editing(self) -> bool:
        return self._edit_value is not None

    @property
    def displayed_value(self) -> int:
        """表示中の値（編集中なら編集途中の値）。"""

        return self._value if self._edit_value is None else self._edit_value

    def _clamp(self, value: float) -> int:
        return max(self._value_min, min(self._value_max, int(value)))

    def set_value_silently(self, value: int) -> None:
        """変更フックを呼ばずに確定値を更新する（外部からの同期用）。"""

        self._value = self._clamp(value)

    # --- 編集操作 ---
    def begin_edit(self) -> None:
        """編集を開始する。既に編集中なら何もしない。"""

        if self._edit_value is not None:
            return
        self.is_focused = True
        self._edit_value = self._value

    def edit(self, value: int) -> None:
        """編集途中の値を更新する（確定はしない）。"""

        self.begin_edit()
        self._edit_value = self._clamp(value)

    def commit(self) -> None:
        """編集途中の値を確定する。編集中でなければ何もしない。"""

        edit_value = self._edit_value
        if edit_value is None:
            return
        self._edit_value = None
        self.value = edit_value

    def cancel(self) -> None:
        """編集途中の値を破棄する。"""

        self._edit_value = None

    def defocus(self) -> None:
        """フォーカスを外す。編集中なら確定する。"""

        self.commit()
        self.is_focused = False

    def on_value_changed(self) -> None:
        """確定値が変わったときに呼ばれるフック。"""

    # --- 描画 ---
    def draw(self, imgui: Any) -> bool:
        """pyimgui で値ボックスを描画し、このフレームで編集値が動いたら True を返す。

        drag 開始（アイテムが active）で編集を開始し、active でなくなったフレームで確定する。
        """

        lo, hi = _drag_range(self._value_min, self._value_max)
        shown = min(self.displayed_value, hi)

        imgui.push_item_width(self.width)
        try:
            changed, new_value = imgui.drag_int(
                "##value",
                int(shown),
                float(self.slide_speed),
                int(lo),
                int(hi),
            )
        finally:
            imgui.pop_item_width()

        active = bool(imgui.is_item_active())
        if active:
            self.begin_edit()
        if changed:
            self.edit(int(new_value))
        if not active and self.is_editing:
            self.commit()
        self.is_focused = active or bool(imgui.is_item_focused())
        return bool(changed)


__all__ = ["UIntValueBox"]
