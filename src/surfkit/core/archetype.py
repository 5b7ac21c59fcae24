# どこで: `src/surfkit/core/archetype.py`。
# 何を: ノード要素（値ボックス等）が編集対象とするスロット/成分を表す不変記述子を定義する。
# なぜ: 「どの値を、どの成分で」編集するかを UI 部品から切り離し、accessor と共有するため。

from __future__ import annotations

from dataclasses import dataclass

from .values import UINT32_MAX


@dataclass(frozen=True, slots=True)
class NodeElementArchetype:
    """ノード要素の記述子。

    Attributes
    ----------
    value_index : int
        ノードの値リスト上のスロット番号。負数は「スロット無し」（値は外部から与えられる）。
    box_id : int
        スロットがベクトルのときに編集する成分（0=X, 1=Y, 2=Z, 3=W）。スカラーでは無視する。
    value_min, value_max : float
        UI 側の編集レンジ。スロットの実値はクランプしない。
    position : tuple[float, float]
        ノード内での要素の配置（左上, ピクセル）。
    """

    value_index: int = -1
    box_id: int = 0
    value_min: float = 0.0
    value_max: float = float(UINT32_MAX)
    position: tuple[float, float] = (0.0, 0.0)

    @property
    def has_value(self) -> bool:
        return self.value_index >= 0


def unsigned_integer(
    x: float,
    y: float,
    value_index: int = -1,
    component: int = 0,
    value_min: float = 0.0,
    value_max: float = float(UINT32_MAX),
) -> NodeElementArchetype:
    """符号なし整数の値ボックス用 archetype を生成する。"""

    return NodeElementArchetype(
        value_index=int(value_index),
        box_id=int(component),
        value_min=float(value_min),
        value_max=float(value_max),
        position=(float(x), float(y)),
    )


__all__ = ["NodeElementArchetype", "unsigned_integer"]
