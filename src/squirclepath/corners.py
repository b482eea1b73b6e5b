"""Share the rectangle sides between its four corners. / 在矩形四个角之间分配边长。

A smoothed corner needs more room along its sides than a plain circular fillet, so two large,
unequal radii can compete for the same side. / 平滑角沿边所需的空间大于普通圆角，因此两个较大且不相等的半径可能争用同一条边。
This module decides, per corner, how far its curve may extend along each adjacent side (the
*rounding and smoothing budget*) and clamps the radius to that budget. /
本模块为每个角确定其曲线沿相邻边可延伸的最大距离（*圆角与平滑预算*），并将半径限制在该预算之内。
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, NamedTuple, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


class Corner(IntEnum):
    """Rectangle corners; the value doubles as the index into per-corner tuples. / 矩形四角，其值即逐角元组的索引。"""

    TOP_LEFT = 0
    TOP_RIGHT = 1
    BOTTOM_LEFT = 2
    BOTTOM_RIGHT = 3


class Side(Enum):
    TOP = 0
    LEFT = 1
    BOTTOM = 2
    RIGHT = 3

    @property
    def is_horizontal(self) -> bool:
        """Top and bottom sides span the width, the others the height. / 上下边长度为宽度，左右边为高度。"""

        return self in (Side.TOP, Side.BOTTOM)


# Neighbours sharing a side with each corner, indexed by ``Corner``. / 与各角共享一条边的相邻角，按 ``Corner`` 索引。
ADJACENTS_BY_CORNER: Tuple[Tuple[Tuple[Corner, Side], ...], ...] = (
    ((Corner.TOP_RIGHT, Side.TOP), (Corner.BOTTOM_LEFT, Side.LEFT)),
    ((Corner.TOP_LEFT, Side.TOP), (Corner.BOTTOM_RIGHT, Side.RIGHT)),
    ((Corner.BOTTOM_RIGHT, Side.BOTTOM), (Corner.TOP_LEFT, Side.LEFT)),
    ((Corner.BOTTOM_LEFT, Side.BOTTOM), (Corner.TOP_RIGHT, Side.RIGHT)),
)


class CornerRadii(NamedTuple):
    """Requested radius per corner, ordered like ``Corner``. / 各角请求的半径，顺序与 ``Corner`` 一致。"""

    top_left: float
    top_right: float
    bottom_left: float
    bottom_right: float


@dataclass(frozen=True)
class NormalizedCorner:
    """A corner radius clamped to the space it was given. / 限制在所分配空间内的角半径。"""

    radius: float
    rounding_and_smoothing_budget: float


class NormalizedCorners(NamedTuple):
    top_left: NormalizedCorner
    top_right: NormalizedCorner
    bottom_left: NormalizedCorner
    bottom_right: NormalizedCorner


def _proportional_share(radius: float, adjacent_radius: float, side_length: float) -> float:
    """Part of a side owed to ``radius``, following IEEE division when the radii cancel out. /
    ``radius`` 应得的边长份额；两半径相互抵消时按 IEEE 除法语义给出结果。
    """

    total = radius + adjacent_radius
    if total == 0.0:
        # Only reachable with negative radii. / 仅在出现负半径时才会到达此处。
        if radius == 0.0:
            return math.nan
        return math.copysign(math.inf, radius) * side_length
    return radius / total * side_length


def distribute_and_normalize(radii: Sequence[float], width: float, height: float) -> NormalizedCorners:
    """Assign a rounding and smoothing budget to every corner. / 为每个角分配圆角与平滑预算。

    Corners are visited from the largest requested radius to the smallest so that a large corner
    takes its proportional share of a contested side before its smaller neighbour is settled.
    Equal radii keep the ``Corner`` order. / 按请求半径从大到小依次处理各角，使大半径角先于较小的相邻角取得争用边上的按比例份额；
    半径相等时保持 ``Corner`` 的顺序。

    Parameters
    ----------
    radii:
        Four radii indexed by ``Corner`` (for example a :class:`CornerRadii`). Negative values are
        not rejected and propagate into the budgets. / 按 ``Corner`` 索引的四个半径（例如 :class:`CornerRadii`）。负值不会被拒绝，并会传递到预算中。
    width, height:
        Rectangle size. / 矩形尺寸。
    """

    if len(radii) != len(Corner):
        raise ValueError(f"Expected {len(Corner)} corner radii, received {len(radii)}")

    corner_radii: List[float] = [float(radius) for radius in radii]
    budgets: List[Optional[float]] = [None] * len(Corner)

    # sorted() is stable, so ties stay in Corner order. / sorted() 是稳定排序，相等半径保持 Corner 顺序。
    ordered = sorted(Corner, key=lambda corner: corner_radii[corner], reverse=True)

    for corner in ordered:
        radius = corner_radii[corner]
        candidates = []
        for adjacent_corner, adjacent_side in ADJACENTS_BY_CORNER[corner]:
            adjacent_radius = corner_radii[adjacent_corner]
            if radius == 0.0 and adjacent_radius == 0.0:
                candidates.append(0.0)
                continue

            side_length = width if adjacent_side.is_horizontal else height
            adjacent_budget = budgets[adjacent_corner]
            if adjacent_budget is not None:
                # The neighbour already took its share; we get the rest. / 相邻角已取走其份额，剩余部分归当前角。
                candidates.append(side_length - adjacent_budget)
            else:
                candidates.append(_proportional_share(radius, adjacent_radius, side_length))

        budget = min(candidates)
        budgets[corner] = budget
        corner_radii[corner] = min(radius, budget)
        logger.debug("%s: budget %s, radius %s", corner.name, budget, corner_radii[corner])

    return NormalizedCorners(
        *(
            NormalizedCorner(radius=corner_radii[corner], rounding_and_smoothing_budget=budgets[corner])
            for corner in Corner
        )
    )


__all__ = [
    "ADJACENTS_BY_CORNER",
    "Corner",
    "CornerRadii",
    "NormalizedCorner",
    "NormalizedCorners",
    "Side",
    "distribute_and_normalize",
]
