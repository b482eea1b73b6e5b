"""Build the SVG path of a squircle. / 构建超椭圆圆角矩形的 SVG 路径。

:class:`SquircleParams` holds the public options, :func:`get_svg_path` resolves the radii, shares the
sides between corners when needed and formats the outline as SVG path data. /
:class:`SquircleParams` 保存公开选项，:func:`get_svg_path` 解析各角半径，必要时在角之间分配边长，并将轮廓格式化为 SVG 路径数据。
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional, Sequence

import torch

from .corners import Corner, CornerRadii, distribute_and_normalize
from .curve import CornerPathParams, get_path_params_for_corner

logger = logging.getLogger(__name__)

# camelCase option names understood by SquircleParams.from_options. / SquircleParams.from_options 可识别的驼峰式选项名。
OPTION_NAMES = {
    "width": "width",
    "height": "height",
    "cornerRadius": "corner_radius",
    "topLeftCornerRadius": "top_left_corner_radius",
    "topRightCornerRadius": "top_right_corner_radius",
    "bottomRightCornerRadius": "bottom_right_corner_radius",
    "bottomLeftCornerRadius": "bottom_left_corner_radius",
    "cornerSmoothing": "corner_smoothing",
    "preserveSmoothing": "preserve_smoothing",
}


@dataclass(frozen=True)
class SquircleParams:
    """Options describing one squircle. / 描述一个超椭圆圆角矩形的选项。

    Unset per-corner radii fall back to ``corner_radius``, which itself defaults to ``0``.
    / 未设置的单角半径回退为 ``corner_radius``，其默认值为 ``0``。
    """

    width: float = 0.0
    height: float = 0.0
    corner_radius: Optional[float] = None
    top_left_corner_radius: Optional[float] = None
    top_right_corner_radius: Optional[float] = None
    bottom_right_corner_radius: Optional[float] = None
    bottom_left_corner_radius: Optional[float] = None
    corner_smoothing: float = 1.0
    preserve_smoothing: bool = False

    @classmethod
    def square(cls, size: float, **kwargs: Any) -> "SquircleParams":
        """Options for a square of side ``size``. / 边长为 ``size`` 的正方形选项。"""

        return cls(width=size, height=size, **kwargs)

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "SquircleParams":
        """Build from camelCase options such as ``{"cornerRadius": 20}``. / 由驼峰式选项（如 ``{"cornerRadius": 20}``）构建。"""

        unknown = sorted(set(options) - set(OPTION_NAMES))
        if unknown:
            raise ValueError(f"Unknown squircle options: {', '.join(unknown)}")
        return cls(**{OPTION_NAMES[name]: value for name, value in options.items()})

    def replace(self, **changes: Any) -> "SquircleParams":
        return replace(self, **changes)

    def resolved_radii(self) -> CornerRadii:
        corner_radius = 0.0 if self.corner_radius is None else self.corner_radius

        def _resolve(radius: Optional[float]) -> float:
            return corner_radius if radius is None else radius

        return CornerRadii(
            top_left=_resolve(self.top_left_corner_radius),
            top_right=_resolve(self.top_right_corner_radius),
            bottom_left=_resolve(self.bottom_left_corner_radius),
            bottom_right=_resolve(self.bottom_right_corner_radius),
        )

    def validate(self) -> None:
        """Reject values that make a degenerate outline. / 拒绝会产生退化轮廓的数值。

        :func:`get_svg_path` never calls this: it computes whatever the numbers give. /
        :func:`get_svg_path` 不会调用本方法，而是按给定数值直接计算。
        """

        if self.width < 0 or self.height < 0:
            raise ValueError("width and height must be non-negative")
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name.endswith("corner_radius") and value is not None and value < 0:
                raise ValueError(f"{f.name} must be non-negative")
        if not 0.0 <= self.corner_smoothing <= 1.0:
            raise ValueError("corner_smoothing must lie in [0, 1]")


def get_svg_path(params: Optional[SquircleParams] = None, **options: Any) -> str:
    """Return the SVG path data outlining the squircle. / 返回勾勒超椭圆圆角矩形的 SVG 路径数据。

    Pass either a :class:`SquircleParams` or its fields as keyword arguments. /
    可以传入 :class:`SquircleParams`，也可以以关键字参数传入其字段。
    """

    if params is None:
        params = SquircleParams(**options)
    elif options:
        raise TypeError("Pass either a SquircleParams instance or keyword options, not both")

    radii = params.resolved_radii()
    width, height = params.width, params.height

    if len(set(radii)) == 1:
        # Equal corners never compete, so one solve serves all four. / 四角相等时不存在争用，一次求解即可用于全部四角。
        budget = min(width, height) / 2.0
        corner_radius = min(radii.top_left, budget)
        logger.debug("Uniform corners: radius %s, budget %s", corner_radius, budget)
        path_params = get_path_params_for_corner(
            corner_radius, params.corner_smoothing, params.preserve_smoothing, budget
        )
        return format_svg_path(width, height, [path_params] * len(Corner))

    normalized = distribute_and_normalize(radii, width, height)
    path_params = get_path_params_for_corner(
        torch.tensor([corner.radius for corner in normalized], dtype=torch.float64),
        params.corner_smoothing,
        params.preserve_smoothing,
        torch.tensor([corner.rounding_and_smoothing_budget for corner in normalized], dtype=torch.float64),
    )
    return format_svg_path(width, height, [path_params[int(corner)] for corner in Corner])


def format_svg_path(width: float, height: float, corner_params: Sequence[CornerPathParams]) -> str:
    """Join four corners (indexed by ``Corner``) into one closed path. / 将四个角（按 ``Corner`` 索引）连接为一条闭合路径。"""

    top_left = corner_params[Corner.TOP_LEFT]
    top_right = corner_params[Corner.TOP_RIGHT]
    bottom_left = corner_params[Corner.BOTTOM_LEFT]
    bottom_right = corner_params[Corner.BOTTOM_RIGHT]

    return "M {} 0 {} L {} {} {} L {} {} {} L 0 {} {} Z".format(
        _number(width - float(top_right.p)),
        _draw_top_right(top_right),
        _number(width),
        _number(height - float(bottom_right.p)),
        _draw_bottom_right(bottom_right),
        _number(float(bottom_left.p)),
        _number(height),
        _draw_bottom_left(bottom_left),
        _number(float(top_left.p)),
        _draw_top_left(top_left),
    )


def _number(value: float) -> str:
    """Shortest text for ``value``, without a trailing ``.0``. / ``value`` 的最短文本，去掉末尾的 ``.0``。

    Very small or large values keep Python's exponent form (``1e-05``), which SVG path data accepts. /
    极小或极大的数值保留 Python 的指数形式（``1e-05``），SVG 路径数据同样接受该写法。
    """

    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def _values(params: CornerPathParams):
    return (
        float(params.a),
        float(params.b),
        float(params.c),
        float(params.d),
        float(params.corner_radius),
        float(params.arc_section_length),
    )


def _draw_top_right(params: CornerPathParams) -> str:
    a, b, c, d, radius, arc = _values(params)
    if radius == 0.0:
        return ""
    return (
        f"c {a:.4f} 0 {a + b:.4f} 0 {a + b + c:.4f} {d:.4f} "
        f"a {radius:.4f} {radius:.4f} 0 0 1 {arc:.4f} {arc:.4f} "
        f"c {d:.4f} {c:.4f} {d:.4f} {b + c:.4f} {d:.4f} {a + b + c:.4f}"
    )


def _draw_bottom_right(params: CornerPathParams) -> str:
    a, b, c, d, radius, arc = _values(params)
    if radius == 0.0:
        return ""
    return (
        f"c 0 {a:.4f} 0 {a + b:.4f} {-d:.4f} {a + b + c:.4f} "
        f"a {radius:.4f} {radius:.4f} 0 0 1 -{arc:.4f} {arc:.4f} "
        f"c {-c:.4f} {d:.4f} {-(b + c):.4f} {d:.4f} {-(a + b + c):.4f} {d:.4f}"
    )


def _draw_bottom_left(params: CornerPathParams) -> str:
    a, b, c, d, radius, arc = _values(params)
    if radius == 0.0:
        return ""
    return (
        f"c {-a:.4f} 0 {-(a + b):.4f} 0 {-(a + b + c):.4f} {-d:.4f} "
        f"a {radius:.4f} {radius:.4f} 0 0 1 -{arc:.4f} -{arc:.4f} "
        f"c {-d:.4f} {-c:.4f} {-d:.4f} {-(b + c):.4f} {-d:.4f} {-(a + b + c):.4f}"
    )


def _draw_top_left(params: CornerPathParams) -> str:
    a, b, c, d, radius, arc = _values(params)
    if radius == 0.0:
        return ""
    return (
        f"c 0 {-a:.4f} 0 {-(a + b):.4f} {d:.4f} {-(a + b + c):.4f} "
        f"a {radius:.4f} {radius:.4f} 0 0 1 {arc:.4f} -{arc:.4f} "
        f"c {c:.4f} {-d:.4f} {b + c:.4f} {-d:.4f} {a + b + c:.4f} {-d:.4f}"
    )


__all__ = ["OPTION_NAMES", "SquircleParams", "format_svg_path", "get_svg_path"]
