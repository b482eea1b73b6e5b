"""Figma-style squircle outlines as SVG path data. / 以 SVG 路径数据表示的 Figma 风格超椭圆圆角矩形轮廓。

A squircle is a rectangle whose corners blend a circular arc with cubic Bézier curves, following
Figma's article "Desperately seeking squircles". / 超椭圆圆角矩形的各角将圆弧与三次贝塞尔曲线融合，参考 Figma 的文章
“Desperately seeking squircles”。
The package shares each side between its two corners, solves the curve of every corner and formats
the closed outline. / 本包在每条边的两个角之间分配边长，求解每个角的曲线，并格式化闭合轮廓。
"""

from .corners import Corner, CornerRadii, NormalizedCorner, NormalizedCorners, Side, distribute_and_normalize
from .curve import CornerPathParams, get_path_params_for_corner
from .logging_config import setup_logging
from .path import SquircleParams, format_svg_path, get_svg_path

__all__ = [
    "Corner",
    "CornerPathParams",
    "CornerRadii",
    "NormalizedCorner",
    "NormalizedCorners",
    "Side",
    "SquircleParams",
    "distribute_and_normalize",
    "format_svg_path",
    "get_path_params_for_corner",
    "get_svg_path",
    "setup_logging",
]
