"""Write a few squircles to an SVG file. / 将若干超椭圆圆角矩形写入 SVG 文件。

Run the script with ``python examples/render_squircle.py``; it saves an SVG next to this file. /
使用 ``python examples/render_squircle.py`` 运行脚本，会在本文件旁保存 SVG。
Open it in a browser to compare plain rounded corners with smoothed ones. / 在浏览器中打开即可比较普通圆角与平滑圆角。
"""
from __future__ import annotations

import logging
from pathlib import Path

from squirclepath import SquircleParams, get_svg_path, setup_logging

OUTPUT_PATH = Path(__file__).with_suffix(".svg")

# (x offset, options) pairs laid out left to right. / 从左到右排列的 (x 偏移, 选项) 对。
SHAPES = [
    (10, SquircleParams.square(100, corner_radius=30, corner_smoothing=0.0)),
    (130, SquircleParams.square(100, corner_radius=30, corner_smoothing=0.6)),
    (250, SquircleParams.square(100, corner_radius=50, corner_smoothing=1.0, preserve_smoothing=True)),
    (
        370,
        SquircleParams(
            width=160,
            height=100,
            corner_radius=10,
            top_left_corner_radius=50,
            corner_smoothing=0.6,
        ),
    ),
]


def make_svg() -> str:
    paths = []
    for offset, params in SHAPES:
        params.validate()
        paths.append(
            f'  <path transform="translate({offset} 10)" d="{get_svg_path(params)}" fill="#4c6ef5"/>'
        )
    body = "\n".join(paths)
    return f'<svg xmlns="http://www.w3.org/2000/svg" width="540" height="120">\n{body}\n</svg>\n'


def main() -> None:
    setup_logging(logging.DEBUG)
    OUTPUT_PATH.write_text(make_svg(), encoding="utf-8")
    print(f"Saved squircle example to {OUTPUT_PATH}")  # 提示保存路径 / Notify where the output was saved


if __name__ == "__main__":
    main()
