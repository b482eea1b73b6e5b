"""Curve parameters of a single smoothed corner. / 单个平滑角的曲线参数。

Figma's article *Desperately seeking squircles* approximates a continuous-curvature corner with a
cubic Bézier, a circular arc and a mirrored cubic Bézier. / Figma 的文章 *Desperately seeking squircles*
用三次贝塞尔曲线、圆弧和镜像的三次贝塞尔曲线来近似曲率连续的角。
This module derives the seven constants describing that composite curve: ``a``, ``b``, ``c`` and
``d`` (figure 11.1 of the article), the extent ``p`` along each side (figure 12.2), the radius and
the length of the arc section. / 本模块推导描述该复合曲线的七个常量：``a``、``b``、``c``、``d``（文章图 11.1）、
沿每条边的延伸长度 ``p``（图 12.2）、半径以及圆弧段长度。
The maths runs on PyTorch tensors, so the four corners of a rectangle are solved as one batch and
the parameters stay differentiable with respect to radius, smoothing and budget. /
计算基于 PyTorch 张量，因此矩形四角可作为一个批次求解，且参数对半径、平滑度和预算保持可微。
"""
from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Optional, Union

import torch

Tensor = torch.Tensor
Scalar = Union[float, Tensor]

SQRT_2 = math.sqrt(2.0)


def _as_tensor(value: Scalar, dtype: Optional[torch.dtype] = None, device: Optional[torch.device] = None) -> Tensor:
    """Wrap plain numbers, keep tensors (and their autograd history). / 包装普通数值，保留张量（及其自动求导历史）。"""

    if isinstance(value, Tensor):
        return value.to(device=device or value.device, dtype=dtype or value.dtype)
    return torch.tensor(float(value), dtype=dtype or torch.float64, device=device)


@dataclass
class CornerPathParams:
    """Batch of corner curve parameters sharing one shape ``(...)``. / 形状 ``(...)`` 一致的一批角曲线参数。

    A 0-d batch describes one corner; a batch of shape ``(4,)`` is indexed by
    :class:`squirclepath.corners.Corner`. / 0 维批次描述单个角；形状为 ``(4,)`` 的批次按
    :class:`squirclepath.corners.Corner` 索引。
    """

    a: Tensor
    b: Tensor
    c: Tensor
    d: Tensor
    p: Tensor
    corner_radius: Tensor
    arc_section_length: Tensor

    def __post_init__(self) -> None:
        shapes = {f.name: tuple(getattr(self, f.name).shape) for f in fields(self)}
        if len(set(shapes.values())) != 1:
            raise ValueError(f"CornerPathParams fields must share one batch shape. Received {shapes}")

    @property
    def batch_shape(self) -> torch.Size:
        return self.p.shape

    def __getitem__(self, index) -> "CornerPathParams":
        """Select part of the batch, e.g. one corner. / 选取批次的一部分，例如单个角。"""

        return CornerPathParams(**{f.name: getattr(self, f.name)[index] for f in fields(self)})


def get_path_params_for_corner(
    corner_radius: Scalar,
    corner_smoothing: Scalar,
    preserve_smoothing: bool,
    rounding_and_smoothing_budget: Scalar,
) -> CornerPathParams:
    """Derive the composite curve of a corner that fits in its budget. / 推导适配预算的角复合曲线。

    Parameters
    ----------
    corner_radius:
        Radius of the arc section, already clamped to the budget. Tensors of any shape are
        accepted and broadcast against the other inputs. / 圆弧段半径，已被限制在预算之内；接受任意形状的张量，并与其他输入广播。
    corner_smoothing:
        ``0`` gives a plain circular corner, ``1`` the smoothest profile. / ``0`` 为普通圆角，``1`` 为最平滑的轮廓。
    preserve_smoothing:
        When the curve would outgrow the budget, ``False`` lowers the smoothing until it fits, while
        ``True`` keeps the smoothing and compresses the Bézier sections instead. /
        当曲线超出预算时，``False`` 降低平滑度直至合适，``True`` 则保留平滑度并压缩贝塞尔段。
    rounding_and_smoothing_budget:
        Maximum extent of the curve along each adjacent side. / 曲线沿每条相邻边的最大延伸长度。
    """

    radius = _as_tensor(corner_radius)
    if not radius.is_floating_point():
        # Integer radii would truncate smoothing and budget below. / 整数半径会导致下方的平滑度与预算被截断。
        radius = radius.to(torch.float64)
    smoothing = _as_tensor(corner_smoothing, radius.dtype, radius.device)
    budget = _as_tensor(rounding_and_smoothing_budget, radius.dtype, radius.device)
    radius, smoothing, budget = torch.broadcast_tensors(radius, smoothing, budget)

    # Figure 12.2: p = (1 + smoothing) * q, and q = R for a 90 degree corner. / 图 12.2：p = (1 + 平滑度) * q，90 度角时 q = R。
    p = (1.0 + smoothing) * radius

    if not preserve_smoothing:
        # Past this point more smoothing has no visible effect. / 超过此值后继续增加平滑度不再有可见效果。
        # fmin ignores the NaN of 0 / 0 for an empty corner. / fmin 会忽略空角 0 / 0 产生的 NaN。
        max_corner_smoothing = budget / radius - 1.0
        smoothing = torch.fmin(smoothing, max_corner_smoothing)
        p = torch.fmin(p, budget)

    # 90 for a plain rounded corner; the arc shrinks as smoothing grows. / 普通圆角为 90，平滑度越大圆弧越小。
    arc_measure = 90.0 * (1.0 - smoothing)
    arc_section_length = torch.sin(torch.deg2rad(arc_measure / 2.0)) * radius * SQRT_2

    # Distance between control points P3 and P4. / 控制点 P3 与 P4 之间的距离。
    angle_alpha = (90.0 - arc_measure) / 2.0
    p3_to_p4_distance = radius * torch.tan(torch.deg2rad(angle_alpha / 2.0))

    angle_beta = 45.0 * smoothing
    c = p3_to_p4_distance * torch.cos(torch.deg2rad(angle_beta))
    d = c * torch.tan(torch.deg2rad(angle_beta))

    b = (p - arc_section_length - c - d) / 3.0
    a = 2.0 * b

    if preserve_smoothing:
        overflow = p > budget
        p1_to_p3_max_distance = budget - d - arc_section_length - c

        # Keep some distance between P1 and P2 so the curve doesn't kink. / 在 P1 与 P2 之间保留一定距离，避免曲线扭折。
        min_a = p1_to_p3_max_distance / 6.0
        max_b = p1_to_p3_max_distance - min_a

        b = torch.where(overflow, torch.fmin(b, max_b), b)
        a = torch.where(overflow, p1_to_p3_max_distance - b, a)
        p = torch.where(overflow, torch.fmin(p, budget), p)

    return CornerPathParams(
        a=a,
        b=b,
        c=c,
        d=d,
        p=p,
        corner_radius=radius,
        arc_section_length=arc_section_length,
    )


__all__ = ["CornerPathParams", "get_path_params_for_corner"]
