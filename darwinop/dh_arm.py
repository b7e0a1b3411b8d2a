"""Denavit-Hartenberg kinematics of a three-joint arm."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass
from functools import reduce
from typing import Optional, Sequence, Tuple

from .matrix import Matrix3D

Vector3 = Tuple[float, float, float]
Limits = Sequence[Tuple[float, float]]


@dataclass(frozen=True)
class DHLink:
    """Fixed Denavit-Hartenberg parameters of one joint."""

    d: float
    a: float
    alpha: float


class UnreachableError(ValueError):
    """The target position has no solution within the joint limits."""


DH_ARM_RIGHT: Tuple[DHLink, DHLink, DHLink] = (
    DHLink(122.2e-3, 0.0, math.pi / 2),  # shoulder yaw
    DHLink(0.0, 60.0e-3, 0.0),  # shoulder pitch
    DHLink(0.0, 16.0e-3, 0.0),  # elbow pitch
)

JOINT_LIMITS: Tuple[Tuple[float, float], ...] = (
    (-math.pi / 2, math.pi / 2),
    (-math.pi / 2, math.pi / 2),
    (-math.pi / 2, math.pi / 2),
)


def dh_transform(theta: float, d: float, a: float, alpha: float) -> Matrix3D:
    """Homogeneous transform of one joint for the given parameters."""
    ct, st = math.cos(theta), math.sin(theta)
    ca, sa = math.cos(alpha), math.sin(alpha)
    return Matrix3D((
        ct, -st * ca, st * sa, a * ct,
        st, ct * ca, -ct * sa, a * st,
        0.0, sa, ca, d,
        0.0, 0.0, 0.0, 1.0,
    ))


def forward_kinematics(theta: Sequence[float], links: Sequence[DHLink] = DH_ARM_RIGHT) -> Vector3:
    """Position of the end effector for the joint angles ``theta`` (radians)."""
    if len(theta) != len(links):
        raise ValueError("one angle is needed per link")
    total = reduce(
        lambda acc, pair: acc * dh_transform(pair[0], pair[1].d, pair[1].a, pair[1].alpha),
        zip(theta, links),
        Matrix3D.identity(),
    )
    return (total[0, 3], total[1, 3], total[2, 3])


def _within(value: float, limit: Tuple[float, float]) -> bool:
    low, high = limit
    return low <= value <= high


def inverse_kinematics(
    target: Sequence[float],
    links: Sequence[DHLink] = DH_ARM_RIGHT,
    limits: Limits = JOINT_LIMITS,
) -> Vector3:
    """Joint angles (radians) that put the end effector at ``target``.

    Raises UnreachableError when the target is out of reach or the solution
    breaks a joint limit.
    """
    x, y, z = target
    d1, upper, lower = links[0].d, links[1].a, links[2].a

    theta1 = math.atan2(y, x)
    if not _within(theta1, limits[0]):
        raise UnreachableError("shoulder yaw out of limits")

    r = math.sqrt(x * x + y * y)
    h = z - d1
    reach = math.sqrt(r * r + h * h)
    if reach > upper + lower or reach < abs(upper - lower):
        raise UnreachableError("position out of reach")

    cos_theta3 = (r * r + h * h - upper * upper - lower * lower) / (2 * upper * lower)
    if not -1.0 <= cos_theta3 <= 1.0:
        raise UnreachableError("no elbow solution")
    theta3 = math.acos(cos_theta3)
    if not _within(theta3, limits[2]):
        theta3 = -theta3
        if not _within(theta3, limits[2]):
            raise UnreachableError("elbow pitch out of limits")

    k1 = upper + lower * math.cos(theta3)
    k2 = lower * math.sin(theta3)
    theta2 = math.atan2(h, r) - math.atan2(k2, k1)
    if not _within(theta2, limits[1]):
        raise UnreachableError("shoulder pitch out of limits")

    return (theta1, theta2, theta3)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Solve the right arm for a target position.")
    parser.add_argument(
        "--target", nargs=3, type=float, metavar=("X", "Y", "Z"),
        default=[0.05, 0.05, 0.1], help="target position in metres",
    )
    args = parser.parse_args(argv)
    try:
        theta = inverse_kinematics(args.target, DH_ARM_RIGHT)
    except UnreachableError:
        print("No solution found or position out of limits.")
        return 0
    degrees = [math.degrees(t) for t in theta]
    print("Joint angles: theta1=%.2f°, theta2=%.2f°, theta3=%.2f°" % tuple(degrees))
    position = forward_kinematics(theta, DH_ARM_RIGHT)
    print("Computed position: x=%.4f, y=%.4f, z=%.4f" % position)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())