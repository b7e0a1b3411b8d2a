"""Geometric inverse kinematics of the right arm, in centimetres and degrees."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence, Tuple

logger = logging.getLogger(__name__)

TRUNK = 12.2
UPPER_ARM = 6.0
FOREARM = 12.9


@dataclass(frozen=True)
class Angles:
    """Arm joint angles in degrees."""

    shoulder_yaw: float
    shoulder_pitch: float
    elbow: float


def forward_kinematics(theta: Sequence[float]) -> Tuple[float, float, float]:
    """End-effector position for joint angles (degrees: yaw, pitch, elbow)."""
    t0, t1, t2 = (math.radians(t) for t in theta)
    c0, s0 = math.cos(t0), math.sin(t0)
    c1, s1 = math.cos(t1), math.sin(t1)
    c2, s2 = math.cos(t2), math.sin(t2)
    x = TRUNK * c0 + UPPER_ARM * c0 * c1 + FOREARM * (c0 * c1 * c2 - s0 * s2)
    y = TRUNK * s0 + UPPER_ARM * s0 * c1 + FOREARM * (s0 * c1 * c2 + c0 * s2)
    z = UPPER_ARM * s1 + FOREARM * s1 * c2
    return (x, y, z)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class ArmSolver:
    """Solves arm angles, falling back to the last valid result when out of reach."""

    def __init__(self, initial: Angles = Angles(0.0, 90.0, 0.0)) -> None:
        self.last_valid = initial

    def solve(self, x: float, y: float, z: float) -> Angles:
        r_xy = math.sqrt(x * x + y * y)
        distance = math.sqrt(r_xy * r_xy + z * z)

        max_reach = TRUNK + UPPER_ARM + FOREARM
        min_reach = abs(UPPER_ARM - FOREARM)
        if distance > max_reach or distance < min_reach:
            logger.error(
                "position (%.2f, %.2f, %.2f cm) out of reach (max=%.2f cm, min=%.2f cm)",
                x, y, z, max_reach, min_reach,
            )
            return self.last_valid

        yaw = math.degrees(math.atan2(y, x))

        effective = math.sqrt((distance - TRUNK) ** 2 + z * z)
        if effective > UPPER_ARM + FOREARM or effective < min_reach:
            logger.error("vertical position out of reach after the trunk")
            return self.last_valid

        elevation = math.degrees(math.atan2(z, r_xy))

        cos_elbow = (UPPER_ARM ** 2 + FOREARM ** 2 - effective ** 2) / (2 * UPPER_ARM * FOREARM)
        elbow_inner = math.degrees(math.acos(_clamp(cos_elbow, -1.0, 1.0)))
        elbow = 180.0 - elbow_inner

        cos_shoulder = (UPPER_ARM ** 2 + effective ** 2 - FOREARM ** 2) / (2 * UPPER_ARM * effective)
        shoulder_inner = math.degrees(math.acos(_clamp(cos_shoulder, -1.0, 1.0)))

        pitch = elevation - shoulder_inner + 90.0
        elbow -= 90.0

        angles = Angles(
            shoulder_yaw=_clamp(yaw, -90.0, 90.0),
            shoulder_pitch=_clamp(pitch, 0.0, 180.0),
            elbow=_clamp(elbow, -90.0, 90.0),
        )
        self.last_valid = angles
        logger.info(
            "position (%.2f, %.2f, %.2f cm) -> yaw=%.1f, pitch=%.1f, elbow=%.1f",
            x, y, z, angles.shoulder_yaw, angles.shoulder_pitch, angles.elbow,
        )
        return angles