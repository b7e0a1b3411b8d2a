"""Conversions between raw MX-28 servo positions and angles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ServoModel:
    """Position range and conversion ratios of one servo resolution."""

    center_value: int
    max_value: int
    min_angle: float
    max_angle: float
    ratio_value_to_angle: float
    ratio_angle_to_value: float
    param_bytes: int
    min_value: int = 0

    def value_to_angle(self, value: int) -> float:
        """Angle in degrees for a raw position value."""
        return (value - self.center_value) * self.ratio_value_to_angle

    def angle_to_value(self, angle: float) -> int:
        """Raw position value for an angle in degrees (truncated toward zero)."""
        return int(angle * self.ratio_angle_to_value) + self.center_value


MX28_1024 = ServoModel(
    center_value=512,
    max_value=1023,
    min_angle=-150.0,
    max_angle=150.0,
    ratio_value_to_angle=0.293,  # 300 / 1024
    ratio_angle_to_value=3.413,  # 1024 / 300
    param_bytes=5,
)

MX28_4096 = ServoModel(
    center_value=2048,
    max_value=4095,
    min_angle=-180.0,
    max_angle=180.0,
    ratio_value_to_angle=0.088,  # 360 / 4096
    ratio_angle_to_value=11.378,  # 4096 / 360
    param_bytes=7,
)

MX28 = MX28_4096