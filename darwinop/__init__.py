"""Geometry, 4x4 transforms, arm kinematics, MX-28 servo units and INI settings for the DARwIn-OP humanoid."""

__version__ = "0.1.0"