[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "darwinop"
version = "0.1.0"
description = "Geometry, 4x4 transforms, arm kinematics, MX-28 servo conversions and INI settings for the DARwIn-OP / ROBOTIS OP2 humanoid"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "robotics",
    "humanoid",
    "kinematics",
    "denavit-hartenberg",
    "dynamixel",
    "ini",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
darwinop-arm-ik = "darwinop.dh_arm:main"

[tool.hatch.build.targets.wheel]
packages = ["darwinop"]

[tool.pytest.ini_options]
addopts = "-ra"
