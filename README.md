# darwinop

Building blocks for a DARwIn-OP / ROBOTIS OP2 humanoid robot, with no
dependencies beyond the standard library.

## What is in it

- **Geometry** (`darwinop.geometry`): immutable `Point2D`, `Point3D` and
  `Vector3D`. Points have `distance`; all three support `+` and `-` with one
  another or with a number, and `*` and `/` by a number. `Vector3D` adds
  `between(start, end)`, `length`, `normalized` (raises `ValueError` for a
  zero vector), `dot`, `cross` and `angle_between(other, axis=None)`, which
  returns degrees and is negative when the cross product points away from
  `axis`.
- **Homogeneous matrices** (`darwinop.matrix`): `Matrix3D`, an immutable 4×4
  matrix of 16 values stored row by row. `identity()`,
  `from_transform(point, angle)` (Euler angles in degrees plus a
  translation), `determinant`, `inverse` (raises `ValueError` when singular),
  `scale`, `rotate(angle, axis)`, `translate`, composition with `*`,
  indexing with `m[row, column]`, `rows`, and `transform`, which applies the
  matrix to a `Point3D` or `Vector3D` and returns the same type. `scale`,
  `rotate` and `translate` return a new matrix.
- **Servo units** (`darwinop.mx28`): `ServoModel` converts between raw MX-28
  position values and angles in degrees (`value_to_angle`,
  `angle_to_value`). `MX28_1024` and `MX28_4096` describe the two
  resolutions; `MX28` is the 4096-step model.
- **Arm kinematics**:
  - `darwinop.dh_arm`: Denavit–Hartenberg kinematics for a three-joint arm,
    in metres and radians. `dh_transform`, `forward_kinematics` and
    `inverse_kinematics`; `DHLink` holds one joint's parameters and
    `DH_ARM_RIGHT` and `JOINT_LIMITS` are the defaults. A target that is out
    of reach or breaks a joint limit raises `UnreachableError`.
  - `darwinop.arm`: a geometric solver in centimetres and degrees.
    `ArmSolver.solve(x, y, z)` returns `Angles` (`shoulder_yaw`,
    `shoulder_pitch`, `elbow`), clamped to the servo ranges, and returns the
    last valid solution when a target is out of reach. `forward_kinematics`
    gives the end-effector position for given angles.
- **INI settings**:
  - `darwinop.ini_read`: `get_string`, `get_int`, `get_float`,
    `get_section` and `get_key`. Section and key names match without regard
    to case, values end at an unquoted `;` or `#`, and surrounding double
    quotes are removed. A missing file or entry gives the default.
  - `darwinop.ini_write`: `put_string`, `put_int`, `put_float`,
    `delete_key` and `delete_section`. Writes create the file, section or key
    as needed, go through a temporary file beside the original, and drop
    blank lines except before section headers.
  - `darwinop.ini_file`: `IniFile(path)` wraps both for one file, with
    `get_string`, `get_int`, `get_float`, `section`, `key`, `put` (string,
    integer or float) and `delete` (one key, or the whole section when no key
    is given).

A section of `None` or `""` means the keys above the first section.

## What it does not do

The package does not talk to the robot. It has no serial or sub-controller
communication, no motion or walking engine, no camera or vision code and no
simulator controller; it only computes and stores the values such code
would use.

## Installation

```
pip install darwinop
```

## Command line

Solve the right arm for a target position (metres) and check the answer with
forward kinematics:

```
darwinop-arm-ik
darwinop-arm-ik --target 0.05 0.05 0.1
```

It prints the joint angles in degrees and the position they reach, or a
message when there is no solution.

## Examples

Solve for joint angles with the geometric arm solver:

```python
from darwinop.arm import ArmSolver

solver = ArmSolver()
angles = solver.solve(0.0, 0.0, 15.0)   # target in centimetres
print(angles.shoulder_yaw, angles.shoulder_pitch, angles.elbow)
```

Compose transforms:

```python
from darwinop.geometry import Point3D, Vector3D
from darwinop.matrix import Matrix3D

m = Matrix3D.identity().translate(Vector3D(1.0, 0.0, 0.0))
m = m.rotate(90.0, Vector3D(0.0, 0.0, 1.0))
print(m.transform(Point3D(1.0, 0.0, 0.0)))
```

Convert servo positions:

```python
from darwinop.mx28 import MX28

print(MX28.value_to_angle(3072))   # degrees
print(MX28.angle_to_value(45.0))   # raw value
```

Read and write settings:

```python
from darwinop.ini_file import IniFile

ini = IniFile("config.ini")
ini.put("Walking Config", "x_offset", -10)
print(ini.get_int("Walking Config", "x_offset", 0))
```

## Running the tests

```
pip install -e ".[test]"
pytest
```