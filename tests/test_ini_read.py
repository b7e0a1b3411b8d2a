import pytest

from darwinop.ini_read import (
    BUFFER_SIZE,
    get_float,
    get_int,
    get_key,
    get_section,
    get_string,
)

SAMPLE = """\
top_level = above
; a comment = ignored

[Walking]
x_offset = -10
Y_Offset: 5
period_time = 600.5 ; milliseconds
# hash = ignored
name = "quoted ; kept"
escaped = "say \\"hi\\""
plain = text with spaces   
empty =

[Camera]
gain = 255
x_offset = 99
"""


@pytest.fixture
def ini(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


def test_string_in_section(ini):
    assert get_string(ini, "Walking", "plain") == "text with spaces"


def test_section_and_key_ignore_case(ini):
    assert get_string(ini, "walking", "X_OFFSET") == "-10"


def test_colon_separator(ini):
    assert get_string(ini, "Walking", "y_offset") == "5"


def test_trailing_comment_removed(ini):
    assert get_string(ini, "Walking", "period_time") == "600.5"


def test_quoted_value_keeps_comment_characters(ini):
    assert get_string(ini, "Walking", "name") == "quoted ; kept"


def test_escaped_quotes_are_unescaped(ini):
    assert get_string(ini, "Walking", "escaped") == 'say "hi"'


def test_key_lookup_stays_inside_section(ini):
    assert get_string(ini, "Walking", "gain", "none") == "none"
    assert get_string(ini, "Camera", "x_offset") == "99"


def test_keys_above_first_section(ini):
    assert get_string(ini, None, "top_level") == "above"
    assert get_string(ini, "", "top_level") == "above"
    assert get_string(ini, None, "x_offset", "missing") == "missing"


def test_comment_lines_are_not_keys(ini):
    assert get_string(ini, None, "; a comment", "d") == "d"
    assert get_string(ini, "Walking", "# hash", "d") == "d"


def test_missing_file_returns_default(tmp_path):
    missing = tmp_path / "absent.ini"
    assert get_string(missing, "Walking", "x_offset", "fallback") == "fallback"
    assert get_int(missing, "Walking", "x_offset", 7) == 7
    assert get_float(missing, "Walking", "x_offset", 1.5) == 1.5


def test_missing_section_and_key_default(ini):
    assert get_string(ini, "Nowhere", "x_offset") == ""
    assert get_string(ini, "Walking", "unknown", "d") == "d"


def test_get_int(ini):
    assert get_int(ini, "Walking", "x_offset") == -10
    assert get_int(ini, "Camera", "gain") == 255


def test_get_int_empty_value_gives_default(ini):
    assert get_int(ini, "Walking", "empty", 3) == 3


def test_get_int_parses_leading_digits(tmp_path):
    path = tmp_path / "n.ini"
    path.write_text("[S]\na = 42abc\nb = abc\nc = +8\n", encoding="utf-8")
    assert get_int(path, "S", "a") == 42
    assert get_int(path, "S", "b", 5) == 0
    assert get_int(path, "S", "c") == 8


def test_get_float(ini):
    assert get_float(ini, "Walking", "period_time") == 600.5
    assert get_float(ini, "Walking", "x_offset") == -10.0
    assert get_float(ini, "Walking", "empty", 2.5) == 2.5


def test_get_float_prefix_and_garbage(tmp_path):
    path = tmp_path / "f.ini"
    path.write_text("[S]\na = 0.25rad\nb = word\n", encoding="utf-8")
    assert get_float(path, "S", "a") == 0.25
    assert get_float(path, "S", "b", 9.0) == 0.0


def test_get_section_by_index(ini):
    assert get_section(ini, 0) == "Walking"
    assert get_section(ini, 1) == "Camera"
    assert get_section(ini, 2) == ""
    assert get_section(ini, -1) == ""


def test_get_key_by_index(ini):
    names = [get_key(ini, "Camera", i) for i in range(3)]
    assert names == ["gain", "x_offset", ""]


def test_get_key_skips_comments(ini):
    assert get_key(ini, "Walking", 3) == "name"
    assert get_key(ini, None, 0) == "top_level"
    assert get_key(ini, None, 1) == ""
    assert get_key(ini, "Walking", -1) == ""


def test_long_value_is_truncated(tmp_path):
    path = tmp_path / "long.ini"
    path.write_text("[S]\nk=" + "x" * 600 + "\n", encoding="utf-8")
    value = get_string(path, "S", "k")
    assert len(value) < BUFFER_SIZE
    assert set(value) == {"x"}


def test_default_is_truncated():
    assert len(get_string("/nonexistent/dir/file.ini", "S", "k", "y" * 600)) == BUFFER_SIZE - 1


def test_path_as_string(ini):
    assert get_string(str(ini), "Camera", "gain") == "255"