import pytest

from cubmap.elements import (
    CubError,
    Elements,
    check_colors,
    is_element_line,
    is_valid_rgb_code,
    is_valid_rgb_format,
    parse_elements,
    remove_whitespace,
    validate_elements,
)

HEADER = [
    "NO ./textures/north.xpm\n",
    "SO ./textures/south.xpm\n",
    "WE ./textures/west.xpm\n",
    "EA ./textures/east.xpm\n",
    "\n",
    "F 220,100,0\n",
    "C 225,30,0\n",
    "\n",
]


def test_remove_whitespace_keeps_newline():
    assert remove_whitespace("NO ./a\t\r\f b\n") == "NO./ab\n"


def test_remove_whitespace_of_blank_text_is_empty():
    assert remove_whitespace(" \t \r\f") == ""


@pytest.mark.parametrize("line", ["NO./a", "EA./a", "SO./a", "WE./a", "F1,2,3", "C1,2,3"])
def test_element_lines_accepted(line):
    assert is_element_line(line)


@pytest.mark.parametrize("line", ["N", "NE./a", "XX", "", "ES./a"])
def test_element_lines_rejected(line):
    assert not is_element_line(line)


def test_parse_elements_reads_every_element():
    elements = parse_elements(HEADER, len(HEADER))
    assert elements.north == "./textures/north.xpm\n"
    assert elements.south == "./textures/south.xpm\n"
    assert elements.west == "./textures/west.xpm\n"
    assert elements.east == "./textures/east.xpm\n"
    assert elements.floor == "220,100,0\n"
    assert elements.ceiling == "225,30,0\n"
    assert not elements.missing()


def test_empty_elements_miss_everything():
    assert Elements().missing() == ["NO", "EA", "SO", "WE", "C", "F"]


def test_lines_after_map_start_are_ignored():
    lines = HEADER + ["NO ./other.xpm\n"]
    elements = parse_elements(lines, len(HEADER))
    assert elements.north == "./textures/north.xpm\n"


def test_lines_starting_with_digit_are_skipped():
    lines = ["2 ignored\n"] + HEADER
    elements = parse_elements(lines, len(lines))
    assert elements.west == "./textures/west.xpm\n"


def test_duplicate_element_raises():
    lines = HEADER + ["NO ./again.xpm\n"]
    with pytest.raises(CubError, match="Duplicate element."):
        parse_elements(lines, len(lines))


def test_unknown_line_raises():
    lines = ["R 1920 1080\n"] + HEADER
    with pytest.raises(CubError, match="Invalid line in file"):
        parse_elements(lines, len(lines))


def test_missing_element_raises():
    lines = [line for line in HEADER if not line.startswith("F")]
    with pytest.raises(CubError, match="missing or placed after the map"):
        validate_elements(lines, len(lines))


def test_validate_elements_strips_spaces_in_colours():
    lines = [line for line in HEADER if not line.startswith("F")] + ["F 220, 100, 0\n"]
    elements = validate_elements(lines, len(lines))
    assert elements.floor == "220,100,0\n"


@pytest.mark.parametrize("text", ["220,100,0\n", "0,0,0", "255,255,255", "1,2,"])
def test_rgb_format_accepted(text):
    assert is_valid_rgb_format(text)


@pytest.mark.parametrize(
    "text", ["2555,0,0", ",1,2", "1,2", "1,2,3,4", "1;2;3", "a,b,c", "", "1,2,3x"]
)
def test_rgb_format_rejected(text):
    assert not is_valid_rgb_format(text)


@pytest.mark.parametrize("text", ["0,255,100", "1,2,", "220,100,0\n"])
def test_rgb_code_accepted(text):
    assert is_valid_rgb_code(text)


@pytest.mark.parametrize("text", ["256,0,0", "1,,2", "1,2,\n", "0,0,999"])
def test_rgb_code_rejected(text):
    assert not is_valid_rgb_code(text)


@pytest.mark.parametrize(
    "floor, ceiling, message",
    [
        ("1,2", "1,2,3", "invalid floor format"),
        ("1,2,3", "1;2;3", "invalid ceiling format"),
        ("300,2,3", "1,2,3", "invalid floor code"),
        ("1,2,3", "1,2,256", "invalid ceiling code"),
    ],
)
def test_check_colors_errors(floor, ceiling, message):
    elements = Elements("n", "s", "w", "e", ceiling, floor)
    with pytest.raises(CubError, match=message):
        check_colors(elements)