import pytest

from cubmap.cli import check_arguments, has_cub_extension, main

VALID = (
    "NO ./textures/north.xpm\n"
    "SO ./textures/south.xpm\n"
    "WE ./textures/west.xpm\n"
    "EA ./textures/east.xpm\n"
    "\n"
    "F 220,100,0\n"
    "C 225,30,0\n"
    "\n"
    "111111\n"
    "100001\n"
    "10N001\n"
    "111111\n"
)


def _write(tmp_path, text, name="level.cub"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


@pytest.mark.parametrize("name", ["map.cub", "a.cub", "maps/level.cub"])
def test_cub_extension_accepted(name):
    assert has_cub_extension(name)


@pytest.mark.parametrize("name", [".cub", "map.cu", "map.cub.bak", "mapcub", ""])
def test_cub_extension_rejected(name):
    assert not has_cub_extension(name)


def test_check_arguments_returns_path():
    assert check_arguments(["maps/level.cub"]) == "maps/level.cub"


@pytest.mark.parametrize(
    "args, message",
    [
        ([], "Please provide a .cub map to start playing."),
        (["a.cub", "b.cub"], "Please provide only one .cub map to start playing."),
        (["map.txt"], "Please provide a valid file in '.cub' format."),
    ],
)
def test_check_arguments_errors(args, message):
    with pytest.raises(ValueError) as info:
        check_arguments(args)
    assert str(info.value) == message


def test_main_valid_file(tmp_path, capsys):
    assert main([_write(tmp_path, VALID)]) == 0
    assert "it worked!" in capsys.readouterr().out


def test_main_invalid_map(tmp_path, capsys):
    text = VALID.replace("100001\n", "100000\n")
    assert main([_write(tmp_path, text)]) == 1
    assert "Map is not closed." in capsys.readouterr().out


def test_main_without_arguments(capsys):
    assert main([]) == 0
    assert "Please provide a .cub map to start playing." in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.cub")]) == 0
    assert "Cannot open map file." in capsys.readouterr().out


def test_main_empty_file(tmp_path, capsys):
    assert main([_write(tmp_path, "")]) == 0
    assert "File is empty." in capsys.readouterr().out


def test_main_wrong_extension(tmp_path, capsys):
    assert main([_write(tmp_path, VALID, name="level.txt")]) == 0
    assert "'.cub' format" in capsys.readouterr().out