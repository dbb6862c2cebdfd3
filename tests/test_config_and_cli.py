import logging

import numpy as np
import pytest
import yaml
from PIL import Image

import main
from utils.config import CONFIG_FILE, MazeConfig, load_maze_config, load_yaml_config
from utils.logging_utils import resolve_level


def _write_config(tmp_path, **overrides):
    data = {
        "width": 4,
        "height": 3,
        "algorithm": "huntandkill",
        "seed": 5,
        "resolution": 6,
        "png_output": str(tmp_path / "maze.png"),
        "polar_png_output": str(tmp_path / "maze_polar.png"),
        "log_level": "warning",
    }
    data.update(overrides)
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


def test_default_config_file_loads():
    config = load_maze_config(CONFIG_FILE)
    assert config.algorithm == "recursivebacktracker"
    assert (config.width, config.height) == (8, 8)
    assert config.seed is None and config.max_steps is None


def test_load_yaml_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_yaml_config(tmp_path / "nope.yaml", "Maze")


def test_load_yaml_config_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_yaml_config(path, "Maze") == {}


def test_load_yaml_config_parse_error(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("width: [1, 2\n", encoding="utf-8")
    with pytest.raises(yaml.YAMLError):
        load_yaml_config(path, "Maze")


def test_load_yaml_config_rejects_non_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(TypeError):
        load_yaml_config(path, "Maze")


def test_maze_config_from_dict_ignores_unknown_keys():
    config = MazeConfig.from_dict({"width": 5, "colour": "red", "seed": None})
    assert config.width == 5
    assert config.seed is None


@pytest.mark.parametrize("bad", [{"width": 0}, {"resolution": -1}, {"max_steps": 0}])
def test_maze_config_validation(bad):
    with pytest.raises(ValueError):
        MazeConfig.from_dict(bad)


def test_resolve_level():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(logging.WARNING) == logging.WARNING
    with pytest.raises(ValueError):
        resolve_level("loud")


def test_cli_prints_text_maze(tmp_path, capsys):
    config = _write_config(tmp_path)
    assert main.run(["--config", str(config), "-o", "-s"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("+---+---+---+---+\n")
    assert "0" in out


def test_cli_seed_is_reproducible(tmp_path, capsys):
    config = _write_config(tmp_path, seed=None)
    main.run(["--config", str(config), "-o", "--seed", "12", "-a", "wilsons"])
    first = capsys.readouterr().out
    main.run(["--config", str(config), "-o", "--seed", "12", "-a", "wilsons"])
    assert capsys.readouterr().out == first


def test_cli_writes_images_with_text_mask(tmp_path):
    mask = tmp_path / "mask.txt"
    mask.write_text("3 3\n.x.\n...\n.x.\n", encoding="utf-8")
    config = _write_config(tmp_path)
    assert main.run(["--config", str(config), "-w", str(mask), "-t", "-p", "--longest-path"]) == 0
    with Image.open(tmp_path / "maze.png") as img:
        assert img.size == (3 * 6 + 1, 3 * 6 + 1)
    with Image.open(tmp_path / "maze_polar.png") as img:
        assert img.size == (2 * 6 * 3 + 1, 2 * 6 * 3 + 1)


def test_cli_image_mask(tmp_path, capsys):
    pixels = np.full((2, 2, 3), 255, dtype=np.uint8)
    pixels[0, 1] = 0
    image_path = tmp_path / "mask.png"
    Image.fromarray(pixels).save(image_path)
    config = _write_config(tmp_path)
    assert main.run(["--config", str(config), "-m", str(image_path), "-o"]) == 0
    assert capsys.readouterr().out.startswith("+---+---+\n")


def test_cli_mask_options_are_exclusive(tmp_path):
    with pytest.raises(SystemExit):
        main.run(["-w", "a.txt", "-m", "b.png"])


def test_cli_rejects_bad_resolution(tmp_path):
    config = _write_config(tmp_path)
    assert main.run(["--config", str(config), "-r", "0"]) == 2


def test_main_exits_on_maze_error(tmp_path, monkeypatch):
    mask = tmp_path / "mask.txt"
    mask.write_text("3 1\n.x.\n", encoding="utf-8")
    config = _write_config(tmp_path)
    monkeypatch.setattr("sys.argv", ["main.py", "--config", str(config), "-w", str(mask)])
    with pytest.raises(SystemExit) as excinfo:
        main.main()
    assert "disconnected" in str(excinfo.value.code)


def test_main_exits_on_unknown_algorithm(tmp_path, monkeypatch):
    config = _write_config(tmp_path)
    monkeypatch.setattr("sys.argv", ["main.py", "--config", str(config), "-a", "prims"])
    with pytest.raises(SystemExit) as excinfo:
        main.main()
    assert "prims" in str(excinfo.value.code)
