import io
from pathlib import Path

import pytest

from coastline.main import main, run


def _write_config(tmp_path: Path, x: int, y: int, image: str = "shore.jpg") -> Path:
    path = tmp_path / "player.cfg"
    path.write_text(f"image_path={image}\nx={x}\ny={y}\n", encoding="utf-8")
    return path


@pytest.fixture
def image(tmp_path: Path) -> Path:
    path = tmp_path / "shore.jpg"
    path.write_bytes(b"")
    return path


def test_no_argument_prints_usage(capsys) -> None:
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out.startswith("Usage:")
    assert "image_path=" in captured.out


def test_successful_run(tmp_path, image, capsys) -> None:
    cfg = _write_config(tmp_path, 12, 6, image=str(image))
    assert main([str(cfg)]) == 0
    captured = capsys.readouterr()
    assert captured.err == ""
    lines = captured.out.splitlines()
    assert lines[0] == "==== Coastline Prototype ===="
    assert lines[1] == f"Image path: {image}"
    assert lines[2] == "Player position: (12, 6)"
    grid = lines[4:24]
    assert len(grid) == 20
    assert all(len(row) == 40 for row in grid)
    assert grid[6][12] == "P"
    assert "landmark" in lines[-1]


def test_out_of_bounds_player(tmp_path, image, capsys) -> None:
    cfg = _write_config(tmp_path, 45, 5, image=str(image))
    assert main([str(cfg)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: ")
    assert "[0, 39]" in captured.err
    assert "[0, 19]" in captured.err


def test_missing_image_is_only_a_warning(tmp_path, capsys) -> None:
    cfg = _write_config(tmp_path, 1, 1, image=str(tmp_path / "missing.jpg"))
    assert main([str(cfg)]) == 0
    captured = capsys.readouterr()
    assert captured.err.startswith("Warning: ")
    assert "missing.jpg" in captured.err
    assert "P" in captured.out


def test_malformed_config(tmp_path, capsys) -> None:
    path = tmp_path / "player.cfg"
    path.write_text("image_path=shore.jpg\nbad_line_no_equals\n", encoding="utf-8")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "line 2" in captured.err


def test_unreadable_config(tmp_path, capsys) -> None:
    assert main([str(tmp_path / "absent.cfg")]) == 1
    assert capsys.readouterr().err.startswith("Error: ")


def test_run_writes_to_given_streams(tmp_path, image) -> None:
    out, err = io.StringIO(), io.StringIO()
    cfg = _write_config(tmp_path, 0, 0, image=str(image))
    assert run(cfg, stdout=out, stderr=err) == 0
    assert err.getvalue() == ""
    assert out.getvalue().count("\n") == 4 + 20 + 2


def test_empty_image_path_warns(tmp_path: Path, capsys) -> None:
    path = tmp_path / "player.cfg"
    path.write_text("image_path=\nx=1\ny=1\n", encoding="utf-8")
    assert main([str(path)]) == 0
    captured = capsys.readouterr()
    assert captured.err.startswith("Warning: ")
    assert "P" in captured.out
