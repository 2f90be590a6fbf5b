"""
Tests for level loading, rendering, settings and the command line.

Usage:
    python -m pytest tests/test_level_io.py
"""

import io
import json
import sys
from pathlib import Path

import pytest
from PIL import Image

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import main as cli
from src.level_io import (
    LevelLoadError,
    format_transcript,
    load_level,
    parse_level,
    render_level,
    render_level_image,
    save_solution_images,
)
from src.level_io.image_render import WALL_COLOR, BLOCK_COLORS
from src.settings import DEFAULT_SETTINGS, load_settings, save_settings
from src.solver import solve

LEVELS_DIR = PROJECT_ROOT / "levels"
SOLUTIONS_DIR = PROJECT_ROOT / "solutions"


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("text", [
    "1 1\n",
    "#12 \n 0#9\n",
    "  3\n  3\n123\n",
])
def test_interior_round_trip(text):
    level = parse_level(text)
    assert level is not None
    assert "\n".join(level.interior_lines()) + "\n" == text


def test_input_ends_at_blank_line():
    level = parse_level("1 1\n222\n\n#\n")
    assert level.interior_lines() == ["1 1", "222"]


def test_crlf_line_endings():
    level = parse_level("1 1\r\n2#2\r\n")
    assert level.interior_lines() == ["1 1", "2#2"]


def test_missing_trailing_newline():
    assert parse_level("11").interior_lines() == ["11"]


@pytest.mark.parametrize("text", ["", "\n", "\n11\n", "12\n1\n", "1\n12\n"])
def test_malformed_text_is_rejected(text):
    assert parse_level(text) is None


def test_load_missing_file(tmp_path):
    path = tmp_path / "nope.txt"
    with pytest.raises(LevelLoadError) as excinfo:
        load_level(path)
    assert str(excinfo.value) == f"Failed to open input file ({path})!"


def test_load_ragged_file(tmp_path):
    path = tmp_path / "ragged.txt"
    path.write_text("123\n12\n", encoding="utf-8")
    with pytest.raises(LevelLoadError) as excinfo:
        load_level(path)
    assert str(excinfo.value) == "Failed to read level!"


def test_load_level_file():
    level = load_level(LEVELS_DIR / "drop.txt")
    assert level.interior_lines() == ["1  ", "2 1"]
    assert level.groups == 3


# ---------------------------------------------------------------------------
# Text rendering
# ---------------------------------------------------------------------------

def test_render_single_block():
    expected = (
        "+-----+\n"
        "|# # #|\n"
        "| +-+ |\n"
        "|#|1|#|\n"
        "| +-+ |\n"
        "|# # #|\n"
        "+-----+\n"
    )
    assert render_level(parse_level("1\n")) == expected


def test_render_fused_square():
    expected = (
        "+-------+\n"
        "|# # # #|\n"
        "| +-+-+ |\n"
        "|#|1 1|#|\n"
        "| + · + |\n"
        "|#|1 1|#|\n"
        "| +-+-+ |\n"
        "|# # # #|\n"
        "+-------+\n"
    )
    assert render_level(parse_level("11\n11\n")) == expected


def test_render_separates_different_groups():
    lines = render_level(parse_level("12\n")).splitlines()
    assert lines[3] == "|#|1|2|#|"


def test_render_interior_matches_level_text():
    level = parse_level("1 #\n0 2\n")
    lines = render_level(level).splitlines()
    cell_rows = lines[1:-1:2]
    interior = [row[3:-3:2] for row in cell_rows[1:-1]]
    assert interior == ["1 #", "0 2"]


def test_transcript_without_solution():
    assert format_transcript([]) == "No solution found!\n"


def test_transcript_header_and_steps():
    path = solve(parse_level("1  1\n"))
    text = format_transcript(path)
    assert text.startswith("Found a solution in 2 steps.\n\nStep 0:\n+")
    assert "\nStep 1:\n" in text
    assert "\nStep 2:\n" in text
    assert "\nStep 3:\n" not in text


@pytest.mark.parametrize(
    "solution", sorted(SOLUTIONS_DIR.glob("*.txt")), ids=lambda p: p.stem
)
def test_golden_transcripts(solution):
    level = load_level(LEVELS_DIR / solution.name)
    expected = solution.read_text(encoding="utf-8")
    assert format_transcript(solve(level)) == expected


# ---------------------------------------------------------------------------
# Image rendering
# ---------------------------------------------------------------------------

def test_render_level_image():
    level = parse_level("1 \n22\n")
    image = render_level_image(level, cell_size=10)

    assert image.size == (level.width * 10, level.height * 10)
    assert image.mode == "RGB"
    # centers of a wall cell and of the '1' block at (1, 1)
    assert image.getpixel((5, 35)) == WALL_COLOR
    assert image.getpixel((15, 15)) == BLOCK_COLORS[1]


def test_save_solution_images(tmp_path):
    path = solve(parse_level("1 1\n"))
    files = save_solution_images(path, tmp_path / "out", cell_size=8)

    assert [f.name for f in files] == ["step_000.png", "step_001.png"]
    for f in files:
        with Image.open(f) as image:
            assert image.size == (5 * 8, 3 * 8)


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

def test_settings_defaults_when_missing(tmp_path):
    assert load_settings(tmp_path / "config.json") == DEFAULT_SETTINGS


def test_settings_invalid_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_settings_round_trip(tmp_path):
    path = tmp_path / "config.json"
    settings = dict(DEFAULT_SETTINGS, max_states=5000)
    save_settings(settings, path)

    assert json.loads(path.read_text(encoding="utf-8"))["max_states"] == 5000
    assert load_settings(path) == settings


def test_settings_fill_missing_keys(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"timeout_sec": 2.5}', encoding="utf-8")
    settings = load_settings(path)
    assert settings["timeout_sec"] == 2.5
    assert settings["strategy_name"] == "bfs"


# ---------------------------------------------------------------------------
# Command line
# ---------------------------------------------------------------------------

@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the CLI in an empty directory so no config.json is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_cli_prints_transcript(workdir, capsys):
    assert cli.main([str(LEVELS_DIR / "one_step.txt")]) == cli.EXIT_OK
    out = capsys.readouterr().out
    assert out == (SOLUTIONS_DIR / "one_step.txt").read_text(encoding="utf-8")


def test_cli_no_solution(workdir, capsys):
    assert cli.main([str(LEVELS_DIR / "walled.txt")]) == cli.EXIT_OK
    assert capsys.readouterr().out == "No solution found!\n"


def test_cli_missing_file(workdir, capsys):
    missing = workdir / "missing.txt"
    assert cli.main([str(missing)]) == cli.EXIT_LOAD_ERROR
    captured = capsys.readouterr()
    assert captured.out == ""
    assert f"Failed to open input file ({missing})!" in captured.err


def test_cli_malformed_file(workdir, capsys):
    bad = workdir / "bad.txt"
    bad.write_text("12\n1\n", encoding="utf-8")
    assert cli.main([str(bad)]) == cli.EXIT_LOAD_ERROR
    assert "Failed to read level!" in capsys.readouterr().err


def test_cli_requires_level_argument(workdir):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code != 0


def test_cli_state_limit(workdir, capsys):
    code = cli.main([str(LEVELS_DIR / "two_steps.txt"), "--max-states", "1"])
    assert code == cli.EXIT_ABORTED
    assert capsys.readouterr().out == "Search aborted after 1 states.\n"


def test_cli_unknown_strategy(workdir):
    assert cli.main([str(LEVELS_DIR / "one_step.txt"), "-s", "dfs"]) == cli.EXIT_USAGE


def test_cli_renders_images(workdir, capsys):
    render_dir = workdir / "render"
    code = cli.main([str(LEVELS_DIR / "two_steps.txt"), "--render-dir", str(render_dir)])
    assert code == cli.EXIT_OK
    assert sorted(p.name for p in render_dir.iterdir()) == [
        "step_000.png", "step_001.png", "step_002.png"
    ]


def test_cli_save_settings(workdir):
    code = cli.main([str(LEVELS_DIR / "single.txt"), "--max-states", "99", "--save-settings"])
    assert code == cli.EXIT_OK
    saved = json.loads((workdir / "config.json").read_text(encoding="utf-8"))
    assert saved["max_states"] == 99


def test_cli_unknown_strategy_is_not_saved(workdir):
    code = cli.main([str(LEVELS_DIR / "single.txt"), "-s", "astar", "--save-settings"])
    assert code == cli.EXIT_USAGE
    assert not (workdir / "config.json").exists()
    # later runs still use the working default
    assert cli.main([str(LEVELS_DIR / "single.txt")]) == cli.EXIT_OK


def test_cli_empty_strategy_setting_uses_default(workdir, capsys):
    (workdir / "config.json").write_text('{"strategy_name": null}', encoding="utf-8")
    assert cli.main([str(LEVELS_DIR / "one_step.txt")]) == cli.EXIT_OK
    assert capsys.readouterr().out.startswith("Found a solution in 1 steps.")


@pytest.mark.parametrize("value", ["0", "-5"])
def test_cli_rejects_non_positive_state_limit(workdir, value):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(LEVELS_DIR / "single.txt"), "--max-states", value])
    assert excinfo.value.code == cli.EXIT_USAGE


def test_cli_writes_utf8_on_ascii_stdout(workdir, monkeypatch):
    buffer = io.BytesIO()
    stream = io.TextIOWrapper(buffer, encoding="ascii")
    monkeypatch.setattr(sys, "stdout", stream)

    assert cli.main([str(LEVELS_DIR / "block.txt")]) == cli.EXIT_OK
    stream.flush()
    expected = (SOLUTIONS_DIR / "block.txt").read_text(encoding="utf-8")
    assert buffer.getvalue().decode("utf-8") == expected


def test_cli_uses_saved_settings(workdir, capsys):
    (workdir / "config.json").write_text('{"max_states": 1}', encoding="utf-8")
    assert cli.main([str(LEVELS_DIR / "two_steps.txt")]) == cli.EXIT_ABORTED


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
