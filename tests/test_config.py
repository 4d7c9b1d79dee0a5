"""Tests for run configuration."""

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from config import Config


def test_defaults():
    config = Config()
    assert config.db_path == Path("bloodline.db")
    assert config.output_path == Path("out.dot")
    assert config.render_format is None


def test_from_root(tmp_path: Path):
    config = Config.from_root(tmp_path, render_format="svg")
    assert config.db_path == tmp_path / "bloodline.db"
    assert config.output_path == tmp_path / "out.dot"
    assert config.image_dir == tmp_path
    assert config.render_format == "svg"


@pytest.mark.parametrize("person_id, filename", [(0, "000-pic.jpg"), (7, "007-pic.jpg"), (1234, "1234-pic.jpg")])
def test_image_filename(person_id, filename):
    assert Config().image_filename(person_id) == filename


def test_custom_pattern(tmp_path: Path):
    config = Config(image_dir=tmp_path, image_pattern="portrait_{:05d}.png")
    assert config.image_path(42) == tmp_path / "portrait_00042.png"


def test_frozen():
    with pytest.raises(FrozenInstanceError):
        Config().db_path = Path("other.db")  # type: ignore[misc]
