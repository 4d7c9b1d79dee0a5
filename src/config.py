"""Run configuration: store location, output path and image naming."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Config:
    db_path: Path = Path("bloodline.db")
    output_path: Path = Path("out.dot")
    image_dir: Path = Path(".")
    image_pattern: str = "{:03d}-pic.jpg"
    sample_image: Path | None = None
    render_format: str | None = None  # png, svg or pdf

    @classmethod
    def from_root(cls, root: Path, **overrides) -> "Config":
        """Build a config with every path resolved under ``root``."""
        values = {
            "db_path": root / "bloodline.db",
            "output_path": root / "out.dot",
            "image_dir": root,
        }
        values.update(overrides)
        return cls(**values)

    def image_filename(self, person_id: int) -> str:
        """Filename of the portrait for a person, e.g. 7 -> '007-pic.jpg'."""
        return self.image_pattern.format(person_id)

    def image_path(self, person_id: int) -> Path:
        return self.image_dir / self.image_filename(person_id)
