# System
import datetime as dt
import enum
import logging
import pathlib as pl
import re

# Third Party
import pydantic as pc
import tomlkit as tk

# Internal
from .color import Color

NAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]+$")


class SnapshotKind(enum.StrEnum):
    """Collections a registry keeps snapshots in."""

    DUMPS = "dumps"
    DEFAULTS = "defaults"


class SnapshotNotFoundError(KeyError):
    """Raised when a named snapshot does not exist in the registry."""


class ColorSnapshot(pc.BaseModel):
    """A named color persisted in a registry."""

    model_config = pc.ConfigDict(frozen=True)

    name: str = pc.Field(description="Snapshot identifier (only [a-zA-Z0-9_] allowed)")
    color: Color
    timestamp: str = pc.Field(default_factory=lambda: dt.datetime.now().isoformat())

    @pc.field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not NAME_PATTERN.match(v):
            raise ValueError(
                f"name '{v}' contains invalid characters. "
                "Names must contain only letters, numbers, and underscores."
            )
        return v

    def to_toml(self) -> str:
        """Serialize to TOML."""
        doc = tk.document()
        doc["name"] = self.name
        doc["timestamp"] = self.timestamp

        color_table = tk.table()
        color_table["x"] = self.color.x
        color_table["y"] = self.color.y
        color_table["z"] = self.color.z
        doc["color"] = color_table

        return tk.dumps(doc)

    @classmethod
    def from_toml(cls, toml_content: str) -> "ColorSnapshot":
        """Deserialize from TOML; out-of-range components are clamped."""
        doc = tk.loads(toml_content)
        return cls.model_validate(doc.unwrap())


class ColorRegistry:
    """File-based registry of color snapshots, one TOML file per snapshot."""

    def __init__(self, location: pl.Path | str):
        self.location = pl.Path(location)

    def directory(self, kind: SnapshotKind) -> pl.Path:
        return self.location / SnapshotKind(kind).value

    def path_for(self, name: str, kind: SnapshotKind) -> pl.Path:
        if not NAME_PATTERN.match(name):
            raise ValueError(f"Invalid snapshot name: '{name}'")
        return self.directory(kind) / f"{name}.toml"

    def save(
        self, snapshot: ColorSnapshot, kind: SnapshotKind = SnapshotKind.DUMPS
    ) -> pl.Path:
        directory = self.directory(kind)
        directory.mkdir(parents=True, exist_ok=True)
        path = self.path_for(snapshot.name, kind)
        path.write_text(snapshot.to_toml(), encoding="utf-8")
        logging.info(f"Saved color snapshot '{snapshot.name}' to {path}.")
        return path

    def load(self, name: str, kind: SnapshotKind = SnapshotKind.DUMPS) -> ColorSnapshot:
        path = self.path_for(name, kind)
        if not path.is_file():
            raise SnapshotNotFoundError(
                f"Color snapshot '{name}' not found in {SnapshotKind(kind).value}. "
                f"Available snapshots: {self.names(kind)}"
            )

        try:
            with path.open("rt", encoding="utf-8") as fp:
                snapshot = ColorSnapshot.from_toml(fp.read())
        except ValueError as e:
            raise ValueError(f"Invalid snapshot file '{path.name}': {e}") from e

        if snapshot.name != name:
            raise ValueError(
                f"Invalid snapshot file '{path.name}': "
                f"holds snapshot '{snapshot.name}'"
            )
        return snapshot

    def names(self, kind: SnapshotKind = SnapshotKind.DUMPS) -> list[str]:
        directory = self.directory(kind)
        if not directory.is_dir():
            return []
        return sorted(path.stem for path in directory.glob("*.toml"))

    def remove(self, name: str, kind: SnapshotKind = SnapshotKind.DUMPS) -> None:
        path = self.path_for(name, kind)
        if not path.is_file():
            raise SnapshotNotFoundError(f"Color snapshot '{name}' not found.")
        path.unlink()
        logging.info(f"Removed color snapshot '{name}'.")

    def rename(
        self, old: str, new: str, kind: SnapshotKind = SnapshotKind.DUMPS
    ) -> ColorSnapshot:
        snapshot = self.load(old, kind)
        if old == new:
            return snapshot
        if self.path_for(new, kind).is_file():
            raise FileExistsError(f"Color snapshot '{new}' already exists.")
        renamed = ColorSnapshot(
            name=new, color=snapshot.color, timestamp=snapshot.timestamp
        )
        self.save(renamed, kind)
        self.remove(old, kind)
        logging.info(f"Renamed color snapshot '{old}' to '{new}'.")
        return renamed
