"""Filesystem-backed state store."""

from dataclasses import dataclass
from pathlib import Path

from calorie_tracker.services.state import StateStore


@dataclass
class FileStateStore(StateStore):
    """Stores each record as ``<key>.json`` inside a directory."""

    directory: Path

    @classmethod
    def create(cls, directory: str) -> "FileStateStore":
        """Create a store, making the directory if needed."""
        path = Path(directory)
        path.mkdir(parents=True, exist_ok=True)
        return cls(directory=path)

    def read(self, key: str) -> str | None:
        """Return the record text if the file exists."""
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, key: str, value: str) -> None:
        """Write the record atomically via a temporary file."""
        path = self._path(key)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(value, encoding="utf-8")
        tmp_path.replace(path)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"
