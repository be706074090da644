"""Key-value persistence backends."""
import os
from pathlib import Path
from typing import Protocol


class KeyValueBackend(Protocol):
    """Durable string storage addressed by key."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class JsonFileBackend:
    """Stores each key as a JSON file named {data_dir}/{key}.json."""

    def __init__(self, data_dir: Path = Path("data/state")) -> None:
        """Initialize the backend.

        Args:
            data_dir: Directory holding one file per key.
        """
        self._data_dir = data_dir

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def _get_file_path(self, key: str) -> Path:
        return self._data_dir / f"{key}.json"

    def get(self, key: str) -> str | None:
        file_path = self._get_file_path(key)
        if not file_path.exists():
            return None
        return file_path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self._data_dir.mkdir(parents=True, exist_ok=True)
        file_path = self._get_file_path(key)
        tmp_path = file_path.with_suffix(".json.tmp")
        tmp_path.write_text(value, encoding="utf-8")
        os.replace(tmp_path, file_path)


class MemoryBackend:
    """In-process backend, used for tests and ephemeral sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
