import os
from pathlib import Path
from typing import Optional

from ratepoll.core.exceptions import StateReadError, StateWriteError
from ratepoll.core.ports.state_store import StateStore


class FileStateStore(StateStore):
    def __init__(self, base_dir: str | Path) -> None:
        self._base_dir = Path(base_dir)

    def read(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        try:
            raw = path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as error:
            raise StateReadError(f"Failed to read {path}: {error}", key) from error
        return raw.decode("utf-8", errors="replace")

    def write(self, key: str, value: str) -> None:
        path = self.path_for(key)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w", encoding="utf-8") as handle:
                handle.write(value)
                handle.flush()
                os.fsync(handle.fileno())
            temp_path.replace(path)
        except OSError as error:
            raise StateWriteError(f"Failed to write {path}: {error}", key) from error

    def path_for(self, key: str) -> Path:
        safe_key = key.replace("/", "_")
        return self._base_dir / f"{safe_key}.state"
