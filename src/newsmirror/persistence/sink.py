# ABOUTME: Atomic JSON dataset writer for the merged record collection
# ABOUTME: Writes to a temporary sibling file and renames it over the target in one step

import asyncio
import os
import stat
import tempfile
from pathlib import Path

from pydantic import ValidationError

from newsmirror.errors import PersistError
from newsmirror.models import Record, RecordList
from newsmirror.utils.logging import get_logger

DEFAULT_DATASET_MODE = 0o644


class JsonDatasetSink:
    """Persist the full record collection as a pretty-printed JSON array.

    Each call replaces the previous dataset wholesale; readers see either the old file or the new one.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self.logger = get_logger(__name__)

    async def persist(self, records: list[Record]) -> Path:
        """Serialize ``records`` and atomically replace the dataset file.

        Raises:
            PersistError: If serialization or any filesystem step fails
        """
        try:
            payload = RecordList.dump_json(records, indent=2)
        except (ValidationError, TypeError, ValueError) as e:
            raise PersistError(f"Could not serialize {len(records)} records: {e}") from e

        await asyncio.to_thread(self._write_atomically, payload)

        self.logger.info("Dataset written", path=str(self.path), record_count=len(records), bytes=len(payload))
        return self.path

    def _target_mode(self) -> int:
        """Keep an existing dataset's permissions, otherwise make the new file world-readable."""
        try:
            return stat.S_IMODE(self.path.stat().st_mode)
        except FileNotFoundError:
            return DEFAULT_DATASET_MODE

    def _write_atomically(self, payload: bytes) -> None:
        directory = self.path.parent
        tmp_name: str | None = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="wb", dir=directory, prefix=f".{self.path.name}.", suffix=".tmp", delete=False
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
                tmp.write(b"\n")
                tmp.flush()
                os.fsync(tmp.fileno())
            os.chmod(tmp_name, self._target_mode())
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistError(f"Could not write dataset to {self.path}: {e}") from e
