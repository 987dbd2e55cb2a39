from pathlib import Path
from typing import Union
import os
import uuid


class ImageFileRepository:
    """
    Handles file I/O for encoded identicon images.
    """

    @staticmethod
    def write_bytes(path: Union[str, Path], data: bytes) -> Path:
        """
        Write *data* to *path*, replacing any existing file.

        The bytes land in a sibling temp file first and are moved into place
        with os.replace, so the destination is either the old file or the
        complete new one. Concurrent writers to one path: last one wins.
        """
        path = Path(path)
        temp_path = path.with_name(f".tmp-{uuid.uuid4().hex}")
        try:
            with temp_path.open("wb") as handle:
                handle.write(data)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(temp_path, path)
        finally:
            temp_path.unlink(missing_ok=True)
        return path

