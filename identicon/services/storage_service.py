from __future__ import annotations
from pathlib import Path
from typing import Union
import logging

from .. import config
from ..exceptions import IdenticonWriteError
from ..repositories.image_file_repository import ImageFileRepository

logger = logging.getLogger(__name__)


class StorageService:
    """
    Business-level persistence of rendered identicons.
    The only place in the package where a write can fail.
    """

    def __init__(
        self,
        output_dir: Union[str, Path, None] = None,
        repository: ImageFileRepository | None = None,
    ):
        self.output_dir = Path(output_dir if output_dir is not None else config.OUTPUT_DIR)
        self.repository = repository or ImageFileRepository()

    def destination_for(self, value: str) -> Path:
        """`<output_dir>/<value>.png`"""
        return self.output_dir / f"{value}.png"

    def stays_in_output_dir(self, value: str) -> bool:
        """
        True when `<value>.png` resolves to a file directly inside output_dir,
        i.e. *value* carries no absolute path, separators or `..` hops.
        """
        try:
            destination = self.destination_for(value).resolve()
        except (OSError, ValueError):
            return False
        return destination.parent == self.output_dir.resolve()

    def save_image(self, png: bytes, value: str) -> Path:
        """
        Persist *png* as `<value>.png`, overwriting any previous file.

        Raises:
            IdenticonWriteError: on any OS-level failure, with the cause chained.
        """
        path = self.destination_for(value)
        try:
            self.repository.write_bytes(path, png)
        except OSError as e:
            logger.error(f"Failed to write {path}: {e}")
            raise IdenticonWriteError(path, e.errno, e.strerror or str(e)) from e

        logger.info(f"Saved identicon to {path}")
        return path
