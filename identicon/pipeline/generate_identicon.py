# pipeline/generate_identicon.py
from __future__ import annotations
from pathlib import Path
from typing import Union
import logging

from ..services.drawing_service import DrawingService
from ..services.identicon_service import IdenticonService
from ..services.storage_service import StorageService

logger = logging.getLogger(__name__)


def render(
    value: str,
    *,
    identicon_service: IdenticonService | None = None,
    drawing_service: DrawingService | None = None,
) -> bytes:
    """
    Run the in-memory part of the pipeline and return the PNG bytes.
    Nothing touches the disk.
    """
    identicon_service = identicon_service or IdenticonService()
    drawing_service = drawing_service or DrawingService()

    image = identicon_service.build(value)
    return drawing_service.draw_image(image)


def generate(
    value: str,
    *,
    output_dir: Union[str, Path, None] = None,
    identicon_service: IdenticonService | None = None,
    drawing_service: DrawingService | None = None,
    storage_service: StorageService | None = None,
) -> Path:
    """
    Generate the identicon for *value* and save it as `<value>.png`:
        • hash -> color -> grid -> filter -> pixel map (pure)
        • draw the PNG fully in memory
        • write it in one go, so a failure never leaves a partial file

    Returns:
        Path: where the PNG was written.
    Raises:
        IdenticonWriteError: if the file could not be written.
    """
    storage_service = storage_service or StorageService(output_dir)

    png = render(
        value,
        identicon_service=identicon_service,
        drawing_service=drawing_service,
    )
    logger.debug(f"Rendered identicon for {value!r} ({len(png)} bytes)")
    return storage_service.save_image(png, value)
