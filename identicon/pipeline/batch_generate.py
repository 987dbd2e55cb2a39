"""
Batch generation: many independent identicons, written concurrently.

Every input runs the full pipeline on its own; the only shared resource is
the output directory, and same-name writes resolve as last-writer-wins.
"""
from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List, Union
import logging

from tqdm import tqdm

from .. import config
from ..exceptions import IdenticonWriteError
from ..models.batch_result import BatchResult
from ..services.storage_service import StorageService
from .generate_identicon import generate

logger = logging.getLogger(__name__)


def _generate_one(value: str, storage_service: StorageService) -> BatchResult:
    try:
        path = generate(value, storage_service=storage_service)
    except IdenticonWriteError as e:
        return BatchResult(value=value, error=e)
    return BatchResult(value=value, path=path)


def generate_many(
    values: Iterable[str],
    *,
    output_dir: Union[str, Path, None] = None,
    workers: int | None = None,
    show_progress: bool = False,
) -> List[BatchResult]:
    """
    Generate one identicon per value.

    Write failures are collected per input rather than aborting the batch;
    anything else propagates. Results come back in input order.
    """
    values = list(values)
    workers = max(1, workers if workers is not None else config.BATCH_WORKERS)
    storage_service = StorageService(output_dir)

    logger.info(f"Generating {len(values)} identicon(s) with {workers} worker(s)")
    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = pool.map(lambda v: _generate_one(v, storage_service), values)
        results = list(tqdm(results, total=len(values), desc="identicons",
                            unit="img", disable=not show_progress))

    failed = [r for r in results if not r.ok]
    if failed:
        logger.error(f"{len(failed)}/{len(results)} identicon(s) could not be written")
    return results
