"""
Command-line entry point: `identicon alice bob --output-dir out/`.
"""
from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Sequence

from .. import config
from ..pipeline.batch_generate import generate_many

logger = logging.getLogger(__name__)


def _read_inputs(path: Path) -> List[str]:
    with path.open("r", encoding="utf-8") as fh:
        return [line.rstrip("\r\n") for line in fh if line.strip()]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="identicon",
        description="Generate deterministic 250x250 identicon PNGs, one per input string.",
    )
    p.add_argument("inputs", nargs="*", help="Strings to generate identicons for (<input>.png each).")
    p.add_argument("--from-file", type=Path, default=None, help="Read additional inputs, one per line.")
    p.add_argument("--output-dir", type=Path, default=Path(config.OUTPUT_DIR),
                   help="Directory the PNGs are written to (default: IDENTICON_OUTPUT_DIR or '.').")
    p.add_argument("--workers", type=int, default=config.BATCH_WORKERS,
                   help="Concurrent generations for batches.")
    p.add_argument("--log-level", default=config.LOG_LEVEL,
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--progress", action="store_true", help="Show a progress bar.")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    # --- Centralized Logging Configuration ---
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFMT,
    )

    inputs = list(args.inputs)
    if args.from_file is not None:
        try:
            inputs.extend(_read_inputs(args.from_file))
        except OSError as e:
            p.error(f"cannot read --from-file {args.from_file}: {e}")
    if not inputs:
        p.error("no inputs given (pass strings or --from-file)")

    results = generate_many(
        inputs,
        output_dir=args.output_dir,
        workers=args.workers,
        show_progress=args.progress,
    )

    for result in results:
        if result.ok:
            print(result.path)
        else:
            logger.error(f"{result.value!r}: {result.error}")
    return 0 if all(r.ok for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
