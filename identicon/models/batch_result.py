from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from ..exceptions import IdenticonWriteError


@dataclass(frozen=True)
class BatchResult:
    """
    Outcome of one input in a batch run: either a written path or the
    write error that stopped it.
    """
    value: str
    path: Path | None = None
    error: IdenticonWriteError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
