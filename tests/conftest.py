"""Shared test fixtures."""

import pytest
from pathlib import Path

from identicon.repositories.canvas_repository import CanvasRepository
from identicon.services.drawing_service import DrawingService
from identicon.services.identicon_service import IdenticonService


@pytest.fixture
def identicon_service() -> IdenticonService:
    return IdenticonService()


@pytest.fixture
def drawing_service() -> DrawingService:
    return DrawingService()


@pytest.fixture
def canvas_repository() -> CanvasRepository:
    return CanvasRepository()


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """An empty directory for written identicons."""
    out = tmp_path / "out"
    out.mkdir()
    return out


@pytest.fixture
def empty_digest() -> tuple:
    """MD5 of the empty string: d41d8cd98f00b204e9800998ecf8427e."""
    return tuple(bytes.fromhex("d41d8cd98f00b204e9800998ecf8427e"))
