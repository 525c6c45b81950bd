"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

from chessrules.core.move import Move
from chessrules.core.notation import position_from_fen
from chessrules.core.types import parse_square

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for Qt bridge tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def moves_from() -> Callable[[str, str], set[Move]]:
    """Legal moves of the piece on a square, given a FEN and a square token."""

    def _moves_from(fen: str, square: str) -> set[Move]:
        position = position_from_fen(fen)
        return set(position.legal_moves(parse_square(square)))

    return _moves_from
