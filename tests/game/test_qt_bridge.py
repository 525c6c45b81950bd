"""Tests for the Qt game bridge."""

from __future__ import annotations

import pytest
from PyQt6.QtTest import QSignalSpy

from chessrules.core.notation import STARTING_FEN
from chessrules.game.interfaces import GameOptions
from chessrules.game.qt_bridge import GameBridge

pytestmark = pytest.mark.usefixtures("qapp")

STALEMATE_IN_ONE = "7k/8/5K2/6Q1/8/8/8/8 w - - 0 1"


class TestGameBridge:
    def test_move_applied(self) -> None:
        bridge = GameBridge()
        applied = QSignalSpy(bridge.move_applied)
        rejected = QSignalSpy(bridge.move_rejected)

        bridge.submit_move("e2e4")

        assert len(applied) == 1
        assert applied[0][0] == "e2e4"
        assert applied[0][1] == bridge.controller.fen
        assert len(rejected) == 0

    def test_move_rejected(self) -> None:
        bridge = GameBridge()
        applied = QSignalSpy(bridge.move_applied)
        rejected = QSignalSpy(bridge.move_rejected)

        bridge.submit_move("e2e5")

        assert len(applied) == 0
        assert len(rejected) == 1
        assert rejected[0][0] == "e2e5"
        assert "illegal" in rejected[0][1]

    def test_garbage_rejected_with_submitted_text(self) -> None:
        bridge = GameBridge()
        rejected = QSignalSpy(bridge.move_rejected)

        bridge.submit_move("nonsense")

        assert len(rejected) == 1
        assert rejected[0][0] == "nonsense"

    def test_status_changed_on_stalemate(self) -> None:
        bridge = GameBridge(GameOptions(start_fen=STALEMATE_IN_ONE))
        statuses = QSignalSpy(bridge.status_changed)

        bridge.submit_move("g5g6")

        assert len(statuses) == 1
        assert statuses[0][0] == "stalemate"

    def test_no_status_signal_for_quiet_move(self) -> None:
        bridge = GameBridge()
        statuses = QSignalSpy(bridge.status_changed)

        bridge.submit_move("g1f3")

        assert len(statuses) == 0

    def test_load_fen(self) -> None:
        bridge = GameBridge()
        loaded = QSignalSpy(bridge.position_loaded)
        rejected = QSignalSpy(bridge.position_rejected)

        bridge.load_fen("4k3/8/8/8/8/8/8/R3K3 w - - 0 1")
        bridge.load_fen("broken")

        assert len(loaded) == 1
        assert loaded[0][0] == "4k3/8/8/8/8/8/8/R3K3 w - - 0 1"
        assert len(rejected) == 1
        assert "Invalid FEN" in rejected[0][0]

    def test_load_mated_position_reports_status(self) -> None:
        bridge = GameBridge()
        statuses = QSignalSpy(bridge.status_changed)

        bridge.load_fen("R2k4/8/3K4/8/8/8/8/8 b - - 0 1")

        assert len(statuses) == 1
        assert statuses[0][0] == "checkmate"

    def test_undo(self) -> None:
        bridge = GameBridge()
        undone = QSignalSpy(bridge.move_undone)

        bridge.undo_move()
        bridge.submit_move("d2d4")
        bridge.undo_move()

        assert len(undone) == 1
        assert undone[0][0] == STARTING_FEN

    def test_legal_destinations(self) -> None:
        assert GameBridge().legal_destinations("b1") == ["a3", "c3"]
