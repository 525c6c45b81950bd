"""Qt bridge exposing a :class:`GameController` through signals and slots."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessrules.core.enums import GameStatus
from chessrules.game.controller import GameController, Outcome
from chessrules.game.interfaces import GameOptions


class GameBridge(QObject):
    """Thread-affine adapter for UI or socket code living in a Qt event loop.

    Requests arrive as slots; every result is reported through a signal so
    the caller never has to inspect return values.
    """

    position_loaded = pyqtSignal(str)  # fen
    position_rejected = pyqtSignal(str)  # reason
    move_applied = pyqtSignal(str, str)  # move text, fen after
    move_rejected = pyqtSignal(str, str)  # move text, reason
    move_undone = pyqtSignal(str)  # fen now current
    status_changed = pyqtSignal(str)  # status name

    __slots__ = ("_controller",)

    def __init__(
        self,
        options: GameOptions | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = GameController(options)

    @property
    def controller(self) -> GameController:
        return self._controller

    @pyqtSlot(str)
    def load_fen(self, fen: str) -> None:
        """Start over from *fen*."""
        before = self._controller.status
        outcome = self._controller.load_fen(fen)
        if not outcome.accepted:
            self.position_rejected.emit(outcome.reason)
            return
        self.position_loaded.emit(outcome.fen)
        self._emit_status_if_changed(before)

    @pyqtSlot(str)
    def submit_move(self, move_text: str) -> None:
        """Play *move_text* for the side to move."""
        before = self._controller.status
        outcome = self._controller.submit(move_text)
        self._emit_outcome(outcome, move_text)
        self._emit_status_if_changed(before)

    @pyqtSlot()
    def undo_move(self) -> None:
        """Take back the latest move, if any."""
        before = self._controller.status
        if self._controller.undo():
            self.move_undone.emit(self._controller.fen)
            self._emit_status_if_changed(before)

    def legal_destinations(self, square: str) -> list[str]:
        return self._controller.legal_destinations(square)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_outcome(self, outcome: Outcome, move_text: str) -> None:
        if outcome.accepted:
            self.move_applied.emit(outcome.move, outcome.fen)
        else:
            self.move_rejected.emit(outcome.move or move_text, outcome.reason)

    def _emit_status_if_changed(self, before: GameStatus) -> None:
        status = self._controller.status
        if status != before:
            self.status_changed.emit(str(status))
