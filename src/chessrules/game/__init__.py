"""Game management layer — history, status state machine, collaborator surface.

Quick start::

    from chessrules.game import GameController

    ctrl = GameController()
    outcome = ctrl.submit("e2e4")
    print(outcome.accepted, outcome.fen, ctrl.status)
"""

from chessrules.core.enums import GameStatus
from chessrules.game.controller import GameController, Outcome
from chessrules.game.game import Game, GameEvents
from chessrules.game.interfaces import GameOptions, IGame

__all__ = [
    # Interfaces / config
    "GameOptions",
    "GameStatus",
    "IGame",
    # Concrete
    "Game",
    "GameController",
    "GameEvents",
    "Outcome",
]
