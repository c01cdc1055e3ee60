import logging

from .game import Game, run

__all__ = ["Game", "run"]

logging.getLogger(__name__).addHandler(logging.NullHandler())
