from .render import colorize
from .session import GameResult, play, solved_message

__all__ = ["colorize", "GameResult", "play", "solved_message"]
