from .controller import MENU_PROMPT, QUIT_KEY, Game
from .state import GameStatus, TurnKind, TurnResult

__all__ = ["Game", "GameStatus", "MENU_PROMPT", "QUIT_KEY", "TurnKind", "TurnResult"]
