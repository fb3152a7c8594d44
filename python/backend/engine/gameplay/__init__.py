from backend.engine.gameplay.game import GamePlay
from backend.engine.gameplay.session import MatchSession, SessionListener

__all__ = ["GamePlay", "MatchSession", "SessionListener"]
