from backend.engine.gamestate.state import Outcome, SessionState

__all__ = ["Outcome", "SessionState"]
