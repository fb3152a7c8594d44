from backend.engine.difficulty.policy import Difficulty, DifficultyPolicy

__all__ = ["Difficulty", "DifficultyPolicy"]
