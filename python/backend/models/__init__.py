from backend.models.card import Card, CardState
from backend.models.config import GameConfig
from backend.models.faces import DEFAULT_FACE_POOL
from backend.models.highscore import BestScoreManager, ScoreRecord
from backend.models.preferences import Theme, ThemePreference

__all__ = [
    "BestScoreManager",
    "Card",
    "CardState",
    "DEFAULT_FACE_POOL",
    "GameConfig",
    "ScoreRecord",
    "Theme",
    "ThemePreference",
]
