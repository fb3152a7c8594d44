from backend.engine.gamegenerator.generator import GameGenerator
from backend.engine.gamegenerator.shuffle import shuffle

__all__ = ["GameGenerator", "shuffle"]
