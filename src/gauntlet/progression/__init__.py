from .leveling import LevelingSystem, LevelUpEvent, LevelUpResult

__all__ = ["LevelingSystem", "LevelUpEvent", "LevelUpResult"]
