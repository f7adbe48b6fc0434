from enum import Enum


class Difficulty(str, Enum):
    """Difficulty levels a problem can be tagged with."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
