from .vocabulary import CATEGORIES, WORDS
from .exercises import EXERCISE_TEMPLATES
from .assessment import GUIDE_CATEGORIES

__all__ = ["CATEGORIES", "WORDS", "EXERCISE_TEMPLATES", "GUIDE_CATEGORIES"]
