from .feedback import Feedback, classify, score, to_pattern
from .validation import is_well_formed, validate_guess

__all__ = ["Feedback", "classify", "score", "to_pattern", "is_well_formed", "validate_guess"]
