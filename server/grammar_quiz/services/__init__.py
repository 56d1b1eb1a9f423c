"""
Grading and notification services.
"""
from grammar_quiz.services.answer_matcher import MAX_EDIT_DISTANCE, is_correct
from grammar_quiz.services.edit_distance import distance
from grammar_quiz.services.grading import grade
from grammar_quiz.services.normalizer import normalize

__all__ = [
    "MAX_EDIT_DISTANCE",
    "distance",
    "grade",
    "is_correct",
    "normalize",
]
