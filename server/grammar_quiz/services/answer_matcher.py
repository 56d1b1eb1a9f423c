"""
Decides whether a typed answer matches one of the accepted variants.
"""
from typing import Iterable, Optional

from grammar_quiz.services.edit_distance import distance
from grammar_quiz.services.normalizer import normalize

# Allow small spelling mistakes
MAX_EDIT_DISTANCE = 2


def is_correct(student_answer: Optional[str], variants: Iterable[str]) -> bool:
    """
    True if the normalized answer equals, or is within MAX_EDIT_DISTANCE
    edits of, any non-empty accepted variant.

    An empty answer is never correct, even against an empty variant.
    """
    s = normalize(student_answer)
    if not s:
        return False

    for variant in variants:
        target = normalize(variant)
        if not target:
            continue

        if s == target:
            return True

        if distance(s, target) <= MAX_EDIT_DISTANCE:
            return True

    return False
