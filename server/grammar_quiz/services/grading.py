"""
Grading Engine.

Scores a submission against the answer key, question by question.
"""
from typing import Any, Mapping, Optional

from grammar_quiz.answer_key import ANSWER_KEY, TOTAL_QUESTIONS, AnswerKey
from grammar_quiz.schemas import GradeReport, QuestionResult
from grammar_quiz.services.answer_matcher import is_correct


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(_stringify(item) for item in value)
    if isinstance(value, Mapping):
        return "[object Object]"
    return str(value)


def as_text(value: Any) -> str:
    """
    Render a submitted value the way JavaScript stringifies it.

    None, "", 0 and False become "". Lists are comma-joined, booleans are
    lowercase and whole floats drop their ".0".
    """
    if value is None or value is False or (isinstance(value, (str, int, float)) and not value):
        return ""
    return _stringify(value)


def answer_for(answers: Optional[Mapping[str, Any]], question: int) -> str:
    """Typed answer for ``q<question>``; missing or blank values become ""."""
    if not isinstance(answers, Mapping):
        return ""
    return as_text(answers.get(f"q{question}"))


def grade(
    answers: Optional[Mapping[str, Any]],
    answer_key: AnswerKey = ANSWER_KEY,
    total: int = TOTAL_QUESTIONS,
) -> GradeReport:
    """
    Grade questions 1..total in order.

    Every question gets a result. A question absent from the key has no
    accepted variants and can never be correct.
    """
    score = 0
    results = []

    for i in range(1, total + 1):
        student_answer = answer_for(answers, i)
        variants = list(answer_key.get(i, ()))
        correct = is_correct(student_answer, variants)

        if correct:
            score += 1

        results.append(QuestionResult(
            question=i,
            student_answer=student_answer,
            correct=correct,
            accepted_variants=variants,
        ))

    return GradeReport(score=score, total=total, results=results)
