from pydantic import BaseModel, Field
from typing import List


# =============================================================================
# Grading Schemas
# =============================================================================

class QuestionResult(BaseModel):
    """Outcome for a single question."""
    question: int
    student_answer: str = Field(alias="studentAnswer")  # As typed, not normalized
    correct: bool
    accepted_variants: List[str] = Field(alias="correctAnswers")

    class Config:
        populate_by_name = True


class GradeReport(BaseModel):
    """Score plus one result per question, in question order."""
    score: int = Field(ge=0)
    total: int = Field(ge=0)
    results: List[QuestionResult]

    @property
    def percentage(self) -> float:
        return round(self.score / self.total * 100, 1) if self.total > 0 else 0.0


# =============================================================================
# Endpoint Schemas (for routes/submit.py)
# =============================================================================

class SubmitResponse(BaseModel):
    """Response after grading a submission."""
    success: bool = True
    score: int
    total: int
    results: List[QuestionResult]


class ErrorResponse(BaseModel):
    """Body for every non-200 response."""
    success: bool = False
    message: str

