from fastapi import APIRouter, BackgroundTasks, Request
from fastapi.responses import JSONResponse
import json
import logging

from grammar_quiz.answer_key import ANSWER_KEY, TOTAL_QUESTIONS
from grammar_quiz.exceptions import MethodNotAllowedError, QuizGraderError, SubmissionValidationError
from grammar_quiz.schemas import ErrorResponse, SubmitResponse
from grammar_quiz.services import notifier as notifier_module
from grammar_quiz.services.grading import grade
from grammar_quiz.services.notifier import format_report

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Quiz"])

REQUIRED_FIELDS = ("name", "group", "answers")


async def read_body(request: Request) -> dict:
    """Parse the JSON body; anything unparsable or not an object counts as {}."""
    raw = await request.body()
    if not raw:
        return {}
    try:
        body = json.loads(raw)
    except (ValueError, UnicodeDecodeError):
        return {}
    return body if isinstance(body, dict) else {}


def is_blank(value) -> bool:
    """None, "", 0 and False are blank. Empty objects and lists are not."""
    return value is None or (isinstance(value, (str, int, float)) and not value)


def validate_submission(body: dict) -> None:
    missing = [field for field in REQUIRED_FIELDS if is_blank(body.get(field))]
    if missing:
        raise SubmissionValidationError(missing)


@router.api_route(
    "/submit",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    response_model=SubmitResponse,
    responses={
        400: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def submit_quiz(request: Request, background_tasks: BackgroundTasks):
    """
    Student submits the grammar quiz.

    The answers are graded against the fixed key and a summary is sent to
    the teacher's chat after the response goes out.
    """
    try:
        if request.method != "POST":
            raise MethodNotAllowedError(request.method)

        body = await read_body(request)
        validate_submission(body)

        name = body["name"]
        group = body["group"]

        report = grade(body["answers"], ANSWER_KEY, TOTAL_QUESTIONS)
        logger.info(
            "Graded submission from %s (%s): %d/%d (%.1f%%)",
            name, group, report.score, report.total, report.percentage,
        )

        message_text = format_report(name, group, report)
        background_tasks.add_task(notifier_module.notifier.send, message_text)

        return SubmitResponse(score=report.score, total=report.total, results=report.results)

    except QuizGraderError:
        raise
    except Exception:
        logger.exception("Handler error")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(message="Server error").model_dump(),
        )
