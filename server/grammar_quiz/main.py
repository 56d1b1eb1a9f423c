from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from grammar_quiz.config import settings
from grammar_quiz.exceptions import QuizGraderError
from grammar_quiz.logging_config import setup_logging
from grammar_quiz.schemas import ErrorResponse

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.api_version,
    debug=settings.debug
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_event():
    """Configure logging and report notification status on startup"""
    setup_logging(settings.log_level)

    logger.info("🚀 %s is starting...", settings.app_name)
    if settings.notify_enabled:
        logger.info("📨 Result reports go to chat %s", settings.notify_chat_id)
    else:
        logger.warning("📭 Notification channel not configured; results will not be forwarded")


@app.exception_handler(QuizGraderError)
async def quiz_grader_error_handler(request: Request, exc: QuizGraderError):
    """Render grader errors as {success: false, message}"""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(message=exc.message).model_dump(),
    )


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.api_version,
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


# Import and include routers
from grammar_quiz.routes import submit

app.include_router(submit.router, prefix="/api", tags=["Quiz"])


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    setup_logging(settings.log_level)
    uvicorn.run(
        "grammar_quiz.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_config=None,
    )
