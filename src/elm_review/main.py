# src/elm_review/main.py
import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from pathlib import Path
from fastapi import FastAPI
from pydantic import BaseModel

from elm_review.config import Settings
from elm_review.models.report import Diagnostic
from elm_review.review.session import ReviewSession


VERSION = "0.1.0"

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def get_session() -> ReviewSession:
    """Session shared by all requests; a new report replaces the previous one."""
    settings = get_settings()
    yaml_content = None
    if settings.config_path:
        try:
            yaml_content = Path(settings.config_path).read_text(encoding="utf-8")
        except OSError as e:
            logger.warning(f"Could not read {settings.config_path}: {e}")
    config = ReviewSession.load_config(yaml_content)
    return ReviewSession(config=config, font_family=settings.font_family)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.getLogger("elm_review").setLevel(get_settings().log_level.upper())
    logger.info("elm-review report service starting...")
    yield
    logger.info("elm-review report service shutting down...")


app = FastAPI(title="elm-review report", lifespan=lifespan)


class ReportRequest(BaseModel):
    report: str = ""
    base_path: str | None = None


class ReportResponse(BaseModel):
    status: str
    base_path: str | None = None
    title: str | None = None
    count: int = 0
    diagnostics: list[Diagnostic] = []
    error: str | None = None


@app.get("/health")
async def health():
    return {"status": "ok", "version": VERSION}


@app.post("/api/report", response_model=ReportResponse)
async def submit_report(request: ReportRequest):
    """Publish the stdout of an `elm-review --report=json` run."""
    base_path = request.base_path or get_settings().default_base_path

    try:
        update = get_session().apply(base_path, request.report)
    except Exception as e:
        logger.exception(f"Report processing failed: {e}")
        return ReportResponse(status="error", base_path=base_path, error=str(e))

    if update.error:
        return ReportResponse(status="error", base_path=base_path, error=update.error)

    return ReportResponse(
        status="completed",
        base_path=update.base_path,
        title=update.title,
        count=len(update.diagnostics),
        diagnostics=update.diagnostics,
    )


@app.get("/api/diagnostics", response_model=ReportResponse)
async def current_diagnostics():
    """Diagnostics of the latest published run."""
    update = get_session().current
    return ReportResponse(
        status="error" if update.error else "completed",
        base_path=update.base_path,
        title=update.title,
        count=len(update.diagnostics),
        diagnostics=update.diagnostics,
        error=update.error,
    )
