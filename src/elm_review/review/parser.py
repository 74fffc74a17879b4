# src/elm_review/review/parser.py
import json
import logging
from collections.abc import Iterable
from typing import Any
from pydantic import ValidationError

from elm_review.errors import MalformedReport, UnrecognizedReportType
from elm_review.models.report import (
    Diagnostic,
    GeneralReport,
    Report,
    SpecificReport,
    chunks_text,
)
from .render import DEFAULT_FONT_FAMILY, render_chunks


logger = logging.getLogger(__name__)

REPORT_TYPES: dict[str, type[GeneralReport] | type[SpecificReport]] = {
    "error": GeneralReport,
    "review-errors": SpecificReport,
}


def load_report(json_text: str) -> Report | None:
    """Decode elm-review JSON output. Empty output means no issues and gives None."""
    if not json_text.strip():
        return None

    try:
        payload: Any = json.loads(json_text)
    except json.JSONDecodeError as e:
        raise MalformedReport(f"elm-review output is not valid JSON: {e}") from e
    except RecursionError as e:
        raise MalformedReport("elm-review output is nested too deeply") from e

    if not isinstance(payload, dict):
        raise MalformedReport("Expected a report object")

    report_type = payload.get("type")
    if not isinstance(report_type, str):
        raise MalformedReport("Report has no \"type\" field")

    report_cls = REPORT_TYPES.get(report_type)
    if report_cls is None:
        raise UnrecognizedReportType(report_type)

    try:
        return report_cls.model_validate(payload)
    except ValidationError as e:
        raise MalformedReport(f"Invalid '{report_type}' report: {e}") from e


def flatten_report(report: Report, font_family: str = DEFAULT_FONT_FAMILY) -> list[Diagnostic]:
    """Turn a decoded report into diagnostics, in the order they appear in the report."""
    if isinstance(report, GeneralReport):
        return [Diagnostic(
            path=report.path,
            rule=report.title,
            message=chunks_text(report.message),
            formatted=report.message,
            rendered_markup=render_chunks(report.message, font_family),
        )]

    diagnostics = []
    for file_errors in report.errors:
        for error in file_errors.errors:
            diagnostics.append(Diagnostic(
                path=file_errors.path,
                rule=error.rule,
                rule_link=error.rule_link,
                message=error.message,
                details=error.details,
                region=error.region,
                formatted=error.formatted,
                fix=error.fix,
                rendered_markup=render_chunks(error.formatted, font_family),
            ))
    return diagnostics


def parse_report(json_text: str, font_family: str = DEFAULT_FONT_FAMILY) -> list[Diagnostic]:
    """Parse elm-review JSON output into diagnostics with rendered markup."""
    report = load_report(json_text)
    if report is None:
        return []

    diagnostics = flatten_report(report, font_family)
    logger.debug(f"Parsed '{report.type}' report into {len(diagnostics)} diagnostics")
    return diagnostics


def _sort_key(diagnostic: Diagnostic) -> tuple[str, int, int]:
    if diagnostic.region is None:
        return diagnostic.path or "", 0, 0
    start = diagnostic.region.start
    return diagnostic.path or "", start.line, start.column


def sort_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    """Stable sort by path, then start line, then start column."""
    return sorted(diagnostics, key=_sort_key)
