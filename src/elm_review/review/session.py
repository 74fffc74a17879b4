# src/elm_review/review/session.py
import fnmatch
import logging
import threading
import yaml
from collections.abc import Callable
from dataclasses import dataclass, field
from pydantic import ValidationError

from elm_review.errors import ReportError
from elm_review.models.config import ReportConfig
from elm_review.models.report import Diagnostic
from .parser import parse_report, sort_diagnostics
from .render import DEFAULT_FONT_FAMILY


logger = logging.getLogger(__name__)


@dataclass
class ReviewUpdate:
    """Result of one elm-review run, as broadcast to subscribers."""
    base_path: str
    diagnostics: list[Diagnostic] = field(default_factory=list)
    error: str | None = None

    @property
    def title(self) -> str:
        return f"{len(self.diagnostics)} errors"


ReviewListener = Callable[[ReviewUpdate], None]


class ReviewSession:
    """Owns the diagnostics of the latest review run.

    Each run replaces the previous list as a whole; readers never see a
    half-replaced list.
    """

    def __init__(self, config: ReportConfig | None = None, font_family: str = DEFAULT_FONT_FAMILY):
        self.config = config or ReportConfig()
        self.font_family = font_family
        self._lock = threading.Lock()
        self._current = ReviewUpdate(base_path="")
        self._listeners: list[ReviewListener] = []

    @property
    def current(self) -> ReviewUpdate:
        with self._lock:
            return self._current

    def subscribe(self, listener: ReviewListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def apply(self, base_path: str, json_text: str) -> ReviewUpdate:
        """Parse elm-review output and publish it as the current run."""
        try:
            diagnostics = parse_report(json_text, self.config.font_family or self.font_family)
        except ReportError as e:
            logger.warning(f"Could not read elm-review report for {base_path}: {e}")
            update = ReviewUpdate(base_path=base_path, error=str(e))
        else:
            diagnostics = [d for d in diagnostics if not self._is_excluded(d.path, self.config.exclude)]
            if self.config.sort:
                diagnostics = sort_diagnostics(diagnostics)
            update = ReviewUpdate(base_path=base_path, diagnostics=diagnostics)
            logger.info(f"elm-review reported {len(diagnostics)} errors in {base_path}")

        with self._lock:
            self._current = update
            listeners = list(self._listeners)

        for listener in listeners:
            try:
                listener(update)
            except Exception as e:
                logger.error(f"Review listener failed: {e}")

        return update

    @staticmethod
    def load_config(yaml_content: str | None) -> ReportConfig:
        """Load .elm-review-report.yaml content or use defaults."""
        if yaml_content is None:
            return ReportConfig()

        try:
            data = yaml.safe_load(yaml_content) or {}
            return ReportConfig(**data)
        except (yaml.YAMLError, TypeError, ValidationError) as e:
            logger.warning(f"Invalid .elm-review-report.yaml: {e}")
            return ReportConfig()

    def _is_excluded(self, path: str | None, patterns: list[str]) -> bool:
        """Check if path matches any exclude pattern."""
        if path is None:
            return False
        for pattern in patterns:
            if fnmatch.fnmatch(path, pattern):
                return True
        return False
