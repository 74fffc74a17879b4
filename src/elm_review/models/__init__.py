from .config import ReportConfig
from .report import (
    Chunk,
    Diagnostic,
    FileErrors,
    FixEdit,
    GeneralReport,
    Position,
    Region,
    Report,
    ReviewError,
    SpecificReport,
    StyledChunk,
    UnstyledChunk,
)

__all__ = [
    "ReportConfig",
    "Chunk",
    "Diagnostic",
    "FileErrors",
    "FixEdit",
    "GeneralReport",
    "Position",
    "Region",
    "Report",
    "ReviewError",
    "SpecificReport",
    "StyledChunk",
    "UnstyledChunk",
]
