# src/elm_review/models/report.py
from typing import Annotated, Any, Literal
from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    ValidationError,
    computed_field,
)

from elm_review.errors import MalformedReport


ColorComponent = Annotated[StrictInt, Field(ge=0, le=255)]


class Position(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: StrictInt
    column: StrictInt


class Region(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position

    def label(self) -> str:
        return f"{self.start.line} : {self.start.column}"


class UnstyledChunk(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["unstyled"] = "unstyled"
    text: str


class StyledChunk(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["styled"] = "styled"
    text: str
    bold: StrictBool = False
    underline: StrictBool = False
    color: tuple[ColorComponent, ColorComponent, ColorComponent]


Chunk = UnstyledChunk | StyledChunk


def chunks_text(chunks: list[Chunk]) -> str:
    return "".join(chunk.text for chunk in chunks)


def decode_chunk(value: Any) -> Chunk:
    """Decode one element of a "formatted" or "message" array.

    A bare string is unstyled text. An object needs a "str" field; it is
    styled only when it carries a "color", whatever its bold/underline flags.
    """
    if isinstance(value, (UnstyledChunk, StyledChunk)):
        return value
    if isinstance(value, str):
        return UnstyledChunk(text=value)
    if not isinstance(value, dict):
        raise MalformedReport("Expected a simple string or a rich-text chunk")

    text = value.get("str")
    if not isinstance(text, str):
        raise MalformedReport("Rich-text chunk is missing its \"str\" field")
    color = value.get("color")
    if color is None:
        return UnstyledChunk(text=text)
    if not isinstance(color, list) or len(color) != 3:
        raise MalformedReport(f"Invalid chunk color: {color!r}")

    try:
        return StyledChunk(
            text=text,
            bold=value.get("bold", False),
            underline=value.get("underline", False),
            color=tuple(color),
        )
    except ValidationError as e:
        raise MalformedReport(f"Invalid rich-text chunk: {e}") from e


# Chunk as it appears in "formatted" / "message" arrays of the report
WireChunk = Annotated[Chunk, BeforeValidator(decode_chunk)]


class FixEdit(BaseModel):
    """A single source edit proposed by a rule. Kept as data, never applied."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    range: Region
    text: str = Field(alias="str")


class Diagnostic(BaseModel):
    """One rule violation, normalized for display."""
    model_config = ConfigDict(frozen=True)

    path: str | None = None
    rule: str = ""
    rule_link: str = ""
    message: str = ""
    details: list[str] = Field(default_factory=list)
    region: Region | None = None
    formatted: list[Chunk] = Field(default_factory=list)
    fix: list[FixEdit] | None = None
    rendered_markup: str = ""

    @property
    def has_fix(self) -> bool:
        return bool(self.fix)

    @computed_field
    @property
    def location(self) -> str:
        return self.region.label() if self.region else ""

    def plain_text(self) -> str:
        return chunks_text(self.formatted)


class ReviewError(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    rule: str
    message: str
    rule_link: str = Field(default="", alias="ruleLink")
    details: list[str] = Field(default_factory=list)
    region: Region
    formatted: list[WireChunk]
    fix: list[FixEdit] | None = None


class FileErrors(BaseModel):
    path: str
    errors: list[ReviewError]


class GeneralReport(BaseModel):
    """A single problem not tied to a rule, e.g. a broken review configuration."""
    type: Literal["error"] = "error"
    path: str | None = None
    title: str
    message: list[WireChunk]


class SpecificReport(BaseModel):
    """Per-file rule violations."""
    type: Literal["review-errors"] = "review-errors"
    errors: list[FileErrors]


Report = GeneralReport | SpecificReport
