from pydantic import BaseModel, Field


class ReportConfig(BaseModel):
    sort: bool = True
    exclude: list[str] = Field(
        default_factory=lambda: [
            "elm-stuff/*",
            "*/elm-stuff/*",
        ]
    )
    font_family: str | None = None
