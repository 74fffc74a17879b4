class ReportError(ValueError):
    """Raised when elm-review output cannot be turned into diagnostics."""


class MalformedReport(ReportError):
    pass


class UnrecognizedReportType(ReportError):
    def __init__(self, report_type: str):
        super().__init__(f"Unexpected elm-review report type '{report_type}'")
        self.report_type = report_type
