"""Domain exceptions."""


class FloodHelpError(Exception):
    """Base class for errors raised by the domain and application layers."""


class InvalidInput(FloodHelpError):
    """Caller supplied data that cannot be processed (client error)."""


class ProviderError(FloodHelpError):
    """The geocoding provider failed at the transport level (server error)."""


class ReportNotFound(FloodHelpError):
    def __init__(self, report_id):
        super().__init__(f"Report {report_id} not found")
        self.report_id = report_id
