class ScheduleError(Exception):
    """Base exception for operating-schedule errors."""

    pass


class MalformedInputError(ScheduleError, ValueError):
    """A stored or submitted schedule value does not have the expected shape.

    Raised at the ingestion boundary (hydration, preview requests) so that
    nothing downstream ever formats a value like "9:5" or "25:00".
    """

    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        self.field = field
