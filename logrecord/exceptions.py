"""Custom record-building exceptions."""


class RecordError(Exception):
    """Base record-building error."""
    pass


class DefaultEvaluationError(RecordError):
    """A derived default raised while being evaluated."""

    def __init__(self, field: str, cause: BaseException) -> None:
        super().__init__(f"Derived default for {field!r} failed: {cause}")
        self.field = field
        self.cause = cause
