"""Exceptions raised by the faa_navdata builders."""


class MissingInputError(FileNotFoundError):
    """A required input file is absent; the build aborts before any processing."""

    def __init__(self, path, description: str = 'input file'):
        super().__init__(f"Required {description} not found: {path}")
        self.path = path
        self.description = description


class InvalidInputError(ValueError):
    """An input file exists but is structurally unusable."""

    def __init__(self, message: str, path=None, details=None):
        super().__init__(message)
        self.path = path
        self.details = details

    def __str__(self) -> str:
        message = super().__str__()
        if self.path is not None:
            message = f"{message} ({self.path})"
        if self.details:
            message = f"{message}\n  {self.details}"
        return message
