"""Root of the project's exception hierarchy. Layer bases derive from it."""


class AuditOtelError(Exception):
    """Base for every error this package raises on purpose."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
