"""Exception types."""


class ConfigError(Exception):
    """Raised when a configuration or rules source cannot be used."""

    def __init__(self, message: str, source: str | None = None):
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)
