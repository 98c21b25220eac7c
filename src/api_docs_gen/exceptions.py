class DocsGenError(Exception):
    """Base exception for api-docs-gen errors."""

    def format_user_message(self) -> str:
        """Format a user-friendly error message."""
        return str(self)


class SpecParseError(DocsGenError):
    """Raised when the API description cannot be read or deserialized."""

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.source = source

    def format_user_message(self) -> str:
        if self.source:
            return f"Failed to parse {self.source}: {self}"
        return f"Failed to parse API spec: {self}"


class ConfigError(DocsGenError):
    """Raised when a configuration file is invalid."""

    pass
