"""Exception types raised by the include flattener."""


class FlattenerError(Exception):
    """Base class for all include flattener errors."""


class MalformedIncludeError(FlattenerError):
    """Raised when a directive prefix is present but the closing quote is not."""

    def __init__(self, line: str) -> None:
        """Keep the offending line for diagnostics."""
        super().__init__(f"Malformed #include directive: {line}")
        self.line = line


class FrozenStateError(FlattenerError):
    """Raised when a frozen resolution state is mutated."""


class ConfigError(FlattenerError):
    """Raised when the loaded configuration is not usable."""
