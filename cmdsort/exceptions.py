"""cmdsort exception hierarchy."""

from typing import Any


class CmdsortError(Exception):
    """Base exception for all cmdsort errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigurationError(CmdsortError):
    """Error in cmdsort configuration."""

    pass


class SourceIOError(CmdsortError):
    """Source text could not be read from disk."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}", {"path": path})
        self.path = path
        self.reason = reason

    def __str__(self) -> str:
        return self.message


class ParseError(CmdsortError):
    """Source text is not valid Python."""

    def __init__(
        self,
        path: str | None,
        description: str,
        lineno: int | None = None,
        offset: int | None = None,
    ) -> None:
        location = path or "<source>"
        if lineno is not None:
            location = f"{location}:{lineno}"
            if offset is not None:
                location = f"{location}:{offset}"
        super().__init__(
            f"Failed to parse {location}: {description}",
            {"path": path, "lineno": lineno, "offset": offset},
        )
        self.path = path
        self.description = description
        self.lineno = lineno
        self.offset = offset

    def __str__(self) -> str:
        return self.message
