from __future__ import annotations


class UVLAnalyzerError(Exception):
    """Base error for the UVL analyzer server."""


class InvalidInputError(UVLAnalyzerError):
    """Raised when tool arguments do not match the operation's request shape."""


class ProcessingError(UVLAnalyzerError):
    """Raised when the analysis engine fails to load a model or run an operation."""


class UnknownOperationError(UVLAnalyzerError):
    """Raised when a tool name is not part of the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown method: {name}")
        self.name = name
