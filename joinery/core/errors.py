"""Exception hierarchy for the window designer."""

from __future__ import annotations


class JoineryError(Exception):
    """Base class for all domain errors."""


class InvalidDimensionError(JoineryError, ValueError):
    """Raised when a window's width/height cannot produce a drawing."""

    def __init__(self, message: str, width: int | None = None, height: int | None = None) -> None:
        self.width = width
        self.height = height
        super().__init__(message)


class UnknownWindowTypeError(JoineryError):
    """Raised by validation when a type id is not in the catalog."""

    def __init__(self, type_id: str) -> None:
        self.type_id = type_id
        super().__init__(f"Unknown window type: {type_id!r}")


class ProjectNotFoundError(JoineryError):
    def __init__(self, project_id: int) -> None:
        self.project_id = project_id
        super().__init__(f"Project not found: {project_id}")


class WindowNotFoundError(JoineryError):
    def __init__(self, window_id: int) -> None:
        self.window_id = window_id
        super().__init__(f"Window not found: {window_id}")


class XmlImportError(JoineryError):
    """Raised when an XML project document cannot be read."""
