"""
errors.py — Failure Taxonomy
=============================
Every way a visualization request can fail, as exception classes.

    InvalidInput  – malformed or inconsistent input (bad array, unknown node, …)
    NotFound      – no registry entry / saved visualization with that id
    Unsupported   – the category is known but has no step engine

Engines raise these synchronously before returning, so a caller either
gets a complete trace or an exception, never half a trace.
"""


class VisualizationError(Exception):
    """Base class.  `status_code` is what the HTTP layer answers with."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(VisualizationError, ValueError):
    status_code = 400


class NotFound(VisualizationError, LookupError):
    status_code = 404


class Unsupported(VisualizationError):
    status_code = 422


__all__ = [
    "VisualizationError",
    "InvalidInput",
    "NotFound",
    "Unsupported",
]
