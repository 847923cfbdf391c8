"""
Inspection error types.

Every failure is a precondition violation detected before numeric work
begins, so none of these are retried.
"""

from typing import Any, Optional


class InspectionError(Exception):
    """Base exception for inspection pipeline errors"""

    pass


class InvalidRegionError(InspectionError):
    """Rectangle lies outside the frame or has a non-positive dimension"""

    def __init__(self, message: str, rect: Optional[Any] = None, role: str = "region"):
        super().__init__(message)
        self.rect = rect
        self.role = role


class MissingRegionError(InspectionError):
    """A required named rectangle was never drawn before the operation"""

    def __init__(self, role: str, message: Optional[str] = None):
        super().__init__(message or f"Region '{role}' is not set. Draw the {role} box first.")
        self.role = role
