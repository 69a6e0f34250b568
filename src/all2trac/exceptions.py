#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Exceptions raised by all2trac.

Every error the library raises on purpose derives from ``All2TracError``::

    All2TracError
    ├── ValidationError          bad option or configuration value
    │   └── InvalidOptionsError  options object of the wrong class
    ├── ParsingError             JSON document tree could not be loaded
    └── RenderingError           Trac output could not be produced
        └── OutputWriteError     output destination could not be written

The CLI maps each branch to its own exit code.
"""

from typing import Any


class All2TracError(Exception):
    """Root of the all2trac exception tree.

    Parameters
    ----------
    message : str
        Human-readable description
    original_error : Exception, optional
        Lower-level exception this error wraps

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(All2TracError):
    """An option or configuration entry was rejected.

    ``parameter_name`` and ``parameter_value`` identify the offending entry
    when it is known.
    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """A renderer was given options meant for another renderer."""

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
    ):
        if message is None:
            message = (
                f"{renderer_name} renderer needs '{expected_type.__name__}' options, "
                f"got '{received_type.__name__}'."
            )
        super().__init__(message, parameter_name="options", parameter_value=received_type)
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(All2TracError):
    """The input document tree could not be loaded.

    Parameters
    ----------
    message : str
        Description of the failure
    parsing_stage : str, optional
        One of ``"json_decode"``, ``"schema_validation"`` or ``"node_construction"``
    original_error : Exception, optional
        Lower-level exception this error wraps

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(All2TracError):
    """Trac output could not be produced for a document."""

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Rendered text could not be written to its destination."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        super().__init__(
            message or f"Failed to write output file: {file_path}",
            rendering_stage="file_write",
            original_error=original_error,
        )
        self.file_path = file_path


__all__ = [
    "All2TracError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "RenderingError",
    "OutputWriteError",
]
