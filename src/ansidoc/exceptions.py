#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the ansidoc library.

This module defines the exception classes raised while configuring and
running the ANSI terminal renderer. Unsupported document content never
raises; it degrades to a placeholder or to nothing. Exceptions are reserved
for caller mistakes and internal invariant violations.

Exception Hierarchy
-------------------
- AnsiDocError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for renderer)
    - ConfigurationError (unknown font effect requested)

  - RenderingError (output generation failures)

"""

from typing import Any


class AnsiDocError(Exception):
    """Base exception class for all ansidoc-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(AnsiDocError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided to a renderer.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{renderer_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'. "
                f"Please provide the correct options type for the renderer."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class ConfigurationError(ValidationError):
    """Exception raised when a font effect cannot be resolved.

    This signals a programming defect in the caller (an effect name that does
    not exist, or an empty effect list). Well-formed documents never trigger
    it, so renderers let it propagate instead of degrading the output.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    effect : any, optional
        The effect request that could not be resolved

    """

    def __init__(self, message: str, effect: Any = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, parameter_name="effects", parameter_value=effect, original_error=original_error)
        self.effect = effect


class RenderingError(AnsiDocError):
    """Exception raised when output generation fails.

    Raised for misuse of per-render state, for example draining the footnote
    store of a document twice.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    original_error : Exception, optional
        The original exception that caused this error

    """

    pass


__all__ = [
    "AnsiDocError",
    "ValidationError",
    "InvalidOptionsError",
    "ConfigurationError",
    "RenderingError",
]
