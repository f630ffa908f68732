"""
Custom exceptions for the glossary facility.
Provides a clear error hierarchy and meaningful error messages.
"""

from contextlib import contextmanager
from typing import Optional, Dict, Any, Type
import logging

__all__ = [
    # Base
    'GlossaryFacilityError',
    # Glossary
    'GlossaryError', 'GlossaryReadError', 'MalformedBlockError',
    'DuplicateTermError', 'InvalidTermError', 'UnknownTermError',
    # Formatter
    'FormatterError', 'OutputError',
    # Pipeline
    'PipelineError', 'GlossaryPipelineError', 'ConfigurationError',
    # Validation
    'ValidationError', 'InvalidConfigError',
    # Utilities
    'error_context', 'wrap_error',
]


# ============================================================================
# BASE EXCEPTION
# ============================================================================

class GlossaryFacilityError(Exception):
    """
    Base exception for all glossary facility errors.
    
    All custom exceptions inherit from this class for unified error handling.
    """
    
    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize exception with message and optional context.
        
        Args:
            message: Error message
            **context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context
    
    def __str__(self) -> str:
        """String representation with context."""
        context = {k: v for k, v in self.context.items() if v is not None}
        if not context:
            return self.message
        
        context_str = ', '.join(f"{k}={v}" for k, v in context.items())
        return f"{self.message} ({context_str})"
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'context': self.context
        }


# ============================================================================
# GLOSSARY EXCEPTIONS
# ============================================================================

class GlossaryError(GlossaryFacilityError):
    """Base exception for glossary errors."""
    pass


class GlossaryReadError(GlossaryError):
    """Raised when the glossary source cannot be opened or read."""
    
    def __init__(self, message: str, file_path: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, file_path=file_path, **context)
        self.file_path = file_path


class MalformedBlockError(GlossaryError):
    """Raised when a term name is not followed by any definition line."""
    
    def __init__(
        self,
        message: str,
        term: Optional[str] = None,
        line_number: Optional[int] = None,
        **context: Any
    ) -> None:
        super().__init__(message, term=term, line_number=line_number, **context)
        self.term = term
        self.line_number = line_number


class DuplicateTermError(GlossaryError):
    """Raised when a term name appears twice and duplicates are rejected."""
    
    def __init__(self, message: str, term: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, term=term, **context)
        self.term = term


class InvalidTermError(GlossaryError):
    """Raised when a term name cannot be used as a page name."""
    
    def __init__(self, message: str, term: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, term=term, **context)
        self.term = term


class UnknownTermError(GlossaryError, KeyError):
    """Raised when looking up a term that is not in the store."""
    
    def __init__(self, message: str, term: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, term=term, **context)
        self.term = term
    
    def __str__(self) -> str:
        return GlossaryFacilityError.__str__(self)


# ============================================================================
# FORMATTER EXCEPTIONS
# ============================================================================

class FormatterError(GlossaryFacilityError):
    """Base exception for page rendering and writing errors."""
    pass


class OutputError(FormatterError):
    """Raised when an output file cannot be created or written."""
    
    def __init__(self, message: str, output_path: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, output_path=output_path, **context)
        self.output_path = output_path


# ============================================================================
# PIPELINE EXCEPTIONS
# ============================================================================

class PipelineError(GlossaryFacilityError):
    """Base exception for pipeline errors."""
    pass


class GlossaryPipelineError(PipelineError):
    """Raised for general pipeline failures while building the pages."""
    
    def __init__(self, message: str, stage: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, stage=stage, **context)
        self.stage = stage


class ConfigurationError(PipelineError):
    """Raised when pipeline or component configuration is invalid."""
    
    def __init__(self, message: str, component: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, component=component, **context)
        self.component = component


# ============================================================================
# VALIDATION EXCEPTIONS
# ============================================================================

class ValidationError(GlossaryFacilityError):
    """Base exception for validation errors."""
    
    def __init__(self, message: str, field: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, field=field, **context)
        self.field = field


class InvalidConfigError(ValidationError):
    """Raised when configuration values are invalid."""
    pass


# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================

def wrap_error(
    error: Exception,
    error_class: Type[GlossaryFacilityError],
    message: Optional[str] = None
) -> GlossaryFacilityError:
    """
    Wrap an exception in a custom exception type.
    
    Args:
        error: Original exception
        error_class: Exception class to wrap with
        message: Optional custom message
        
    Returns:
        Wrapped exception with ``__cause__`` set to the original
        
    Raises:
        TypeError: If error_class is not a GlossaryFacilityError subclass
    """
    if not issubclass(error_class, GlossaryFacilityError):
        raise TypeError(
            f"error_class must be subclass of GlossaryFacilityError, "
            f"got {error_class.__name__}"
        )
    
    error_msg = f"{message}: {error}" if message else str(error)
    wrapped = error_class(error_msg)
    wrapped.__cause__ = error
    return wrapped


@contextmanager
def error_context(
    operation: str,
    error_class: Type[GlossaryFacilityError] = GlossaryFacilityError,
    logger: Optional[logging.Logger] = None
):
    """
    Context manager for consistent error handling and wrapping.
    
    Args:
        operation: Name of operation being performed
        error_class: Exception class to wrap errors with
        logger: Optional logger for error logging
        
    Raises:
        error_class: Wrapped exception if error occurs
        
    Example:
        >>> with error_context("writing index page", OutputError):
        ...     path.write_text(content)
    """
    try:
        yield
    except GlossaryFacilityError:
        # Already one of ours, just reraise
        raise
    except KeyboardInterrupt:
        raise
    except Exception as e:
        if logger:
            logger.error(f"Error during {operation}: {e}", exc_info=True)
        
        raise wrap_error(e, error_class, f"Error during {operation}") from e
