"""
Standardized error handling for docdigest.

Typed ``DigestError`` subclasses pass through untouched; anything else is
wrapped in the requested ``DigestError`` type and logged with context.
"""
import functools
import logging
from typing import Any, Callable, Dict, Optional, Type, TypeVar

from ..types.types import DigestError

# Type variable for decorated functions
F = TypeVar("F", bound=Callable[..., Any])

_MAX_REPR = 100


def _call_context(func_name: str, args: tuple, kwargs: dict) -> Dict[str, Any]:
    context: Dict[str, Any] = {"function": func_name}
    # Only include args/kwargs if they're small
    if args:
        args_str = str(args)
        if len(args_str) < _MAX_REPR:
            context["args"] = args_str
    if kwargs:
        kwargs_str = str(kwargs)
        if len(kwargs_str) < _MAX_REPR:
            context["kwargs"] = kwargs_str
    return context


def _log_wrapped(logger: logging.Logger, error: DigestError) -> None:
    error_dict = error.to_dict()
    # 'message' would clash with the LogRecord attribute
    error_dict.pop("message", None)
    logger.error(error.message, extra=error_dict, exc_info=error.cause)


def handle_errors(
    error_type: Type[DigestError] = DigestError,
    reraise: bool = True,
    log_errors: bool = True,
    return_value: Optional[Any] = None,
) -> Callable[[F], F]:
    """
    Decorator for standardized error handling.

    Args:
        error_type: Exception type to wrap unexpected errors in
        reraise: Whether to reraise the wrapped exception
        log_errors: Whether to log errors
        return_value: Value to return on error (if not reraising)

    Returns:
        Decorated function
    """

    def decorator(func: F) -> F:
        logger = logging.getLogger(func.__module__)
        func_name = func.__name__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)

            except DigestError:
                raise

            except Exception as e:
                wrapped_error = error_type(
                    message=f"Error in {func_name}: {e!s}",
                    context=_call_context(func_name, args, kwargs),
                    cause=e,
                )

                if log_errors:
                    _log_wrapped(logger, wrapped_error)

                if reraise:
                    raise wrapped_error from e
                return return_value

        return wrapper  # type: ignore

    return decorator


class ErrorContext:
    """Context manager that wraps unexpected errors of a named operation."""

    def __init__(
        self,
        operation: str,
        error_type: Type[DigestError] = DigestError,
        log_errors: bool = True,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.operation = operation
        self.error_type = error_type
        self.log_errors = log_errors
        self.context = context or {}
        self.logger = logging.getLogger(__name__)

    def __enter__(self) -> "ErrorContext":
        self.logger.debug("Starting operation: %s", self.operation)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is None:
            self.logger.debug("Completed operation: %s", self.operation)
            return False

        if issubclass(exc_type, DigestError) or not issubclass(exc_type, Exception):
            return False

        wrapped_error = self.error_type(
            message=f"Error in {self.operation}: {exc_val!s}",
            context=self.context,
            cause=exc_val,
        )
        if self.log_errors:
            _log_wrapped(self.logger, wrapped_error)
        raise wrapped_error from exc_val
