"""Centralized instrumentation for catalog-search.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

# Standard library (alphabetical)
import inspect
import os
from collections.abc import Sized
from functools import wraps
from typing import TYPE_CHECKING, Any, Literal, ParamSpec, TypeVar

# Third-party (alphabetical)
import logfire

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

P = ParamSpec("P")
"""Parameter specification for traced decorators."""

R = TypeVar("R")
"""Type variable for traced return values."""

__all__ = ("configure_instrumentation", "get_logger", "traced")


def configure_instrumentation(
    *,
    service_name: str = "catalog-search",
    environment: str | None = None,
    send_to_logfire: bool | Literal["if-token-present"] | None = "if-token-present",
) -> None:
    """Configure global instrumentation settings.

    This function should be called once at application startup.

    Args:
        service_name: Name of the service for tracing.
        environment: Deployment environment (dev, staging, prod).
        send_to_logfire: Whether to send telemetry to Logfire.
    """
    environment = environment or os.getenv("ENVIRONMENT", "development")

    logfire.configure(service_name=service_name, environment=environment, send_to_logfire=send_to_logfire)

    # Embedding calls go through pydantic-ai
    logfire.instrument_pydantic_ai()


def get_logger(name: str) -> logfire.Logfire:
    """Get a logger with component-specific settings.

    Args:
        name: Component name (e.g., 'embeddings.store', 'catalog.loader').

    Returns:
        Configured Logfire instance.
    """
    return logfire.with_settings(tags=[f"component:{name}"])


# =============================================================================
# Span Decorators
# =============================================================================
def traced(name: str | None = None, *, record_args: bool = True) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Wrap a coroutine function in a logfire span.

    The span records the call arguments and, for sized results, how many
    items came back. Errors are tagged on the span and re-raised.

    Args:
        name: Span name (defaults to function name).
        record_args: Whether to record function arguments.

    Raises:
        TypeError: If the decorated callable is not a coroutine function.

    Example:
        >>> @traced('ingest')
        ... async def ingest(items: list[tuple[str, dict]]) -> list[int]:
        ...     ...
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        if not inspect.iscoroutinefunction(func):
            raise TypeError(f"traced() requires a coroutine function, got {func!r}")
        span_name = name or f"{func.__module__}.{func.__name__}"

        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            attributes: dict[str, Any] = {}
            if record_args:
                attributes["args"] = _serialize_args(args, kwargs)

            with logfire.span(span_name, **attributes) as span:
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    span.set_attribute("error", str(e))
                    span.set_attribute("error_type", type(e).__name__)
                    raise
                if isinstance(result, Sized):
                    span.set_attribute("result_count", len(result))
                return result

        return wrapper

    return decorator


# =============================================================================
# Helper Functions
# =============================================================================
def _serialize_args(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    """Serialize function arguments for logging."""
    parts = [repr(a)[:100] for a in args]
    parts.extend(f"{k}={repr(v)[:100]}" for k, v in kwargs.items())
    return ", ".join(parts)[:500]
