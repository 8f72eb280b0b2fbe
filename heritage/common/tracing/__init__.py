"""Correlation ID tracking for resolution runs.

A single resolution call fans out into nested lookups; sharing one correlation
ID across them lets the JSON log lines of one expansion be grouped together.
"""

import uuid
from contextvars import ContextVar
from types import TracebackType

_correlation_id_var: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def generate_correlation_id() -> str:
    """Generate a new correlation ID.

    Returns:
        str: A new UUID4 correlation ID as a string.
    """
    return str(uuid.uuid4())


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Set the correlation ID for the current context.

    If no correlation ID is provided, generates a new one.

    Args:
        correlation_id: Optional correlation ID to set. If None, generates a new one.

    Returns:
        str: The correlation ID that was set.

    Example:
        >>> corr_id = set_correlation_id("resolve-1")
        >>> get_correlation_id()
        'resolve-1'
    """
    if correlation_id is None:
        correlation_id = generate_correlation_id()

    _correlation_id_var.set(correlation_id)
    return correlation_id


def get_correlation_id() -> str | None:
    """Get the correlation ID for the current context, or None if not set."""
    return _correlation_id_var.get()


def clear_correlation_id() -> None:
    """Clear the correlation ID for the current context."""
    _correlation_id_var.set(None)


class TracingContext:
    """Context manager for managing correlation IDs.

    Reuses the surrounding correlation ID when one is already active, so
    nested resolution calls stay inside the run that started them.

    Example:
        >>> with TracingContext() as corr_id:
        ...     resolver.resolve(RecordKind.PERSON, payload)
    """

    def __init__(self, correlation_id: str | None = None) -> None:
        """Initialize the tracing context.

        Args:
            correlation_id: Optional correlation ID. If None, the active one is
                kept or a new one is generated.
        """
        self.correlation_id = correlation_id
        self.previous_id: str | None = None

    def __enter__(self) -> str:
        self.previous_id = get_correlation_id()
        self.correlation_id = set_correlation_id(self.correlation_id or self.previous_id)
        return self.correlation_id

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self.previous_id is None:
            clear_correlation_id()
        else:
            set_correlation_id(self.previous_id)


def build_resolution_trace(
    kind: str | None = None,
    record_id: str | None = None,
    depth: int | None = None,
) -> dict[str, str | int | None]:
    """Build a trace dictionary for logging one resolution step.

    Args:
        kind: Record kind being resolved.
        record_id: Identifier of the record.
        depth: Remaining resolution depth at this step.

    Returns:
        dict[str, str | int | None]: Trace dictionary including the correlation ID.

    Example:
        >>> build_resolution_trace(kind="person", record_id="p1", depth=2)
        {'correlation_id': None, 'kind': 'person', 'record_id': 'p1', 'depth': 2}
    """
    return {
        "correlation_id": get_correlation_id(),
        "kind": kind,
        "record_id": record_id,
        "depth": depth,
    }


__all__ = [
    "TracingContext",
    "build_resolution_trace",
    "clear_correlation_id",
    "generate_correlation_id",
    "get_correlation_id",
    "set_correlation_id",
]
