"""Exceptions raised by the sampling protocol."""

from typing import Any, Optional


def describe(request: Any) -> str:
    """Short human-readable name for a request."""
    if isinstance(request, type):
        return request.__qualname__
    text = repr(request)
    return text if len(text) <= 80 else text[:77] + "..."


class RandkitError(Exception):
    """Base class for randkit errors."""


class UnsupportedRequestError(RandkitError, TypeError):
    """No sampling strategy is defined for a value kind."""

    def __init__(self, request: Any, repetition: Optional[Any] = None, reason: str = ""):
        self.request = request
        self.repetition = repetition
        message = f"No sampler defined for {describe(request)}"
        if repetition is not None:
            message += f" (repetition={getattr(repetition, 'value', repetition)})"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class RepetitionMismatchError(RandkitError, ValueError):
    """A sampler resolved for one repetition class was reused for the other."""

    def __init__(self, sampler: Any, requested: Any):
        self.sampler = sampler
        self.requested = requested
        super().__init__(
            f"Sampler {describe(sampler)} was resolved for "
            f"repetition={sampler.repetition.value} and cannot be reused for "
            f"repetition={requested.value}; resolve the original request again"
        )


class InvalidDimensionsError(RandkitError, ValueError):
    """Requested shape or count is negative or not an integer."""


class UniverseExhaustedError(RandkitError, RuntimeError):
    """Distinct sampling gave up after the configured number of draws."""

    def __init__(self, target: int, reached: int, draws: int):
        self.target = target
        self.reached = reached
        self.draws = draws
        super().__init__(
            f"Collected only {reached} of {target} distinct values after {draws} "
            f"draws; the sample space is probably smaller than {target}"
        )


class EmptyCollectionError(RandkitError, ValueError):
    """Sampling from an empty collection."""

    def __init__(self, request: Any):
        self.request = request
        super().__init__(f"Cannot sample from empty collection {describe(request)}")
