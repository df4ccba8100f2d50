"""Resolution of requests into samplers."""

from typing import Any, Union

from randkit.engines.base import Engine
from randkit.config.logging import get_logger
from randkit.utils.error_logging import log_error
from .errors import RepetitionMismatchError, UnsupportedRequestError, describe
from .registry import RequestShape, find_draw, find_resolver, request_shape
from .samplers import Repetition, Sampler, SamplerTrivial, SamplerType

logger = get_logger(__name__)


def resolve(
    rng: Engine,
    request: Any,
    repetition: Union[Repetition, str] = Repetition.MANY,
) -> Sampler:
    """
    Resolve a request into a sampler for ``rng``.

    Args:
        rng: Engine the sampler will be used with
        request: A type, a Distribution, a collection value or a Sampler
        repetition: Repetition.ONE for a single draw, Repetition.MANY otherwise

    Returns:
        Sampler instance

    Raises:
        RepetitionMismatchError: If ``request`` is a sampler resolved for the
            other repetition
        UnsupportedRequestError: If no draw algorithm exists for the result
    """
    repetition = Repetition(repetition)

    if isinstance(request, Sampler):
        if request.repetition is not repetition:
            error = RepetitionMismatchError(request, repetition)
            log_error(error, operation="resolve")
            raise error
        return request

    func = find_resolver(rng, request)
    if func is not None:
        sampler = func(rng, request, repetition)
    elif request_shape(request) is RequestShape.TYPE:
        sampler = SamplerType(request, repetition)
    else:
        sampler = SamplerTrivial(request, repetition)

    if find_draw(rng, sampler) is None:
        error = UnsupportedRequestError(request, repetition)
        log_error(
            error,
            context={"engine": type(rng).__name__, "sampler": type(sampler).__name__},
            operation="resolve",
        )
        raise error

    logger.debug(
        f"Resolved {describe(request)} ({repetition.value}) to {type(sampler).__name__}"
    )
    return sampler
