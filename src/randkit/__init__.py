"""randkit: random values of any kind from pluggable engines and samplers."""

from .engines import (
    Engine,
    MersenneTwister,
    PCG64Engine,
    RandomDevice,
    randjump,
    get_default_engine,
    seed_default_engine,
    reset_default_engine,
)
from .ir import (
    Pair,
    eltype,
    deduce_type,
    Distribution,
    Uniform,
    FloatInterval,
    CloseOpen,
    Close1Open2,
    Normal,
    Exponential,
    Categorical,
)
from .sampling import (
    Repetition,
    Sampler,
    SamplerType,
    SamplerTrivial,
    SamplerTag,
    RequestShape,
    resolve,
    resolver,
    drawer,
    register_resolver,
    register_draw,
    RandkitError,
    UnsupportedRequestError,
    RepetitionMismatchError,
    InvalidDimensionsError,
    UniverseExhaustedError,
    EmptyCollectionError,
)
from .generation import (
    draw,
    draw_sampler,
    fill,
    draw_array,
    fill_distinct,
    draw_collection,
    randsubseq,
    shuffle,
    randperm,
    randcycle,
    draw_sparse,
    draw_string,
    draw_bits,
)

__version__ = "0.1.0"

__all__ = [
    "Engine",
    "MersenneTwister",
    "PCG64Engine",
    "RandomDevice",
    "randjump",
    "get_default_engine",
    "seed_default_engine",
    "reset_default_engine",
    "Pair",
    "eltype",
    "deduce_type",
    "Distribution",
    "Uniform",
    "FloatInterval",
    "CloseOpen",
    "Close1Open2",
    "Normal",
    "Exponential",
    "Categorical",
    "Repetition",
    "Sampler",
    "SamplerType",
    "SamplerTrivial",
    "SamplerTag",
    "RequestShape",
    "resolve",
    "resolver",
    "drawer",
    "register_resolver",
    "register_draw",
    "RandkitError",
    "UnsupportedRequestError",
    "RepetitionMismatchError",
    "InvalidDimensionsError",
    "UniverseExhaustedError",
    "EmptyCollectionError",
    "draw",
    "draw_sampler",
    "fill",
    "draw_array",
    "fill_distinct",
    "draw_collection",
    "randsubseq",
    "shuffle",
    "randperm",
    "randcycle",
    "draw_sparse",
    "draw_string",
    "draw_bits",
]
