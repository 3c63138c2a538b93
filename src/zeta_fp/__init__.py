"""Zeta FP - curry / pipe / compose combinators"""
from zeta_fp.types import (
    Direction, Mode, ArityKind, Stage,
    SUPPORTED_ARITIES, ArityReport,
)
from zeta_fp.errors import (
    FpError, UnsupportedArityError, ArityInspectionError,
    ConfigError, ResolveError, StageError, LoadError,
    error_to_dict,
)
from zeta_fp.result import (
    Result, Success, Failure,
    map_result, bind,
    attempt, attempt_async,
)
from zeta_fp.arity import arity, describe
from zeta_fp.curry import curry, Curried
from zeta_fp.reducer import Reducer
from zeta_fp.pipeline import (
    pipe, pipe_sync, flow, pipe_async,
    compose, compose_sync,
    identity, const, flip,
)

__version__ = "0.1.0"

__all__ = [
    # Types
    "Direction", "Mode", "ArityKind", "Stage",
    "SUPPORTED_ARITIES", "ArityReport",
    # Errors
    "FpError", "UnsupportedArityError", "ArityInspectionError",
    "ConfigError", "ResolveError", "StageError", "LoadError", "error_to_dict",
    # Result
    "Result", "Success", "Failure",
    "map_result", "bind",
    "attempt", "attempt_async",
    # Curry
    "arity", "describe", "curry", "Curried",
    # Pipeline
    "Reducer",
    "pipe", "pipe_sync", "flow", "pipe_async",
    "compose", "compose_sync",
    "identity", "const", "flip",
]
