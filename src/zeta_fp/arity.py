"""대상 함수의 arity 조회"""
import inspect
from typing import Callable

from zeta_fp.errors import ArityInspectionError
from zeta_fp.types import ArityReport, arity_kind

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def arity(target: Callable) -> int:
    """
    필수 위치 인자 개수

    기본값이 있는 인자, *args, keyword-only, **kwargs는 세지 않는다.
    """
    try:
        sig = inspect.signature(target)
    except (TypeError, ValueError) as e:
        raise ArityInspectionError(target) from e

    return sum(
        1
        for p in sig.parameters.values()
        if p.kind in _POSITIONAL and p.default is inspect.Parameter.empty
    )


def describe(target: Callable, declared: int | None = None) -> ArityReport:
    """arity와 curry 동작 분류"""
    n = arity(target) if declared is None else declared
    name = getattr(target, "__qualname__", None) or repr(target)
    return ArityReport(name=name, arity=n, kind=arity_kind(n))
