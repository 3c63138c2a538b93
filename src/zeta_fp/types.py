"""공용 타입 정의 (불변)"""
from dataclasses import dataclass
from typing import Any, Callable, Literal, TypeAlias

Direction = Literal["forward", "reverse"]
Mode = Literal["sync", "async"]
ArityKind = Literal["identity", "curried", "unsupported"]

Stage: TypeAlias = Callable[..., Any]

# curry가 처리하는 arity
IDENTITY_ARITIES = frozenset({0, 1})
CURRIED_ARITIES = frozenset({2, 3})
SUPPORTED_ARITIES = IDENTITY_ARITIES | CURRIED_ARITIES


def arity_kind(arity: int) -> ArityKind:
    """arity별 curry 동작 분류"""
    if arity in IDENTITY_ARITIES:
        return "identity"
    if arity in CURRIED_ARITIES:
        return "curried"
    return "unsupported"


@dataclass(frozen=True)
class ArityReport:
    """대상 함수의 arity 조회 결과"""
    name: str
    arity: int
    kind: ArityKind

    @property
    def supported(self) -> bool:
        return self.kind != "unsupported"
