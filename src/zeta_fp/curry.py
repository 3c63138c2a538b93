"""커링 (arity 0~3)

curried(a, b, c), curried(a, b)(c), curried(a)(b, c), curried(a)(b)(c)
모두 같은 결과를 낸다. 분기 기준은 호출마다 실제로 넘어온 인자 개수이며,
값(0, "", None, False)은 보지 않는다.
"""
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from zeta_fp.arity import arity as read_arity
from zeta_fp.errors import UnsupportedArityError
from zeta_fp.types import CURRIED_ARITIES, IDENTITY_ARITIES

R = TypeVar('R')

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Curried:
    """부분 적용 상태 (대상 함수 + 지금까지 받은 인자)"""
    target: Callable[..., Any]
    arity: int
    bound: tuple = ()

    @property
    def remaining(self) -> int:
        return self.arity - len(self.bound)

    @property
    def __signature__(self) -> inspect.Signature:
        # 남은 자리만 노출 (부분 적용 후 arity() 재조회용)
        return inspect.Signature([
            inspect.Parameter(f"arg{i}", inspect.Parameter.POSITIONAL_ONLY)
            for i in range(len(self.bound), self.arity)
        ])

    @property
    def __wrapped__(self) -> Callable[..., Any]:
        return self.target

    def __call__(self, *args: Any) -> Any:
        if not args:
            raise TypeError(
                f"{self!r} expected at least 1 argument, got 0"
            )
        # 남은 자리보다 많이 받은 인자는 버린다
        bound = self.bound + args[:self.remaining]
        if len(bound) == self.arity:
            return self.target(*bound)
        return Curried(self.target, self.arity, bound)

    def __repr__(self) -> str:
        name = getattr(self.target, "__qualname__", repr(self.target))
        bound = ", ".join(repr(a) for a in self.bound)
        return f"curry({name})({bound})" if self.bound else f"curry({name})"


def curry(target: Callable[..., R], arity: int | None = None) -> Callable[..., Any]:
    """
    함수 커링

    Args:
        target: 필수 위치 인자 0~3개인 함수
        arity: 선언 arity (None이면 시그니처에서 조회)

    Returns:
        arity 0/1이면 target 그대로, 2/3이면 Curried

    Raises:
        UnsupportedArityError: arity가 0~3 밖일 때
    """
    n = read_arity(target) if arity is None else arity

    if n in IDENTITY_ARITIES:
        return target
    if n not in CURRIED_ARITIES:
        raise UnsupportedArityError(n)

    logger.debug("curry %r (arity=%d)", target, n)
    return Curried(target, n)
