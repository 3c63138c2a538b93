"""함수 합성 유틸리티"""
from typing import Any, Callable, TypeVar

from zeta_fp.reducer import Reducer
from zeta_fp.types import Stage

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')


# ============================================================
# Pipe (왼쪽 -> 오른쪽)
# ============================================================

async def pipe(seed: Any, *stages: Stage | None) -> Any:
    """
    seed를 스테이지에 왼쪽부터 통과시킨다 (비동기).

    seed와 각 스테이지 결과가 awaitable이면 await 후 다음으로 넘긴다.

    >>> await pipe(5, lambda x: x * 2, fetch_user)
    """
    return await Reducer(stages, "forward", "async").run_async(seed)


def pipe_sync(seed: Any, *stages: Stage | None) -> Any:
    """
    seed를 스테이지에 왼쪽부터 통과시킨다 (동기).

    >>> pipe_sync(5, lambda x: x * 2, lambda x: x + 10)
    20
    """
    return Reducer(stages, "forward", "sync").run(seed)


def flow(*stages: Stage | None) -> Reducer:
    """
    왼쪽에서 오른쪽으로 함수 합성 (재사용 가능한 동기 함수)

    첫 스테이지만 여러 인자를 받을 수 있다.

    >>> describe = flow(lambda name, age: (name, age), lambda u: f"{u[0]} ({u[1]})")
    >>> describe("Alice", 25)
    'Alice (25)'
    """
    return Reducer(stages, "forward", "sync")


def pipe_async(*stages: Stage | None) -> Reducer:
    """flow의 비동기 버전 (호출하면 코루틴 반환)"""
    return Reducer(stages, "forward", "async")


# ============================================================
# Compose (오른쪽 -> 왼쪽)
# ============================================================

def compose(*stages: Stage | None) -> Reducer:
    """
    오른쪽에서 왼쪽으로 함수 합성 (비동기)

    compose(f, g, h)(x) == await f(await g(await h(x)))
    마지막 스테이지만 여러 인자를 받을 수 있다.
    """
    return Reducer(stages, "reverse", "async")


def compose_sync(*stages: Stage | None) -> Reducer:
    """오른쪽에서 왼쪽으로 함수 합성 (동기)"""
    return Reducer(stages, "reverse", "sync")


# ============================================================
# 보조 함수
# ============================================================

def identity(x: A) -> A:
    """항등 함수"""
    return x


def const(value: A) -> Callable[[B], A]:
    """상수 함수"""
    return lambda _: value


def flip(f: Callable[[A, B], C]) -> Callable[[B, A], C]:
    """인자 순서 뒤집기"""
    return lambda b, a: f(a, b)
