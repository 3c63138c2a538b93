"""Result 타입 (성공/실패 트랙)"""
import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, TypeVar, Union

T = TypeVar('T')
U = TypeVar('U')
E = TypeVar('E')


@dataclass(frozen=True)
class Success(Generic[T]):
    """성공 트랙"""
    value: T

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True)
class Failure(Generic[E]):
    """실패 트랙"""
    error: E

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


Result = Union[Success[T], Failure[E]]


def map_result(result: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:
    """Success 값에 함수 적용"""
    match result:
        case Success(value):
            return Success(f(value))
        case Failure() as err:
            return err


def bind(result: Result[T, E], f: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """Result 반환 함수 체이닝"""
    match result:
        case Success(value):
            return f(value)
        case Failure() as err:
            return err


def attempt(fn: Callable[..., T], *args: Any) -> Result[T, Exception]:
    """
    함수 호출 결과를 Result로 감싼다.

    발생한 예외 객체를 그대로 Failure에 담는다 (래핑 없음).
    """
    try:
        return Success(fn(*args))
    except Exception as e:
        return Failure(e)


async def attempt_async(
    fn: Callable[..., T | Awaitable[T]], *args: Any
) -> Result[T, Exception]:
    """attempt의 async 버전 (반환값이 awaitable이면 await)"""
    try:
        value = fn(*args)
        if inspect.isawaitable(value):
            value = await value
        return Success(value)
    except Exception as e:
        return Failure(e)
