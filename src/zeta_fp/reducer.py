"""순차 적용 리듀서 (pipe/compose 공통 골격)"""
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Sequence

from zeta_fp.types import Direction, Mode, Stage

logger = logging.getLogger(__name__)


def echo(args: Sequence[Any]) -> Any:
    """스테이지가 없을 때의 입력 그대로 반환"""
    if not args:
        return None
    if len(args) == 1:
        return args[0]
    return tuple(args)


@dataclass(frozen=True, eq=False)
class Reducer:
    """
    스테이지 목록을 한 방향으로 순서대로 적용

    첫 스테이지(적용 순서 기준)는 모든 인자를 받고,
    이후 스테이지는 직전 결과 하나만 받는다.
    None 스테이지는 건너뛴다 (첫 실제 스테이지가 모든 인자를 받는다).
    """
    stages: tuple[Stage | None, ...]
    direction: Direction = "forward"
    mode: Mode = "sync"

    def __post_init__(self) -> None:
        object.__setattr__(self, "stages", tuple(self.stages))

    def ordered(self) -> tuple[Stage | None, ...]:
        """적용 순서대로 정렬된 스테이지"""
        if self.direction == "reverse":
            return self.stages[::-1]
        return self.stages

    def _index(self, position: int) -> int:
        """적용 순서 -> 원래 목록 인덱스 (로그용)"""
        if self.direction == "reverse":
            return len(self.stages) - 1 - position
        return position

    def run(self, *args: Any) -> Any:
        """동기 실행 (awaitable 결과도 값 그대로 다음 스테이지로 전달)"""
        result = echo(args)
        started = False
        for position, stage in enumerate(self.ordered()):
            if stage is None:
                continue
            try:
                result = stage(result) if started else stage(*args)
            except Exception:
                logger.debug("stage %d failed", self._index(position))
                raise
            started = True
        return result

    async def run_async(self, *args: Any) -> Any:
        """비동기 실행 (입력값과 스테이지마다 결과를 await)"""
        if len(args) == 1 and inspect.isawaitable(args[0]):
            args = (await args[0],)

        result = echo(args)
        started = False
        for position, stage in enumerate(self.ordered()):
            if stage is None:
                continue
            try:
                result = stage(result) if started else stage(*args)
                if inspect.isawaitable(result):
                    result = await result
            except Exception:
                logger.debug("stage %d failed", self._index(position))
                raise
            started = True
        return result

    def __call__(self, *args: Any) -> Any:
        if self.mode == "async":
            return self.run_async(*args)
        return self.run(*args)
