"""에러 타입 정의

예외는 호출 즉시 실패해야 하는 경우(curry 생성)에,
값 타입 에러는 Result 트랙(설정 로드, import 해석)에 사용한다.
"""
from dataclasses import dataclass
from typing import Union


class FpError(Exception):
    """zeta-fp 기본 예외"""


class UnsupportedArityError(FpError, ValueError):
    """curry 불가능한 arity"""

    def __init__(self, arity: int):
        self.arity = arity
        super().__init__(f"Unsupported arity: {arity}")


class ArityInspectionError(FpError, TypeError):
    """시그니처를 읽을 수 없는 대상"""

    def __init__(self, target: object):
        self.target = target
        name = getattr(target, "__qualname__", repr(target))
        super().__init__(
            f"Cannot inspect signature of {name}; pass arity= explicitly"
        )


@dataclass(frozen=True)
class ConfigError:
    """설정 에러"""
    field: str
    message: str
    code: str = "CONFIG_ERROR"


@dataclass(frozen=True)
class ResolveError:
    """import 경로 해석 실패"""
    target: str
    message: str
    code: str = "RESOLVE_ERROR"


@dataclass(frozen=True)
class StageError:
    """스테이지 실행 실패"""
    exception: str
    message: str
    code: str = "STAGE_ERROR"

    @classmethod
    def from_exception(cls, e: Exception) -> "StageError":
        return cls(exception=type(e).__name__, message=str(e))


# OR Type: 로드/실행 단계 에러
LoadError = Union[ConfigError, ResolveError, StageError]


def error_to_dict(error: LoadError) -> dict:
    """에러를 딕셔너리로 변환 (CLI JSON 출력용)"""
    match error:
        case ConfigError(field, message, code):
            return {"code": code, "field": field, "message": message}
        case ResolveError(target, message, code):
            return {"code": code, "target": target, "message": message}
        case StageError(exception, message, code):
            return {"code": code, "exception": exception, "message": message}
