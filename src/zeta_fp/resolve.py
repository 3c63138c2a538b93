"""import 경로 -> 함수 해석, 파이프라인 조립"""
import importlib

from zeta_fp.config import PipelineDefinition
from zeta_fp.errors import ResolveError
from zeta_fp.reducer import Reducer
from zeta_fp.result import Failure, Result, Success, bind, map_result
from zeta_fp.types import Stage


def import_target(path: str) -> Result[Stage, ResolveError]:
    """
    "package.module:attr" 형식 경로를 callable로 해석

    attr 부분은 점으로 이어진 속성 경로도 허용한다 (예: "builtins:str.upper").
    """
    module_name, sep, attr_path = path.partition(":")
    if not sep or not module_name or not attr_path:
        return Failure(ResolveError(
            target=path,
            message="Expected 'module:attribute'",
        ))

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        return Failure(ResolveError(target=path, message=str(e)))

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError:
            return Failure(ResolveError(
                target=path,
                message=f"{attr!r} not found",
            ))

    if not callable(obj):
        return Failure(ResolveError(target=path, message="Not callable"))

    return Success(obj)


def build_pipeline(definition: PipelineDefinition) -> Result[Reducer, ResolveError]:
    """정의에 따라 Reducer 조립 (첫 해석 실패에서 중단)"""
    resolved: Result[tuple[Stage, ...], ResolveError] = Success(())
    for path in definition.stages:
        resolved = bind(
            resolved,
            lambda stages, path=path: map_result(
                import_target(path), lambda fn: stages + (fn,)
            ),
        )

    return map_result(
        resolved,
        lambda stages: Reducer(stages, definition.direction, definition.mode),
    )
