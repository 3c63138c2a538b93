"""설정 타입 (Pydantic)"""
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field

from zeta_fp.errors import ConfigError
from zeta_fp.result import Failure, Result, Success, bind
from zeta_fp.types import Direction, Mode


class PipelineDefinition(BaseModel):
    """이름 붙은 파이프라인 정의"""
    stages: list[str] = Field(default_factory=list)  # "package.module:attr"
    mode: Mode = "sync"
    direction: Direction = "forward"
    description: str = ""

    model_config = {"frozen": True}


class OutputConfig(BaseModel):
    """CLI 출력 설정"""
    format: Literal["plain", "json"] = "plain"

    model_config = {"frozen": True}


class AppConfig(BaseModel):
    """전체 설정"""
    pipelines: dict[str, PipelineDefinition] = Field(default_factory=dict)
    output: OutputConfig = Field(default_factory=OutputConfig)

    model_config = {"frozen": True}

    def get_pipeline(self, name: str) -> PipelineDefinition | None:
        return self.pipelines.get(name)

    def list_names(self) -> list[str]:
        return sorted(self.pipelines)


def load_yaml(path: Path) -> Result[dict, ConfigError]:
    """YAML 파일 로드"""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return Failure(ConfigError(
            field="config_path",
            message=f"Config file not found: {path}",
        ))
    except yaml.YAMLError as e:
        return Failure(ConfigError(
            field="config_yaml",
            message=f"Invalid YAML: {e}",
        ))

    if data is None:
        return Success({})
    if not isinstance(data, dict):
        return Failure(ConfigError(
            field="config_yaml",
            message=f"Top-level mapping expected, got {type(data).__name__}",
        ))
    return Success(data)


def parse_config(data: dict) -> Result[AppConfig, ConfigError]:
    """딕셔너리를 AppConfig로 파싱"""
    try:
        return Success(AppConfig(**data))
    except Exception as e:
        return Failure(ConfigError(field="config", message=str(e)))


def load_config(path: Path | str | None = None) -> Result[AppConfig, ConfigError]:
    """
    설정 로드

    path가 없으면 기본 경로들을 탐색하고, 파일이 없으면 기본값을 쓴다.
    """
    if path is None:
        default_paths = [
            Path("zeta-fp.yaml"),
            Path("zeta-fp.yml"),
            Path.home() / ".config" / "zeta-fp" / "config.yaml",
        ]
        path = next((p for p in default_paths if p.exists()), None)

    if path is None:
        return Success(AppConfig())

    return bind(load_yaml(Path(path)), parse_config)


def merge_config(base: AppConfig, overrides: dict) -> AppConfig:
    """설정 병합 (CLI 인자 등)"""

    def deep_merge(d1: dict, d2: dict) -> dict:
        merged = d1.copy()
        for k, v in d2.items():
            if k in merged and isinstance(merged[k], dict) and isinstance(v, dict):
                merged[k] = deep_merge(merged[k], v)
            else:
                merged[k] = v
        return merged

    return AppConfig(**deep_merge(base.model_dump(), overrides))
