"""이름 붙은 파이프라인 커맨드"""
import asyncio
import json
from pathlib import Path
from typing import Any, List, Optional

import typer
import yaml
from rich.console import Console
from rich.table import Table

from zeta_fp.config import AppConfig, load_config, merge_config
from zeta_fp.errors import StageError, error_to_dict
from zeta_fp.resolve import build_pipeline
from zeta_fp.result import Failure

app = typer.Typer(help="설정 파일의 파이프라인 관리")
console = Console()


def _load(config_path: Optional[Path]) -> AppConfig:
    """설정 로드 (실패 시 종료)"""
    result = load_config(config_path)
    if isinstance(result, Failure):
        console.print(f"[bold red]Error loading config: {result.error.message}[/bold red]")
        raise typer.Exit(1)
    return result.value


def _parse_value(raw: str) -> Any:
    """CLI 인자를 YAML 스칼라로 해석 ("3" -> 3, "null" -> None)"""
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw


@app.command("list")
def list_pipelines(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="설정 파일 경로"),
) -> None:
    """파이프라인 목록 출력"""
    config = _load(config_path)

    if not config.pipelines:
        console.print("[dim]No pipelines configured[/dim]")
        return

    table = Table(title="Pipelines")
    table.add_column("이름", style="cyan")
    table.add_column("방향", style="green")
    table.add_column("모드", style="yellow")
    table.add_column("스테이지", style="magenta")
    table.add_column("설명")

    for name in config.list_names():
        definition = config.pipelines[name]
        table.add_row(
            name,
            definition.direction,
            definition.mode,
            " → ".join(definition.stages) or "-",
            definition.description,
        )

    console.print(table)


@app.command("run")
def run_pipeline(
    name: str = typer.Argument(..., help="파이프라인 이름"),
    values: List[str] = typer.Argument(..., help="입력값 (YAML 스칼라로 해석)"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="설정 파일 경로"),
    as_json: bool = typer.Option(False, "--json", help="JSON으로 출력"),
) -> None:
    """파이프라인 실행"""
    config = _load(config_path)
    if as_json:
        config = merge_config(config, {"output": {"format": "json"}})

    definition = config.get_pipeline(name)
    if definition is None:
        console.print(f"[bold red]Unknown pipeline: {name}[/bold red]")
        console.print(f"Available: {', '.join(config.list_names()) or '-'}")
        raise typer.Exit(1)

    built = build_pipeline(definition)
    if isinstance(built, Failure):
        if config.output.format == "json":
            typer.echo(json.dumps({"pipeline": name, "error": error_to_dict(built.error)}))
            raise typer.Exit(1)
        console.print(f"[bold red]Error: {built.error.target}: {built.error.message}[/bold red]")
        raise typer.Exit(1)

    args = [_parse_value(v) for v in values]
    reducer = built.value
    try:
        if definition.mode == "async":
            result = asyncio.run(reducer.run_async(*args))
        else:
            result = reducer.run(*args)
    except Exception as e:
        error = StageError.from_exception(e)
        if config.output.format == "json":
            typer.echo(json.dumps({"pipeline": name, "error": error_to_dict(error)}))
        else:
            console.print(f"[bold red]Stage failed: {error.exception}: {error.message}[/bold red]")
        raise typer.Exit(1)

    if config.output.format == "json":
        typer.echo(json.dumps({"pipeline": name, "result": result}, default=str))
    else:
        typer.echo(result)
