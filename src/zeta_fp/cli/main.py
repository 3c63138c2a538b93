"""Zeta FP CLI 메인 엔트리"""
import typer
from rich.console import Console

from zeta_fp.cli.commands import inspect, pipelines

console = Console()

app = typer.Typer(
    name="zeta-fp",
    help="Zeta FP - curry / pipe / compose combinators",
    add_completion=False,
)

# 서브커맨드 등록
app.command("inspect")(inspect.inspect_target)
app.add_typer(pipelines.app, name="pipelines")


@app.callback()
def main_callback() -> None:
    """Zeta FP CLI"""
    pass


@app.command()
def version() -> None:
    """버전 정보 출력"""
    from zeta_fp.cli import __version__
    console.print(f"[bold blue]zeta-fp[/bold blue] version [green]{__version__}[/green]")


def cli() -> None:
    """CLI 진입점"""
    app()


if __name__ == "__main__":
    cli()
