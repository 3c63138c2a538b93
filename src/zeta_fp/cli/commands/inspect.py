"""arity 조회 커맨드"""
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from zeta_fp.arity import describe
from zeta_fp.errors import ArityInspectionError
from zeta_fp.resolve import import_target
from zeta_fp.result import Failure

console = Console()

KIND_STYLES = {
    "identity": "yellow",
    "curried": "green",
    "unsupported": "red",
}


def inspect_target(
    target: str = typer.Argument(..., help="module:attribute 경로"),
    arity: Optional[int] = typer.Option(None, "--arity", "-a", help="선언 arity (조회 생략)"),
) -> None:
    """함수의 arity와 curry 동작 출력"""
    resolved = import_target(target)
    if isinstance(resolved, Failure):
        console.print(f"[bold red]Error: {resolved.error.message}[/bold red]")
        raise typer.Exit(1)

    try:
        report = describe(resolved.value, arity)
    except ArityInspectionError as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        raise typer.Exit(1)

    style = KIND_STYLES[report.kind]
    table = Table(title=f"Arity: {target}")
    table.add_column("속성", style="cyan")
    table.add_column("값")
    table.add_row("Name", report.name)
    table.add_row("Arity", str(report.arity))
    table.add_row("Curry", f"[{style}]{report.kind}[/{style}]")
    console.print(table)

    if not report.supported:
        raise typer.Exit(1)
