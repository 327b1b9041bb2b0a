from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from imagediff.config import DiscoveryConfig, tool_version
from imagediff.discovery_service import discover_build_specs
from imagediff.errors import ImageDiffError
from imagediff.logging_setup import configure_logging
from imagediff.output import write_build_specs


app = typer.Typer(
    help="List image build directories whose contents changed between two revisions.",
    add_completion=False,
)
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"imagediff {tool_version()}")
        raise typer.Exit()


def _run(config: DiscoveryConfig) -> int:
    try:
        result = discover_build_specs(config.repo_path, config.old_rev, config.new_rev)
        write_build_specs(result.build_specs)
    except KeyboardInterrupt:
        err_console.print("[yellow]Interrupted.[/yellow] No output was written.", soft_wrap=True)
        return 130
    except ImageDiffError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]", soft_wrap=True)
        return 1
    except Exception as exc:
        err_console.print(f"[red]imagediff failed:[/red] {escape(str(exc))}", soft_wrap=True)
        return 1

    return 0


@app.command()
def main(
    repo: str = typer.Option(..., "--repo", help="Path to a local, checked-out git repository."),
    old_rev: str = typer.Option(
        ...,
        "--old-rev",
        help="Old revision: branch, tag, full or abbreviated commit id.",
    ),
    new_rev: str = typer.Option(
        ...,
        "--new-rev",
        help="New revision: branch, tag, full or abbreviated commit id.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Print a JSON array describing each changed directory that carries an image.yaml."""
    configure_logging(console=err_console)
    config = DiscoveryConfig(repo=repo, old_rev=old_rev, new_rev=new_rev)
    raise typer.Exit(code=_run(config))
