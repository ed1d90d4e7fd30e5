from __future__ import annotations

import logging
from pathlib import Path

import typer
from dotenv import load_dotenv

from sm_scaffold.config import ScaffoldConfig, parse_csv
from sm_scaffold.errors import ScaffoldError
from sm_scaffold.runner import EXIT_ERROR, run_scaffold

app = typer.Typer(add_completion=False, help="Site Manager scaffold file fetcher")


def _config_from_env() -> ScaffoldConfig:
    load_dotenv()
    try:
        return ScaffoldConfig.from_env()
    except ScaffoldError as exc:
        typer.echo(f"[Scaffold] Error: {exc}")
        raise typer.Exit(code=EXIT_ERROR)


def _load_config(version: str, source: str, files: str, dry_run: bool) -> ScaffoldConfig:
    config = _config_from_env()
    if version:
        config.version = version
    if source:
        config.source = source
    if files:
        config.filenames = parse_csv(files)
    config.dry_run = dry_run
    return config


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def fetch(
    project_dir: Path = typer.Option(Path("."), "--project-dir", help="Directory holding composer.json"),
    version: str = typer.Option("", help='Branch or tag to fetch. Default: "master" or SM_SCAFFOLD_VERSION'),
    source: str = typer.Option("", help="URL template with {version} and {path} placeholders"),
    files: str = typer.Option("", help="Comma separated scaffold paths. Empty uses the default list"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print resolved URLs and targets without downloading"),
) -> None:
    config = _load_config(version, source, files, dry_run)
    code = run_scaffold(config, project_dir, echo=typer.echo)
    raise typer.Exit(code=code)


@app.command()
def hook(
    event: str = typer.Argument(..., help='Lifecycle event name, e.g. "post-update-cmd"'),
    project_dir: Path = typer.Option(Path("."), "--project-dir", help="Directory holding composer.json"),
) -> None:
    config = _load_config("", "", "", False)
    code = run_scaffold(config, project_dir, event=event, echo=typer.echo)
    raise typer.Exit(code=code)


@app.command("files")
def list_files() -> None:
    config = _config_from_env()
    typer.echo(f"source: {config.source}")
    typer.echo(f"version: {config.version}")
    for name in config.filenames:
        marker = " (executable)" if name in config.executables else ""
        typer.echo(f"  {name}{marker}")


if __name__ == "__main__":
    app()
