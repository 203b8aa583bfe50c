"""Command-line interface: ``bindgen generate`` and ``bindgen version``."""

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from .codegen import generate as run_generate
from .config import GeneratorConfig, load_raw_config, validate_config
from .exceptions import BindgenError

console = Console()
app = typer.Typer(
    name="bindgen",
    help="Generate Unreal C++ HTTP bindings from OpenAPI specifications",
    no_args_is_help=True,
)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def _resolve_config(config: str | None, overrides: dict[str, str | None]) -> GeneratorConfig:
    """Merge CLI options over a config file, if one is given or found."""
    values = {k: v for k, v in overrides.items() if v is not None}
    required = ("source", "output_dir", "file_name", "module_name")
    if config is None and all(k in values for k in required):
        return validate_config(values)
    data, config_path = load_raw_config(config)
    return validate_config({**data, **values}, config_path)


@app.command()
def generate(
    path: Annotated[
        str | None, typer.Option("--path", "-p", help="Path or URL of the OpenAPI document")
    ] = None,
    output_dir: Annotated[
        str | None, typer.Option("--output-dir", "-o", help="Directory to write the header to")
    ] = None,
    file_name: Annotated[
        str | None, typer.Option("--file-name", "-f", help="Generated header file name")
    ] = None,
    module_name: Annotated[
        str | None, typer.Option("--module-name", "-m", help="Unreal module name")
    ] = None,
    extra_headers: Annotated[
        str | None,
        typer.Option("--extra-headers", help="Extra #include directives or 'a.h;b.h'"),
    ] = None,
    fmt: Annotated[
        str | None, typer.Option("--format", help="Force document format: json or yaml")
    ] = None,
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to a bindgen YAML config file")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Generate a C++ header from an OpenAPI document.

    Examples:
        bindgen generate -p api.yaml -o Source/Game/Api -f GameApi.h -m Game
        bindgen generate --config bindgen.yaml
    """
    configure_logging("DEBUG" if verbose else "INFO")

    try:
        resolved = _resolve_config(config, {
            "source": path,
            "output_dir": output_dir,
            "file_name": file_name,
            "module_name": module_name,
            "extra_headers": extra_headers,
            "format": fmt,
        })
        output_path = run_generate(resolved)
    except BindgenError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(1)

    console.print(f"[green]Generated[/green] {escape(str(output_path))}")


@app.command()
def version() -> None:
    """Show the version of bindgen."""
    from . import __version__

    console.print(f"bindgen version: {__version__}")


if __name__ == "__main__":
    app()
