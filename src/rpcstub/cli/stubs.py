"""
CLI commands for client stub generation.

Commands:
- render: Print the client for one service to stdout
- generate: Write clients for every service in a file or directory
- check: Load descriptors and check render preconditions
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rpcstub.core.config import StubgenConfig, find_config, load_config
from rpcstub.core.errors import RpcStubError
from rpcstub.stubs import ServiceDescriptor, StubRenderer, StubWriter, load_descriptors

console = Console()
err_console = Console(stderr=True)


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(code=1)


def _load_config(input_path: Path, config_path: Path | None) -> tuple[StubgenConfig, Path]:
    """Load rpcstub.toml; returns the config and the project root it is relative to."""
    toml_path = config_path or find_config(input_path)
    try:
        return load_config(toml_path), toml_path.parent
    except RpcStubError as e:
        _fail(str(e))


def _make_renderer(config: StubgenConfig, project_root: Path) -> StubRenderer:
    templates_path = config.get_templates_path(project_root)
    if templates_path is not None and not templates_path.is_dir():
        _fail(f"Template directory not found: {templates_path}")
    return StubRenderer(config.render, project_templates_dir=templates_path)


def _load_descriptors(input_path: Path) -> list[ServiceDescriptor]:
    if not input_path.exists():
        _fail(f"Input not found: {input_path}")
    try:
        return load_descriptors(input_path)
    except RpcStubError as e:
        _fail(str(e))


def render_command(
    descriptor: Path = typer.Argument(..., help="Descriptor file (.toml or .json)"),
    service: str | None = typer.Option(
        None, "--service", "-s", help="Service to render when the file holds several"
    ),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to rpcstub.toml (default: next to the descriptor)"
    ),
) -> None:
    """
    Render one service client and print it to stdout.
    """
    config, project_root = _load_config(descriptor, config_path)
    descriptors = _load_descriptors(descriptor)

    if service is not None:
        selected = [d for d in descriptors if d.service_name == service]
        if not selected:
            _fail(f"Service '{service}' not found in {descriptor}")
    elif len(descriptors) == 1:
        selected = descriptors
    else:
        names = ", ".join(d.service_name for d in descriptors) or "(none)"
        _fail(f"{descriptor} describes {len(descriptors)} services ({names}); use --service")

    renderer = _make_renderer(config, project_root)
    try:
        source = renderer.render(selected[0])
    except RpcStubError as e:
        _fail(str(e))

    # Plain echo: Java array brackets must not be read as Rich markup
    typer.echo(source, nl=False)


def generate_command(
    input_path: Path = typer.Argument(..., help="Descriptor file or directory of descriptors"),
    output_dir: Path | None = typer.Option(
        None, "--output", "-o", help="Output directory (default: output.directory from rpcstub.toml)"
    ),
    with_package_dir: bool = typer.Option(
        False, "--with-package-dir", help="Place each client under its package path"
    ),
    clean: bool = typer.Option(False, "--clean", help="Remove the output directory first"),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to rpcstub.toml (default: next to the input)"
    ),
) -> None:
    """
    Generate client classes for every service in a descriptor file or directory.
    """
    config, project_root = _load_config(input_path, config_path)
    descriptors = _load_descriptors(input_path)
    renderer = _make_renderer(config, project_root)

    output_path = output_dir or config.get_output_path(project_root)
    writer = StubWriter(
        output_path, with_package_dir=with_package_dir or config.output.with_package_dir
    )
    if clean or config.output.clean:
        if input_path.resolve().is_relative_to(output_path.resolve()):
            _fail(f"Refusing to clean {output_path}: it contains the input {input_path}")
        try:
            writer.clean()
        except RpcStubError as e:
            _fail(str(e))

    result = writer.generate_all(descriptors, renderer)

    if result.files_created:
        table = Table(title="Generated Clients")
        table.add_column("Service", style="cyan")
        table.add_column("File")
        for path in result.files_created:
            table.add_row(result.services[path], escape(str(path)))
        console.print(table)

    console.print(f"Generated {len(result.files_created)} client(s)")

    if not result.success:
        for error in result.errors:
            err_console.print(f"[red]Error:[/red] {escape(error)}")
        raise typer.Exit(code=1)


def check_command(
    input_path: Path = typer.Argument(..., help="Descriptor file or directory of descriptors"),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to rpcstub.toml (default: next to the input)"
    ),
) -> None:
    """
    Validate descriptors and project configuration without writing anything.
    """
    config, project_root = _load_config(input_path, config_path)
    descriptors = _load_descriptors(input_path)
    renderer = _make_renderer(config, project_root)

    failures = 0
    for descriptor in descriptors:
        try:
            renderer.validate(descriptor)
        except RpcStubError as e:
            failures += 1
            err_console.print(f"[red]✗[/red] {escape(str(e))}")
        else:
            console.print(
                f"[green]✓[/green] {descriptor.qualified_name()} "
                f"({len(descriptor.methods)} method(s))"
            )

    if failures:
        err_console.print(f"{failures} of {len(descriptors)} service(s) failed")
        raise typer.Exit(code=1)
    console.print(f"All {len(descriptors)} service(s) are valid")
