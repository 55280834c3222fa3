"""Click CLI with scan, deps, cycles, unused, and serve subcommands."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from terragraph import __version__
from terragraph.models import AnalysisConfig
from terragraph.pipeline import run_analysis, run_scan
from terragraph.analysis.graph_models import DependencyGraph
from terragraph.analysis.metrics import compute_metrics
from terragraph.analysis.unused import find_unused_modules

_FORMAT_CHOICES = ["text", "json"]

_source_dir_argument = click.argument(
    "source_dir", type=click.Path(exists=True, file_okay=False, path_type=Path), default=".",
)


def _analyze(source_dir: Path, include_transitive: bool = True) -> DependencyGraph:
    config = AnalysisConfig(source_dir=source_dir, include_transitive=include_transitive)
    try:
        return run_analysis(config)
    except ValueError as e:
        raise click.ClickException(str(e))


def _display(identity: str, root: Path) -> str:
    """Module directory relative to the project root."""
    module_dir = Path(identity).parent
    try:
        rel = module_dir.relative_to(root.resolve())
    except ValueError:
        return str(module_dir)
    return str(rel) if str(rel) != "." else "./"


def _echo_json(data: dict) -> None:
    click.echo(json.dumps(data, indent=2))


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """terragraph: Dependency graphs for Terragrunt projects."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@_source_dir_argument
def scan(source_dir: Path):
    """List the modules found in a project."""
    files = run_scan(AnalysisConfig(source_dir=source_dir))
    if not files:
        click.echo("No Terragrunt modules found.")
        return

    click.echo(f"\nFound {len(files)} module(s):\n")
    for path in files:
        click.echo(f"  {click.style(_display(path.as_posix(), source_dir), fg='cyan')}")


@cli.command()
@_source_dir_argument
@click.option("--format", "-f", "fmt", type=click.Choice(_FORMAT_CHOICES), default="text", help="Output format")
@click.option("--transitive/--no-transitive", default=True, help="Include transitive edges")
def deps(source_dir: Path, fmt: str, transitive: bool):
    """Build the dependency graph of a project."""
    graph = _analyze(source_dir, include_transitive=transitive)

    if fmt == "json":
        data = graph.to_dict()
        data["metrics"] = compute_metrics(graph)
        _echo_json(data)
        return

    if not graph.modules:
        click.echo("No Terragrunt modules found.")
        return

    click.echo(f"\n{len(graph.modules)} module(s):\n")
    for identity, node in graph.modules.items():
        click.echo(click.style(_display(identity, source_dir), fg="cyan"))
        if node.record.declared_source:
            click.echo(f"  {click.style('source', dim=True)}  {node.record.declared_source}")
        for target in graph.forward(identity):
            click.echo(f"  {click.style('->', fg='green')} {_display(target, source_dir)}")
        for edge in graph.transitive_edges():
            if edge.source == identity:
                click.echo(f"  {click.style('~>', fg='blue')} {_display(edge.target, source_dir)}")
    click.echo()

    metrics = compute_metrics(graph)
    click.echo("Summary:")
    click.echo(f"  direct edges: {metrics['internal_dependencies']}")
    click.echo(f"  transitive edges: {metrics['transitive_dependencies']}")
    click.echo(f"  unresolved references: {metrics['external_dependencies']}")
    click.echo(f"  cycles: {metrics['circular_dependencies']}")
    click.echo(f"  orphaned: {metrics['orphan_modules']}")
    click.echo(f"  isolated: {metrics['isolated_modules']}")


@cli.command()
@_source_dir_argument
@click.pass_context
def cycles(ctx: click.Context, source_dir: Path):
    """Report circular dependencies. Exits with status 1 if any exist."""
    graph = _analyze(source_dir, include_transitive=False)

    if not graph.cycles:
        click.echo(click.style("No circular dependencies.", fg="green"))
        return

    click.echo(click.style(f"Found {len(graph.cycles)} circular dependenc{'y' if len(graph.cycles) == 1 else 'ies'}:\n", fg="red"))
    for cycle in graph.cycles:
        click.echo("  " + " -> ".join(_display(i, source_dir) for i in cycle))
    ctx.exit(1)


@cli.command()
@_source_dir_argument
@click.option("--format", "-f", "fmt", type=click.Choice(_FORMAT_CHOICES), default="text", help="Output format")
def unused(source_dir: Path, fmt: str):
    """Find orphaned and isolated modules."""
    graph = _analyze(source_dir, include_transitive=False)
    report = find_unused_modules(graph)

    if fmt == "json":
        _echo_json(report)
        return

    click.echo(f"\nOrphaned ({len(report['orphaned'])}):")
    for item in report["orphaned"]:
        click.echo(f"  {click.style(_display(item['path'], source_dir), fg='yellow')}")
    click.echo(f"\nIsolated ({len(report['isolated'])}):")
    for item in report["isolated"]:
        click.echo(f"  {click.style(_display(item['path'], source_dir), fg='red')}")

    click.echo("\nRecommendations:")
    for rec in report["recommendations"]:
        click.echo(f"  {rec['action']}: {rec['description']}")


@cli.command()
@click.option("--port", "-p", default=8430, help="Port number")
@click.option("--host", default="127.0.0.1", help="Host address")
def serve(port: int, host: str):
    """Start the analysis web API."""
    try:
        import uvicorn
    except ImportError:
        raise click.ClickException(
            "uvicorn is required for the web API. "
            "Install with: pip install 'terragraph[web]'"
        )

    from terragraph.web import create_app

    click.echo(f"Starting terragraph API at http://{host}:{port}")
    uvicorn.run(create_app(), host=host, port=port, log_level="info")


if __name__ == "__main__":
    cli()
