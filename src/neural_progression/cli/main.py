"""NeuralProgression CLI main entry point."""

from __future__ import annotations

from typing import Annotated

import typer

from neural_progression.cli._helpers import dump_json, read_json, setup_logging, write_output
from neural_progression.core.catalog import all_definitions
from neural_progression.core.network import NeuralNetwork
from neural_progression.engine.factory import InvalidInputError, create_initial_network
from neural_progression.engine.stats import compute_stats
from neural_progression.engine.updater import apply_round_results
from neural_progression.utils.config import get_config

app = typer.Typer(
    name="nprog",
    help="Neural Progression - skill-graph progression for cognitive challenge games",
    no_args_is_help=True,
)


@app.callback()
def _root(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    setup_logging(get_config(), verbose=verbose)


def _load_network(path: str) -> NeuralNetwork:
    try:
        return NeuralNetwork.from_dict(read_json(path))
    except ValueError as e:
        typer.secho(f"Error: {path} is not a network record: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e


@app.command()
def init(
    owner: Annotated[str, typer.Argument(help="Owner id for the new network")],
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="Write the network to this file")
    ] = None,
) -> None:
    """Create a starting network for a new user.

    Examples:
        nprog init u1
        nprog init u1 -o network.json
    """
    try:
        network = create_initial_network(owner)
    except InvalidInputError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    write_output(network.to_dict(), output)


@app.command()
def apply(
    network_file: Annotated[str, typer.Argument(help="Network JSON file")],
    performance_file: Annotated[str, typer.Argument(help="Round results JSON file")],
    rival_file: Annotated[
        str | None, typer.Option("--rival", "-r", help="Rival JSON file")
    ] = None,
    output: Annotated[
        str | None,
        typer.Option("--output", "-o", help="Write the updated network to this file"),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """Apply a finished game to a network.

    Examples:
        nprog apply network.json results.json -o network.json
        nprog apply network.json results.json --rival rival.json --json
    """
    network = _load_network(network_file)
    performance = read_json(performance_file)
    rival = read_json(rival_file) if rival_file else None

    updated, progress = apply_round_results(network, performance, rival)

    if output:
        write_output(updated.to_dict(), output)

    if json_output:
        result = {"progress": progress.to_dict()}
        if not output:
            result["network"] = updated.to_dict()
        typer.echo(dump_json(result))
    else:
        from neural_progression.cli.tui import render_progress

        render_progress(progress)


@app.command()
def stats(
    network_file: Annotated[str, typer.Argument(help="Network JSON file")],
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    show_nodes: Annotated[
        bool, typer.Option("--nodes", "-n", help="Also list every node")
    ] = False,
) -> None:
    """Show dashboard statistics for a network.

    Examples:
        nprog stats network.json
        nprog stats network.json --json
    """
    network = _load_network(network_file)
    result = compute_stats(network)

    if json_output:
        typer.echo(dump_json(result.to_dict()))
        return

    from neural_progression.cli.tui import render_network, render_stats

    render_stats(result)
    if show_nodes:
        render_network(network)


@app.command()
def catalog(
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """List the nodes a network can unlock."""
    if json_output:
        typer.echo(
            dump_json(
                {
                    "nodes": [
                        {
                            "name": d.name,
                            "description": d.description,
                            "domain": d.domain.value,
                            "tier": d.tier.value,
                            "connections": list(d.connections),
                        }
                        for d in all_definitions()
                    ]
                }
            )
        )
        return

    from neural_progression.cli.tui import render_catalog

    render_catalog()


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
