"""Terminal rendering for networks, progress reports and stats."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from neural_progression.core.catalog import all_definitions
from neural_progression.core.network import NeuralNetwork
from neural_progression.engine.stats import NetworkStats
from neural_progression.engine.updater import NetworkProgress

console = Console()

DOMAIN_COLORS = {
    "memory": "cyan",
    "creativity": "magenta",
    "logic": "blue",
    "pattern": "green",
    "speed": "yellow",
}


def _domain(value: str) -> str:
    color = DOMAIN_COLORS.get(value, "white")
    return f"[{color}]{value}[/{color}]"


def render_network(network: NeuralNetwork) -> None:
    """Print every node with its tier, level and progress."""
    table = Table(title=f"Network for {network.owner_id} (level {network.overall_level})")
    table.add_column("Node")
    table.add_column("Domain")
    table.add_column("Tier")
    table.add_column("Level", justify="right")
    table.add_column("Progress", justify="right")

    for node in network.nodes:
        style = None if node.unlocked else "dim"
        table.add_row(
            node.name,
            _domain(node.domain.value),
            node.tier.value,
            str(node.level) if node.unlocked else "locked",
            f"{node.progress:.0f}%" if node.unlocked else "",
            style=style,
        )
    console.print(table)


def render_progress(progress: NetworkProgress) -> None:
    """Print what changed in an update pass."""
    if progress.leveled_up:
        console.print(
            f"[bold green]Level up![/bold green] {progress.previous_level} -> "
            f"{progress.current_level}"
        )
    else:
        console.print(f"Overall level: {progress.current_level}")
    console.print(f"Progress to next level: {progress.level_progress:.0f}%")

    for node in progress.recently_unlocked_nodes:
        console.print(f"[green]Unlocked[/green] {node.name} ({_domain(node.domain.value)})")
    for conn in progress.recently_activated_connections:
        console.print(f"[green]Activated[/green] {conn.source} <-> {conn.target}")


def render_stats(stats: NetworkStats) -> None:
    """Print dashboard statistics."""
    table = Table(title="Network statistics", show_header=False)
    table.add_column("Metric")
    table.add_column("Value", justify="right")

    table.add_row("Nodes unlocked", f"{stats.unlocked_nodes}/{stats.total_nodes}")
    table.add_row("Average level", f"{stats.average_node_level:.2f}")
    table.add_row("Dominant domain", _domain(stats.dominant_domain.value))
    table.add_row("Weakest domain", _domain(stats.weakest_domain.value))
    table.add_row(
        "Connections active", f"{stats.active_connections}/{stats.total_connections}"
    )
    table.add_row("Density", f"{stats.network_density:.2f}")
    for domain, avg in stats.domain_averages.items():
        table.add_row(f"  {domain.value}", f"{avg:.2f}")
    console.print(table)


def render_catalog() -> None:
    """Print the node catalog."""
    table = Table(title="Node catalog")
    table.add_column("Name")
    table.add_column("Domain")
    table.add_column("Tier")
    table.add_column("Related")

    for definition in all_definitions():
        table.add_row(
            definition.name,
            _domain(definition.domain.value),
            definition.tier.value,
            ", ".join(definition.connections),
        )
    console.print(table)
