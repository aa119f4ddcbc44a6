"""Statistics aggregator - dashboard metrics derived from a network."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from neural_progression.core.domain import CognitiveDomain
from neural_progression.core.network import NeuralNetwork, mean_level

# Reported as weakest when no domain has an unlocked node
WEAKEST_FALLBACK = CognitiveDomain.LOGIC


@dataclass(frozen=True)
class NetworkStats:
    """Summary metrics for one network snapshot.

    Attributes:
        total_nodes: Every node, locked or not.
        unlocked_nodes: Nodes that are unlocked.
        average_node_level: Mean level of unlocked nodes (0 if none).
        dominant_domain: Domain with the highest average level.
        weakest_domain: Domain with the lowest non-zero average level.
        total_connections: Every connection record.
        active_connections: Connections flagged active.
        network_density: Active connections / possible pairs of unlocked nodes.
        domain_averages: Average level of unlocked nodes per domain (read-only).
    """

    total_nodes: int
    unlocked_nodes: int
    average_node_level: float
    dominant_domain: CognitiveDomain
    weakest_domain: CognitiveDomain
    total_connections: int
    active_connections: int
    network_density: float
    domain_averages: Mapping[CognitiveDomain, float] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the dashboard."""
        return {
            "totalNodes": self.total_nodes,
            "unlockedNodes": self.unlocked_nodes,
            "averageNodeLevel": self.average_node_level,
            "dominantDomain": self.dominant_domain.value,
            "weakestDomain": self.weakest_domain.value,
            "totalConnections": self.total_connections,
            "activeConnections": self.active_connections,
            "networkDensity": self.network_density,
            "domainAverages": {d.value: avg for d, avg in self.domain_averages.items()},
        }


def domain_averages(network: NeuralNetwork) -> dict[CognitiveDomain, float]:
    """Average level of the unlocked nodes in each domain (0 for empty domains)."""
    totals: dict[CognitiveDomain, int] = dict.fromkeys(CognitiveDomain, 0)
    counts: dict[CognitiveDomain, int] = dict.fromkeys(CognitiveDomain, 0)
    for node in network.unlocked_nodes:
        totals[node.domain] += node.level
        counts[node.domain] += 1
    return {
        domain: totals[domain] / counts[domain] if counts[domain] else 0.0
        for domain in CognitiveDomain
    }


def dominant_domain(averages: Mapping[CognitiveDomain, float]) -> CognitiveDomain:
    """Domain with the highest average; ties go to the earlier domain.

    Empty domains (average 0) are not excluded.
    """
    best = next(iter(CognitiveDomain))
    for domain in CognitiveDomain:
        if averages.get(domain, 0.0) > averages.get(best, 0.0):
            best = domain
    return best


def weakest_domain(averages: Mapping[CognitiveDomain, float]) -> CognitiveDomain:
    """Domain with the lowest strictly positive average; ties go to the earlier domain.

    Empty domains are skipped. If every domain is empty, WEAKEST_FALLBACK
    is returned.
    """
    weakest: CognitiveDomain | None = None
    for domain in CognitiveDomain:
        avg = averages.get(domain, 0.0)
        if avg <= 0:
            continue
        if weakest is None or avg < averages[weakest]:
            weakest = domain
    return weakest if weakest is not None else WEAKEST_FALLBACK


def compute_stats(network: NeuralNetwork) -> NetworkStats:
    """
    Compute dashboard statistics for a network.

    Pure: calling it twice on the same network gives equal results.
    """
    unlocked_count = len(network.unlocked_nodes)
    active_count = sum(1 for c in network.connections if c.active)
    averages = domain_averages(network)

    possible_pairs = unlocked_count * (unlocked_count - 1) // 2
    density = active_count / possible_pairs if possible_pairs > 0 else 0.0

    return NetworkStats(
        total_nodes=len(network.nodes),
        unlocked_nodes=unlocked_count,
        average_node_level=mean_level(network.nodes),
        dominant_domain=dominant_domain(averages),
        weakest_domain=weakest_domain(averages),
        total_connections=len(network.connections),
        active_connections=active_count,
        network_density=density,
        domain_averages=MappingProxyType(averages),
    )
