"""Pytest configuration and fixtures."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterator
from typing import Any

import pytest

from neural_progression.core.network import NeuralNetwork, overall_level_for
from neural_progression.engine.factory import create_initial_network
from neural_progression.utils.config import reset_config

NetworkEditor = Callable[..., NeuralNetwork]


@pytest.fixture(autouse=True)
def _fresh_config() -> Iterator[None]:
    """Each test sees configuration freshly loaded from its environment."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def network() -> NeuralNetwork:
    """A brand-new network for owner u1."""
    return create_initial_network("u1")


@pytest.fixture
def edit_nodes() -> NetworkEditor:
    """Return a helper that rewrites nodes by id (or by name for generated ids).

    Usage: ``edit_nodes(network, memory={"level": 3}, **{"Working Memory": {"unlocked": True}})``
    The overall level is recomputed so the result satisfies the network invariant.
    """

    def _edit(network: NeuralNetwork, **changes: dict[str, Any]) -> NeuralNetwork:
        nodes = []
        for node in network.nodes:
            update = changes.get(node.id) or changes.get(node.name)
            nodes.append(dataclasses.replace(node, **update) if update else node)
        return dataclasses.replace(
            network,
            nodes=tuple(nodes),
            overall_level=overall_level_for(tuple(nodes)),
        )

    return _edit


@pytest.fixture
def perfect_round1() -> dict[str, Any]:
    """Round results with a perfect, instant first round only."""
    return {"round1": {"score": 100, "timeRemaining": 60}}
