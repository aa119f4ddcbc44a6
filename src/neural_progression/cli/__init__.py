"""NeuralProgression CLI.

Works on JSON files; it never stores anything on its own.

Usage:
    nprog init <owner>                      Create a starting network
    nprog apply <network> <performance>     Apply a finished game
    nprog stats <network>                   Show dashboard statistics
    nprog catalog                           List catalog nodes
"""

from neural_progression.cli.main import app, main

__all__ = ["app", "main"]
