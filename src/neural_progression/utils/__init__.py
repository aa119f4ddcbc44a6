"""Utility helpers for NeuralProgression."""
