"""Run tracker backend."""
