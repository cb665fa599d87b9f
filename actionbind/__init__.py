"""Bind game actions to button, axis, dual-axis and triple-axis inputs."""

__version__ = "0.1.0"