"""Configuration, state, help screens, key bindings and daemon control for running several AI coding agents."""

__version__ = "1.0.5"