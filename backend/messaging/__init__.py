"""Multi-channel conversation and messaging backend."""

__version__ = "1.0.0"
