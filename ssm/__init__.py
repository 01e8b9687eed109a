"""SSM - a small SSH connection manager."""

__version__ = "0.3.0"
