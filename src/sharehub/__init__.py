"""ShareHub - content sharing with per-collaborator permissions."""

__version__ = "0.1.0"
