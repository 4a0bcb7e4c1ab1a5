"""Frontend interfaces for lifegrid."""

from .cli import CLILife

__all__ = ["CLILife"]
