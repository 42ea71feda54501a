"""Frontend interfaces for lifeboard."""

from .cli import CLILife

__all__ = ["CLILife"]
