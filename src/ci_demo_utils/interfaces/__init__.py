"""User-facing interfaces for CI Demo Utils."""

from .base import BaseInterface
from .cli import CLIInterface
from .factory import InterfaceFactory

__all__ = ["BaseInterface", "CLIInterface", "InterfaceFactory"]
