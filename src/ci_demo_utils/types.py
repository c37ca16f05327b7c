"""Enumerations shared across the package."""

from enum import Enum


class InterfaceType(str, Enum):
    """Interfaces the application can be started with."""

    CLI = "cli"
