"""Factory for creating interfaces from configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ci_demo_utils.base import BaseComponent
from ci_demo_utils.types import InterfaceType
from ci_demo_utils.utils.settings import get_interface_settings

from .cli import CLIInterface

if TYPE_CHECKING:
    from .base import BaseInterface


class InterfaceFactory(BaseComponent):
    """Create interface instances by type."""

    def create(self, interface_type: InterfaceType) -> BaseInterface:
        """Create the interface for ``interface_type``.

        Raises:
            ValueError: If the interface type is not supported.

        """
        self.logger.debug("Creating interface", interface_type=interface_type.value)
        if interface_type == InterfaceType.CLI:
            return CLIInterface()

        msg = f"Unsupported interface type: {interface_type}"
        raise ValueError(msg)

    def create_from_settings(self) -> BaseInterface:
        """Create the interface selected by ``InterfaceSettings``."""
        settings = get_interface_settings()
        return self.create(settings.interface_type_enum)
