"""Abstract base class for application interfaces."""

from abc import ABC, abstractmethod

from ci_demo_utils.base import BaseComponent


class BaseInterface(BaseComponent, ABC):
    """Common contract implemented by every interface."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the interface name."""

    @abstractmethod
    def run(self) -> None:
        """Run the interface."""
