"""Base component shared by classes that need structured logging."""

from __future__ import annotations

from ci_demo_utils.utils.logger import get_logger


class BaseComponent:
    """Provide a structlog logger bound to the concrete class name."""

    def __init__(self) -> None:
        """Bind the component logger."""
        self.logger = get_logger(self.__class__.__module__).bind(
            component=self.__class__.__name__,
        )
