"""Console entry point for CI Demo Utils."""

from ci_demo_utils.interfaces.factory import InterfaceFactory
from ci_demo_utils.utils.logger import configure_logging, get_logger
from ci_demo_utils.utils.settings import get_settings

logger = get_logger(__name__)


def main() -> None:
    """Configure logging and run the configured interface."""
    configure_logging(get_settings())
    interface = InterfaceFactory().create_from_settings()
    logger.debug("Starting interface", interface=interface.name)
    interface.run()


if __name__ == "__main__":  # pragma: no cover
    main()
