"""Entry point for the video encoder listener service."""

from ddtrace import patch_all

from catalog_admin.listener.dependencies import get_listener
from catalog_admin.logging import setup_logging

logger = setup_logging()
patch_all()


def main():
    """Starts the video encoder listener."""
    logger.info("Starting video-encoder-listener service")
    listener = get_listener()
    listener.start()


if __name__ == "__main__":
    main()
