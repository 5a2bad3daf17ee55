"""Logging configuration for clipshare."""
import logging


def configure_logging(verbose: bool) -> None:
    """Configure the root logger.

    Args:
        verbose: If True, set DEBUG level; otherwise INFO level.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler()],
    )
