#!/usr/bin/env python3
"""Utility functions for seqalign.

This module provides helper functions for:
- Configuring logging
"""

import logging

LOGGER = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Configure logging level based on verbosity flag.

    Args:
        verbose: If True, set logging level to INFO. Otherwise, set to WARNING.
    """
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )
    LOGGER.debug(f"Configured logging at level {logging.getLevelName(level)}")
