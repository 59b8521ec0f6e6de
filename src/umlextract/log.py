# Copyright 2026 UMLExtract Contributors
# SPDX-License-Identifier: Apache-2.0

"""Logging configuration for the command-line interface."""

import logging
import sys

# ###############
# Public Interface
# ###############

LOGGER_NAME = "umlextract"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Configure the ``umlextract`` logger to write to stderr at *level*.

    Calling it again replaces the previous handler.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger
