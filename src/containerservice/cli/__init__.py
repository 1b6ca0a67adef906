"""
containerservice CLI Package

This package exposes the top-level Typer `app` for tests and the console
entrypoint.
"""

import logging

# Re-export commonly patched symbols for tests
from ..reporters.console_reporter import ConsoleReporter
from .main import app

logger = logging.getLogger(__name__)

__all__ = ["app", "ConsoleReporter"]
