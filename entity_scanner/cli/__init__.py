"""
CLI utilities for entity_scanner.

This package provides shared functionality for scripts:
- Logging setup
- Argument parsing
- Command entry points
"""

from entity_scanner.cli.args import add_execute_argument
from entity_scanner.cli.commands import run_scan
from entity_scanner.cli.logging import setup_logging

__all__ = [
    # Logging
    "setup_logging",
    # Arguments
    "add_execute_argument",
    # Commands
    "run_scan",
]
