"""
Argument parsing utilities for entity_scanner CLI.

Provides standard argument patterns used across scripts.
"""


def add_execute_argument(parser):
    """
    Add standard --execute argument to an ArgumentParser.

    Args:
        parser: argparse.ArgumentParser instance
    """
    parser.add_argument(
        "--execute",
        action="store_true",
        help="Also write a detailed log file under logs/ (default is console only)",
    )
