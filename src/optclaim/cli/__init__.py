"""CLI module - the ``optclaim`` developer command."""

from optclaim.cli.main import build_parser, main

__all__ = [
    "build_parser",
    "main",
]
