"""
coordkit Command Line Interface.

This package provides the command-line interface for coordkit,
including commands for converting coordinates and measuring distances.

Usage:
    coordkit --help
    coordkit convert cartesian:1,0,0
    coordkit distance cartesian:0,0,1 cartesian:0,0,-1
"""

from coordkit.cli.app import cli, main

__all__ = ["cli", "main"]
