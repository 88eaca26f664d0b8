"""
Command line host for the graph core.
"""

from .main import main

__all__ = ["main"]
