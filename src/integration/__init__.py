"""
Console integration layer
"""

from .console import ConsoleConfig, main, run

__all__ = [
    "ConsoleConfig",
    "main",
    "run",
]
