"""
Shared compute infrastructure for stattests.

Submodules:
    timing: Execution timing utilities
"""

from stattests.core.compute.timing import Timer

__all__ = [
    "Timer",
]
