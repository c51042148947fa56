"""
Utility modules for profilecentroid.

This module provides:
- System resource detection
- Worker sizing for parallel detection
"""

from .resources import (
    ParallelMode,
    SystemResources,
    get_system_resources,
)

__all__ = [
    "ParallelMode",
    "SystemResources",
    "get_system_resources",
]
