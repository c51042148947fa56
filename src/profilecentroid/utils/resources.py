"""
System resource detection for parallel detection.

Worker counts for run-level detection are derived from the number of
physical cores, so hyperthreads do not oversubscribe the numeric work.
"""

import os
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Optional


class ParallelMode(Enum):
    """How much of the machine run-level detection may use."""
    NONE = auto()
    LIGHT = auto()
    HEAVY = auto()
    MAX = auto()
    CUSTOM = auto()


# share of physical cores per mode; NONE and unlisted modes get one worker
_CORE_SHARE = {
    ParallelMode.LIGHT: 0.25,
    ParallelMode.HEAVY: 0.75,
    ParallelMode.MAX: 1.0,
}


@dataclass(frozen=True)
class SystemResources:
    """CPU information relevant to worker sizing."""
    cpu_count: int
    cpu_count_physical: int

    def get_workers(self, mode: ParallelMode, custom_workers: Optional[int] = None) -> int:
        """
        Number of detection processes for a parallel mode.

        CUSTOM takes ``custom_workers``, bounded by the physical core count;
        the other modes take a fixed share of the physical cores.

        Raises:
            ValueError: If mode is CUSTOM and custom_workers is None.
        """
        if mode is ParallelMode.CUSTOM:
            if custom_workers is None:
                raise ValueError("custom_workers must be specified for CUSTOM mode")
            return max(1, min(custom_workers, self.cpu_count_physical))
        share = _CORE_SHARE.get(mode)
        if share is None:
            return 1
        return max(1, int(self.cpu_count_physical * share))


def _count_physical_cores(cpuinfo: Path) -> Optional[int]:
    """Count unique (physical id, core id) pairs in a /proc/cpuinfo file."""
    cores = set()
    current_physical = None
    with open(cpuinfo) as f:
        for line in f:
            if line.startswith('physical id'):
                current_physical = line.split(':')[1].strip()
            elif line.startswith('core id') and current_physical is not None:
                cores.add((current_physical, line.split(':')[1].strip()))
    return len(cores) or None


def get_system_resources() -> SystemResources:
    """Detect the logical and physical CPU counts."""
    cpu_count = os.cpu_count() or 1

    cpu_count_physical = None
    cpuinfo = Path('/proc/cpuinfo')
    if cpuinfo.exists():
        try:
            cpu_count_physical = _count_physical_cores(cpuinfo)
        except OSError:
            cpu_count_physical = None

    return SystemResources(
        cpu_count=cpu_count,
        cpu_count_physical=cpu_count_physical or cpu_count,
    )
