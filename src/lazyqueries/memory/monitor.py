"""Memory pressure detection for buffering pipeline stages."""

import time
import psutil
from enum import Enum
from typing import Optional
from dataclasses import dataclass


class MemoryPressureLevel(Enum):
    """Memory pressure levels."""
    NONE = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4

    def __gt__(self, other):
        if not isinstance(other, MemoryPressureLevel):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other):
        if not isinstance(other, MemoryPressureLevel):
            return NotImplemented
        return self.value >= other.value


@dataclass
class MemoryInfo:
    """Memory usage information."""
    total: int
    available: int
    used: int
    percent: float
    pressure_level: MemoryPressureLevel
    timestamp: float

    @property
    def used_gb(self) -> float:
        return self.used / (1024 ** 3)

    @property
    def available_gb(self) -> float:
        return self.available / (1024 ** 3)

    def __str__(self) -> str:
        return (f"Memory: {self.percent:.1f}% used "
                f"({self.used_gb:.2f}/{self.available_gb:.2f} GB), "
                f"Pressure: {self.pressure_level.name}")


def classify_pressure(percent: float) -> MemoryPressureLevel:
    """Map a usage percentage onto a pressure level."""
    if percent >= 95:
        return MemoryPressureLevel.CRITICAL
    elif percent >= 85:
        return MemoryPressureLevel.HIGH
    elif percent >= 70:
        return MemoryPressureLevel.MEDIUM
    elif percent >= 50:
        return MemoryPressureLevel.LOW
    return MemoryPressureLevel.NONE


class MemoryMonitor:
    """Sample system memory on demand and classify the pressure."""

    def __init__(self, memory_limit: Optional[int] = None):
        """
        Initialize memory monitor.

        Args:
            memory_limit: Custom memory limit in bytes (None for configured limit)
        """
        if memory_limit is None:
            from lazyqueries.config import config
            memory_limit = config.memory_limit
        self.memory_limit = memory_limit

    def get_memory_info(self) -> MemoryInfo:
        """Get current memory information."""
        mem = psutil.virtual_memory()

        # Use configured limit if lower than system memory
        total = min(mem.total, self.memory_limit)
        used = mem.used
        available = max(0, total - used)
        percent = (used / total) * 100 if total else 100.0

        return MemoryInfo(
            total=total,
            available=available,
            used=used,
            percent=percent,
            pressure_level=classify_pressure(percent),
            timestamp=time.time()
        )
