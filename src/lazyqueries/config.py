"""
Configuration management for LazyQueries pipelines.
"""

from typing import Optional
from dataclasses import dataclass, field
import psutil

from lazyqueries.memory.monitor import MemoryPressureLevel


@dataclass
class LazyQueriesConfig:
    """Global configuration for sequence pipelines."""

    # Memory limits
    memory_limit: int = field(default_factory=lambda: int(psutil.virtual_memory().total * 0.8))

    # Distinct seen-set supervision
    distinct_check_interval: int = 10_000  # new entries between memory checks
    distinct_warn_level: MemoryPressureLevel = MemoryPressureLevel.HIGH

    # Diagnostics
    log_pipeline_events: bool = False

    _instance: Optional['LazyQueriesConfig'] = None

    @classmethod
    def get_instance(cls) -> 'LazyQueriesConfig':
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def set_defaults(cls, **kwargs) -> None:
        """Set default configuration values."""
        instance = cls.get_instance()
        for key, value in kwargs.items():
            if hasattr(instance, key):
                setattr(instance, key, value)

    def format_bytes(self, bytes: int) -> str:
        """Format bytes as human-readable string."""
        for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
            if bytes < 1024.0:
                return f"{bytes:.2f} {unit}"
            bytes /= 1024.0
        return f"{bytes:.2f} PB"


# Global configuration instance
config = LazyQueriesConfig.get_instance()
