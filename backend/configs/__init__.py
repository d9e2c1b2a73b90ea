"""
MemoryVault configuration.

Settings is the aggregate of the per-concern classes (database, vector
store, document bucket, models, auth, ingestion), each mapped from its own
environment prefix. get_settings returns the process-wide cached instance.
"""

from backend.configs.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
