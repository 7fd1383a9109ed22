"""Application configuration module.

This module organizes configuration into specialized files:

- **settings.py**: Environment-based settings (Pydantic BaseSettings)
  - Database URL, generator seed, logging format
  - Loaded from .env file via pydantic-settings

- **programming.py**: Programming constants used by the generator
  - Movement pools, olympic lifts, metcon styles and combinations
  - Benchmark workouts, rep schemes, intensity-to-percent table
"""
from app.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
