"""
Track Management Tools Package

This package provides reusable tools for seeding tracks and generating their
sessions from the command line.

Core modules:
- track_manager: Core library for seed, generate and coverage operations
- track_cli: Command-line interface for track management
"""

__version__ = "1.0.0"
