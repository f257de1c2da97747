"""carve-log: workout and nutrition log with durable local storage."""

__version__ = "0.1.0"
