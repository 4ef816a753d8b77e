"""Skipfields for tracking skipped and active slots in fixed-size containers."""

__version__ = "0.1.0"

__all__ = ["bitmask", "boolean", "lcjc", "lockless", "seq"]