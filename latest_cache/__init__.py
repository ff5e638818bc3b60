"""Iterable adaptor that computes each element once and caches the latest one."""

__version__ = "1.0.0"
__all__ = ["view"]