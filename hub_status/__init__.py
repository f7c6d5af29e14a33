"""
Hub Status API for a distributed test-execution grid

This package provides a read-only REST endpoint that reports the hub's
configuration, its registered nodes and per-browser slot utilization.

It never mutates registry state; every endpoint is GET-only.
"""
__version__ = "1.0.0"
