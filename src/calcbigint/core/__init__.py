"""
Core domain model and arithmetic algorithms.

This package is independent of any I/O: no console, files, or process state.
"""
