"""
Top-level package for the Rental Registry API.

All functionality lives in submodules under ``app``.
"""

__all__ = []
