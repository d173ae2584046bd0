"""
Top‑level package for the Dining Review API.

This file makes ``dining_review_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``dining_review_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
