"""
Top‑level package for the htmx todo demo.

This file makes ``htmx_todo`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``htmx_todo.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
