"""
Top‑level package for the Doctor Record Service.

This file makes ``doctors_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``doctors_api.app.main``.  The HTTP client for the service lives in
``doctors_api.client``.
"""

__all__ = []
