"""
Top-level package for the Address Book API.

All functionality lives in submodules under ``app``, importable with
fully qualified names like ``address_book_api.app.main``.
"""

__all__ = []
