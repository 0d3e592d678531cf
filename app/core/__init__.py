"""
Core helpers package for the storefront catalog.

This package contains low-level infrastructure helpers: typed settings,
store authentication headers and the exception taxonomy.  Keeping these
helpers in a dedicated package makes it easy to swap implementations or
customise behaviour for testing.
"""

__all__ = []
