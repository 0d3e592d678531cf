"""
Root application entry point for the storefront catalog API
===========================================================

This module exposes the FastAPI application instance defined in
``app/main.py`` so that deployment tools like Uvicorn can import
``main:app`` without needing to treat the repository as a Python
package.  Application setup and router registration remain
centralized in ``app.main``.

Usage
-----

.. code-block:: bash

    APP_STORE_URL=https://<project>.supabase.co APP_STORE_API_KEY=<anon key> \
        uvicorn main:app --host 0.0.0.0 --port 8000
"""

from app.main import app  # noqa: F401 re-export for Uvicorn

__all__ = ["app"]
