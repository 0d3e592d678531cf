"""
Route aggregation package for the storefront catalog.

Each module defines an ``APIRouter`` instance that groups related
endpoints together.  The main application imports these routers and
includes them in the global FastAPI instance.  When adding a new
endpoint, prefer placing it in the appropriate module or creating a
new one under ``app/routes``.
"""

__all__ = [
    "catalog",
]

# Import submodules so their routers can be registered by main.py
from . import catalog  # noqa: E402,F401
