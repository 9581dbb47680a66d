"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from refresher.api import app

    uvicorn refresher.api:app
"""

from refresher.api.app import app, create_app

__all__ = ["app", "create_app"]
