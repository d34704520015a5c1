"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from auditor.api import app

    uvicorn auditor.api:app --reload
"""

from auditor.api.app import app

__all__ = ["app"]
