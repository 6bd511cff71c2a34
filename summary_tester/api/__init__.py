"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from summary_tester.api import app

    uvicorn summary_tester.api:app --reload
"""

from summary_tester.api.app import app

__all__ = ["app"]
