"""REST API presentation layer for MyHome.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # Error response mapping
    ├── middleware/           # Authentication and authorization filters
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic request/response schemas
"""

from myhome.presentation.api.app import create_app

__all__ = ["create_app"]
