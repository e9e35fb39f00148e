"""
API layer - FastAPI routes and HTTP concerns for PrintFlow.

This layer contains:
- FastAPI route definitions
- Request/Response DTOs
- HTTP middleware

IMPORT RULES:
- CAN import from: application, domain, bootstrap
- Services are reached through dependencies, never constructed in routes
"""

__all__: list[str] = []
