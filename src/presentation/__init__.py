"""Presentation layer - HTTP endpoints and UI-facing guards.

Structure:
- routers/: FastAPI routers (system endpoints, api/v1 claims and admin)
- routers/api/middleware/: Claims authentication and route guard dependencies
- ui/: Render guard for client-side control visibility

The presentation layer dispatches to the application layer and translates
results into HTTP responses. It contains no authorization rules of its own.
"""
