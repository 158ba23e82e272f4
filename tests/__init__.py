"""Test suite for the hierarchy authorization engine.

Test structure follows the test pyramid:
- unit/: Unit tests - Domain and application logic with mocked collaborators
- integration/: Integration tests - Real PyJWT, real container wiring
- api/: API endpoint tests - HTTP endpoints through the FastAPI app

No external services are needed; the role store and event bus are in-memory.
"""
