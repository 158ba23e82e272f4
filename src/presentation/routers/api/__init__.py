"""Versioned API routers and request dependencies."""
