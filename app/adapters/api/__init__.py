# app/adapters/api/__init__.py
"""
REST API Adapter.

This package acts as the HTTP entry point for Semantik Phrasing.
It is built on FastAPI:
- It depends on `app.core` (Use Cases & Models).
- It does NOT contain business logic.
"""
