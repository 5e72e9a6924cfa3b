"""Test suite for the gateway control plane.

Test structure follows the test pyramid:
- unit/: Unit tests - handlers, domain rules and adapters in isolation
- integration/: Integration tests - SQLAlchemy repositories on SQLite
- api/: API endpoint tests - HTTP endpoints end-to-end through the app
"""
