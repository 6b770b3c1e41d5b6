# tests\__init__.py
"""
Test Suite for Semantik Phrasing

Organization:
- Domain and table tests (Being, Gender, pronoun rows).
- Engine tests (token grammar, substitution, capitalization).
- Adapter tests (use case, HTTP API, CLI).
"""
