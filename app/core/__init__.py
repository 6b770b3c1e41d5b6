# app/core/__init__.py
