# morphology/__init__.py
