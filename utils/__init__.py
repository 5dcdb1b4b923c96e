# utils/__init__.py
# Makes the utils directory a Python package.
