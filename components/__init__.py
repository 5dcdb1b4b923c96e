# components/__init__.py
# Makes the components directory a Python package.
