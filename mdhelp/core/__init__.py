# mdhelp/core/__init__.py
# Pure core: data model, exceptions & output registry (no I/O)
