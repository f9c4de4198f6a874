# mdhelp/config/__init__.py
# Persisted settings
