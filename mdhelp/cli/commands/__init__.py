# mdhelp/cli/commands/__init__.py
# Subcommands registered on the root app (imported by cli/app.py)
