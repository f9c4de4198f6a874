# mdhelp/ui/__init__.py
# UI package - markdown rendering, help printer & style catalog
