# mdhelp/__main__.py
# Allow `python -m mdhelp`

from .cli.app import app

if __name__ == "__main__":
    app(prog_name="mdhelp")
