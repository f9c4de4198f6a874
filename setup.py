from setuptools import setup, find_packages

setup(
    name="mdhelp",
    version="0.1.0",
    description="Render command-line help as styled, width-adaptive markdown in the terminal",
    packages=find_packages(include=["mdhelp", "mdhelp.*"]),
    install_requires=[
        "rich",
        "typer",
        "click<8.5",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "mdhelp=mdhelp.cli.app:app",
        ],
    },
    python_requires=">=3.10",
)
