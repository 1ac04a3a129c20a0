# exported_headers/main.py
"""Main entry point for the exported-headers CLI application."""

from exported_headers.cli.interface import main_cli


def entrypoint():
    """Function to be called by the script defined in pyproject.toml."""
    main_cli(prog_name="exported-headers")

if __name__ == '__main__':
    entrypoint()
