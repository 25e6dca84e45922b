"""
Entry point for running robofont as a module.
This allows running the CLI using 'python -m robofont'.
"""

from robofont.cli import app

if __name__ == "__main__":
    app()
