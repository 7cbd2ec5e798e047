"""
Entry point for running popquiz as a module.

Usage:
    python -m popquiz take NAME
    python -m popquiz --help
"""
from .delivery.cli import main

if __name__ == "__main__":
    main()
