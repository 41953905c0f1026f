"""
Entry point for python -m vermouth

Allows running the package as a module:
    python -m vermouth --format=v{version}
"""

from .cli import main

if __name__ == '__main__':
    main()
