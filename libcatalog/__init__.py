"""Library Catalog - Core Application Package

This package contains the core application modules including:
- Data models (book.py)
- Book registry (registry.py)
- Transaction log (transactions.py)
- Library controller (library.py)
- CLI interface (main.py)
"""

__version__ = "1.0.0"
