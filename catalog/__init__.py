"""Book Catalog - Core Application Package

This package contains the core application modules including:
- Data model (book.py)
- ISBN and field validation (validators.py)
- Error kinds and operation results (errors.py)
- In-memory storage (repository.py)
- Validation layer in front of storage (service.py)
- Interactive menu and CLI (cli.py, prompts.py, ui_helpers.py)
"""
