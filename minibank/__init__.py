"""A small bank ledger of people and accounts kept in SQLite, with a command shell."""

__version__ = "0.1.0"
__all__ = ["models", "storage", "shell"]