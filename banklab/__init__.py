"""Lockable accounts, fee-charging transfers between them, and a greeting."""

__version__ = "1.0.0"
__all__ = ["account", "transaction", "greeting"]