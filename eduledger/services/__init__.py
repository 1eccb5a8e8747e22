"""
Services module containing the ledger.
"""

from .ledger import MockLedger

__all__ = [
    "MockLedger",
]
