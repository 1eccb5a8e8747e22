"""
EduLedger: an in-memory education record ledger.

Simulates certificate issuance, scholarship grants and course payments the way
an on-chain contract would record them, for use in tests and demos where the
real ledger is not available.
"""

__version__ = "1.0.0"
__author__ = "EduLedger Development Team"
__description__ = "In-memory mock ledger for certificates, scholarships and course payments"
