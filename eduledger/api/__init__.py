"""
API module for the REST surface.
"""

from .rest_api import EduLedgerRestAPI

__all__ = [
    "EduLedgerRestAPI",
]
