"""
Resource system exports.
"""

from popshot.systems.resources.resource_ledger import ResourceLedger

__all__ = [
    'ResourceLedger',
]
