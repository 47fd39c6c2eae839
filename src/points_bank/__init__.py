"""
Points Bank: member points transfers with an append-only ledger.
"""

__version__ = "1.0.0"
