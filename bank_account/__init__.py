"""
Bank Account Ledger

An in-memory bank account ledger recording deposits and withdrawals,
computing balances with Decimal precision and rendering account statements.
"""

__version__ = "1.0.0"
