"""
Account Ledger Module

In-memory storage of account operations keyed by account number.
Balances are derived from operations, never stored separately.
"""

from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple
import threading

from .operations import Operation
from .logging_config import get_logger


class AccountLedger:
    """
    Operations of every bank account, grouped by account number

    A single re-entrant lock guards the whole mapping so that a balance
    read always reflects every operation created before it.
    """
    
    def __init__(self, accounts: Optional[Dict[str, Iterable[Operation]]] = None):
        self._accounts: Dict[str, List[Operation]] = {}
        self._lock = threading.RLock()
        self.logger = get_logger("bank_account.ledger")
        
        for account_number, operations in (accounts or {}).items():
            bucket = list(operations)
            for operation in bucket:
                if operation.account_number != account_number:
                    raise ValueError(
                        f"Operation for account {operation.account_number} "
                        f"cannot be stored under account {account_number}"
                    )
            self._accounts[account_number] = bucket
    
    def list(self, account_number: Optional[str]) -> Tuple[Operation, ...]:
        """
        List the operations of an account, most recent first
        
        Args:
            account_number: Account to list operations for
            
        Returns:
            Read-only sequence of operations, empty for unknown accounts
        """
        if not account_number:
            return ()
        
        with self._lock:
            operations = list(self._accounts.get(account_number, ()))
        
        # sorted() is stable, ties keep their insertion order
        return tuple(sorted(operations, key=lambda op: op.operation_date, reverse=True))
    
    def create(self, operation: Optional[Operation]) -> None:
        """
        Record an operation on its account
        
        Operations without an account number or a date are ignored;
        validation belongs to the account service.
        """
        if operation is None or not operation.account_number:
            self.logger.debug("Ignoring operation without account number")
            return
        
        if operation.operation_date is None:
            self.logger.debug(f"Ignoring operation without date on account {operation.account_number}")
            return
        
        with self._lock:
            self._accounts.setdefault(operation.account_number, []).append(operation)
    
    def calculate_balance(self, account_number: Optional[str]) -> Decimal:
        """
        Calculate the balance of an account (credits - debits)
        
        Unknown accounts have a zero balance.
        """
        balance = Decimal('0')
        for operation in self.list(account_number):
            balance = balance + operation.credit
            balance = balance - operation.debit
        return balance
    
    def account_numbers(self) -> Tuple[str, ...]:
        """Account numbers holding at least one operation"""
        with self._lock:
            return tuple(sorted(number for number, ops in self._accounts.items() if ops))
