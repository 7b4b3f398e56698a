"""
Operation Module

Immutable records of the monetary operations performed on a bank account.
Amounts are always Decimal, NEVER float.
"""

from decimal import Decimal
from datetime import datetime, timezone
from dataclasses import dataclass
from typing import Any, Dict, Optional
from enum import Enum


class OperationType(Enum):
    """Kinds of account operations, with their statement label"""
    DEPOSIT = ("deposit", "Deposit")
    WITHDRAWAL = ("withdrawal", "Withdrawal")

    def __init__(self, code: str, label: str):
        self.code = code
        self.label = label


def _to_decimal(value: Any) -> Decimal:
    if value is None:
        return Decimal('0')
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class Operation:
    """
    Single entry of an account ledger

    By convention exactly one of debit or credit is non-zero; the
    ``deposit`` and ``withdrawal`` constructors guarantee it.
    """
    account_number: Optional[str]
    operation_type: Optional[OperationType]
    operation_date: Optional[datetime]
    debit: Decimal = Decimal('0')
    credit: Decimal = Decimal('0')

    def __post_init__(self):
        object.__setattr__(self, 'debit', _to_decimal(self.debit))
        object.__setattr__(self, 'credit', _to_decimal(self.credit))

        # Naive datetimes are UTC instants
        if self.operation_date is not None and self.operation_date.tzinfo is None:
            object.__setattr__(self, 'operation_date', self.operation_date.replace(tzinfo=timezone.utc))

    @classmethod
    def deposit(cls, account_number: str, amount: Decimal, operation_date: datetime) -> 'Operation':
        """Build a deposit: the amount is credited to the account"""
        return cls(
            account_number=account_number,
            operation_type=OperationType.DEPOSIT,
            operation_date=operation_date,
            debit=Decimal('0'),
            credit=amount
        )

    @classmethod
    def withdrawal(cls, account_number: str, amount: Decimal, operation_date: datetime) -> 'Operation':
        """Build a withdrawal: the amount is debited from the account"""
        return cls(
            account_number=account_number,
            operation_type=OperationType.WITHDRAWAL,
            operation_date=operation_date,
            debit=amount,
            credit=Decimal('0')
        )

    @property
    def net_amount(self) -> Decimal:
        """Effect of this operation on the balance (credit - debit)"""
        return self.credit - self.debit

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a serializable dictionary"""
        return {
            'account_number': self.account_number,
            'operation_type': self.operation_type.code if self.operation_type else None,
            'operation_date': self.operation_date.isoformat() if self.operation_date else None,
            'debit': str(self.debit),
            'credit': str(self.credit),
        }
