"""
Account Statement Module

Point-in-time view of an account: its operations and balance, with a
fixed-width textual rendering.
"""

from decimal import Decimal
from datetime import tzinfo
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from .operations import Operation
from .config import get_config


HEADER = "Operation  | Date           | Credit | Debit"
COLUMN_SEPARATOR = " | "


def _plain(value: Decimal) -> str:
    """Decimal in plain notation, never scientific"""
    return format(value, 'f')


@dataclass(frozen=True)
class AccountStatement:
    """
    Operations on an account together with its balance
    """
    operations: Sequence[Operation]
    balance: Decimal
    
    def __post_init__(self):
        object.__setattr__(self, 'operations', tuple(self.operations))
    
    def render(
        self,
        utc_offset: Optional[tzinfo] = None,
        date_format: Optional[str] = None,
        line_separator: Optional[str] = None
    ) -> str:
        """
        Render the statement as text
        
        Operations are printed in the order held by the statement. Unset
        arguments fall back to the statement settings of the configuration.
        
        Args:
            utc_offset: Timezone in which operation dates are displayed
            date_format: strftime pattern of operation dates
            line_separator: Line terminator
            
        Returns:
            Printed statement
        """
        settings = get_config()
        if utc_offset is None:
            utc_offset = settings.statement_timezone
        if date_format is None:
            date_format = settings.statement_date_format
        if line_separator is None:
            line_separator = settings.statement_line_separator
        
        lines = [HEADER]
        for operation in self.operations:
            lines.append(COLUMN_SEPARATOR.join([
                f"{operation.operation_type.label:<10}",
                operation.operation_date.astimezone(utc_offset).strftime(date_format),
                f"{_plain(operation.credit):>6}",
                f"{_plain(operation.debit):>6}",
            ]))
        lines.append("")
        lines.append("Balance")
        lines.append(_plain(self.balance))
        
        return line_separator.join(lines) + line_separator
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to a serializable dictionary"""
        return {
            'operations': [operation.to_dict() for operation in self.operations],
            'balance': str(self.balance),
        }
