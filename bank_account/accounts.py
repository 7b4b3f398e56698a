"""
Account Service Module

Business rules for bank account operations: validates deposits and
withdrawals, stamps them with the injected date provider, records them
in the ledger and establishes account statements.
"""

from decimal import Decimal, InvalidOperation
from typing import Any

from .operations import Operation
from .ledger import AccountLedger
from .dates import DateProvider
from .statements import AccountStatement
from .logging_config import get_logger, log_action


class AccountService:
    """
    Bank accounts management service
    """
    
    def __init__(self, ledger: AccountLedger, date_provider: DateProvider):
        self.ledger = ledger
        self.date_provider = date_provider
        self.logger = get_logger("bank_account.accounts")
    
    def deposit_money(self, account_number: str, amount: Decimal) -> None:
        """
        Deposit money on an account
        
        Args:
            account_number: Account to credit
            amount: Strictly positive amount to deposit
            
        Raises:
            ValueError: If the account number is missing or the amount is not positive
        """
        self._validate_account_number(account_number)
        amount = self._validate_amount(amount, "deposit")
        
        operation = Operation.deposit(account_number, amount, self.date_provider.get_date())
        self.ledger.create(operation)
        
        log_action(
            self.logger, "info", f"Deposit of {amount} recorded",
            action="deposit", resource=account_number,
            extra={"amount": str(amount), "operation_date": operation.operation_date.isoformat()}
        )
    
    def withdraw_money(self, account_number: str, amount: Decimal) -> bool:
        """
        Withdraw money from an account
        
        The withdrawal is always recorded, even when it overdraws the account.
        
        Args:
            account_number: Account to debit
            amount: Strictly positive amount to withdraw
            
        Returns:
            True if the balance after the withdrawal is positive or zero
            
        Raises:
            ValueError: If the account number is missing or the amount is not positive
        """
        self._validate_account_number(account_number)
        amount = self._validate_amount(amount, "withdrawal")
        
        operation = Operation.withdrawal(account_number, amount, self.date_provider.get_date())
        self.ledger.create(operation)
        balance = self.ledger.calculate_balance(account_number)
        
        log_action(
            self.logger, "info", f"Withdrawal of {amount} recorded",
            action="withdrawal", resource=account_number,
            extra={"amount": str(amount), "operation_date": operation.operation_date.isoformat()}
        )
        
        if balance < Decimal('0'):
            log_action(
                self.logger, "warning", f"Account overdrawn, balance is {balance}",
                action="withdrawal", resource=account_number,
                extra={"balance": str(balance)}
            )
            return False
        return True
    
    def establish_account_statement(self, account_number: str) -> AccountStatement:
        """
        Establish the statement of an account
        
        Unknown accounts get an empty statement with a zero balance.
        """
        operations = self.ledger.list(account_number)
        balance = self.ledger.calculate_balance(account_number)
        return AccountStatement(operations=operations, balance=balance)
    
    def _validate_account_number(self, account_number: str) -> None:
        if not account_number:
            raise ValueError("The account number should be specified")
    
    def _validate_amount(self, amount: Any, operation_name: str) -> Decimal:
        """Convert the amount to Decimal and check it is strictly positive"""
        message = f"The amount for the {operation_name} must be positive"
        if amount is None:
            raise ValueError(message)
        
        if not isinstance(amount, Decimal):
            try:
                amount = Decimal(str(amount))
            except InvalidOperation:
                raise ValueError(message) from None
        
        if not amount.is_finite() or amount <= Decimal('0'):
            raise ValueError(message)
        return amount
