# -*- coding: utf-8 -*-
from __future__ import annotations
"""
Transaction outcome types shared by every account kind.

- AccountKind tags the three account variants.
- TransactionResult reports what one `process_transaction` call did, including
  the overdraft-exceeded case, which is returned as a value and left to the
  caller to act on.
- Transaction is the capability every account class implements.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Callable, Optional, Protocol

from .errors import InsufficientFunds, InvalidAmount, OverdraftExceeded

ReadLine = Callable[[str], str]


class AccountKind(str, Enum):
    SAVINGS = "savings"
    CHECKING = "checking"
    OVERDRAFT = "overdraft"

    @property
    def heading(self) -> str:
        return _HEADINGS[self]


_HEADINGS = {
    AccountKind.SAVINGS: "Savings Account",
    AccountKind.CHECKING: "Checking Account",
    AccountKind.OVERDRAFT: "Overdraft Protection Account",
}


class TransactionStatus(str, Enum):
    DEPOSITED = "deposited"
    WITHDRAWN = "withdrawn"
    WITHDRAWN_WITH_OVERDRAFT = "withdrawn_with_overdraft"
    INVALID_AMOUNT = "invalid_amount"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    OVERDRAFT_EXCEEDED = "overdraft_exceeded"


_APPLIED = {
    TransactionStatus.DEPOSITED,
    TransactionStatus.WITHDRAWN,
    TransactionStatus.WITHDRAWN_WITH_OVERDRAFT,
}


@dataclass(frozen=True)
class TransactionResult:
    """Outcome of a single deposit or withdrawal."""

    account_number: str
    status: TransactionStatus
    amount: Optional[Decimal]  # None when the input did not parse
    balance: Decimal  # balance after the call
    message: str

    @property
    def succeeded(self) -> bool:
        """True when the balance was changed."""
        return self.status in _APPLIED

    @property
    def halts_run(self) -> bool:
        """True when the remaining transactions of the run must not execute."""
        return self.status is TransactionStatus.OVERDRAFT_EXCEEDED

    def raise_for_status(self) -> None:
        """Raise the matching domain error for a failed transaction."""
        if self.status is TransactionStatus.OVERDRAFT_EXCEEDED:
            raise OverdraftExceeded(self.message)
        if self.status is TransactionStatus.INSUFFICIENT_FUNDS:
            raise InsufficientFunds(self.message)
        if self.status is TransactionStatus.INVALID_AMOUNT:
            raise InvalidAmount(self.message)


class Transaction(Protocol):
    kind: AccountKind

    @property
    def account_number(self) -> str: ...

    def get_balance(self) -> Decimal: ...

    def display_info(self) -> str: ...

    def process_transaction(self, read_line: ReadLine = input) -> TransactionResult: ...
