# -*- coding: utf-8 -*-
from __future__ import annotations
"""
Bank Accounts - Savings, Checking, Overdraft Protection

- Three independent classes; each one owns exactly one `process_transaction`.
- A transaction reads one amount from `read_line`, applies the kind's rule and
  returns a TransactionResult. Shortfalls are reported as results, never raised.
- Amounts are exact Decimals; parsing, range checks and formatting live in money.py.
"""

from decimal import Decimal

from .errors import InvalidAmount
from .logging import get_logger
from .money import MONEY_CONTEXT, check_range, fmt_money, fmt_rate, money_add, money_sub, parse_amount
from .transaction import AccountKind, ReadLine, TransactionResult, TransactionStatus

logger = get_logger(__name__)

DEPOSIT_PROMPT = "Enter deposit amount: "
WITHDRAWAL_PROMPT = "Enter withdrawal amount: "


def _read_amount(read_line: ReadLine, prompt: str) -> Decimal:
    try:
        text = read_line(prompt)
    except EOFError:
        raise InvalidAmount("No amount entered") from None
    return parse_amount(text)


def _info_lines(account_number: str, balance: Decimal) -> list[str]:
    return [
        f"Account Number: {account_number}",
        f"Balance: {fmt_money(balance)}",
    ]


class SavingsAccount:
    kind = AccountKind.SAVINGS

    def __init__(self, account_number: str, balance: Decimal, interest_rate: Decimal):
        self._account_number = account_number
        self._balance = check_range(Decimal(str(balance)))
        self._interest_rate = Decimal(str(interest_rate))

    def __repr__(self) -> str:
        return f"SavingsAccount({self._account_number}, balance={self._balance}, rate={self._interest_rate})"

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def interest_rate(self) -> Decimal:
        return self._interest_rate

    def get_balance(self) -> Decimal:
        return self._balance

    def display_info(self) -> str:
        lines = _info_lines(self._account_number, self._balance)
        lines.append(f"Interest Rate: {fmt_rate(self._interest_rate)}")
        return "\n".join(lines)

    def process_transaction(self, read_line: ReadLine = input) -> TransactionResult:
        """Deposit whatever amount is entered."""
        try:
            amt = _read_amount(read_line, DEPOSIT_PROMPT)
            new_balance = money_add(self._balance, amt)
        except InvalidAmount as e:
            logger.debug("%s: rejected input (%s)", self._account_number, e)
            return _invalid(self._account_number, self._balance)

        self._balance = new_balance
        logger.debug("%s: deposited %s, balance=%s", self._account_number, amt, self._balance)
        return TransactionResult(
            self._account_number, TransactionStatus.DEPOSITED, amt, self._balance,
            f"Deposited {fmt_money(amt)}",
        )


class CheckingAccount:
    kind = AccountKind.CHECKING

    def __init__(self, account_number: str, balance: Decimal):
        self._account_number = account_number
        self._balance = check_range(Decimal(str(balance)))

    def __repr__(self) -> str:
        return f"CheckingAccount({self._account_number}, balance={self._balance})"

    @property
    def account_number(self) -> str:
        return self._account_number

    def get_balance(self) -> Decimal:
        return self._balance

    def display_info(self) -> str:
        return "\n".join(_info_lines(self._account_number, self._balance))

    def process_transaction(self, read_line: ReadLine = input) -> TransactionResult:
        """Withdraw the entered amount if the balance covers it."""
        try:
            amt = _read_amount(read_line, WITHDRAWAL_PROMPT)
        except InvalidAmount as e:
            logger.debug("%s: rejected input (%s)", self._account_number, e)
            return _invalid(self._account_number, self._balance)

        if amt > self._balance:
            logger.info("%s: insufficient funds for %s (balance=%s)", self._account_number, amt, self._balance)
            return TransactionResult(
                self._account_number, TransactionStatus.INSUFFICIENT_FUNDS, amt, self._balance,
                "Insufficient balance.",
            )

        try:
            self._balance = money_sub(self._balance, amt)
        except InvalidAmount as e:
            logger.debug("%s: rejected amount (%s)", self._account_number, e)
            return _invalid(self._account_number, self._balance)
        logger.debug("%s: withdrew %s, balance=%s", self._account_number, amt, self._balance)
        return TransactionResult(
            self._account_number, TransactionStatus.WITHDRAWN, amt, self._balance,
            f"Withdrew {fmt_money(amt)}",
        )


class OverdraftProtectionAccount:
    """
    Checking account that may go negative down to -overdraft_limit.

    A withdrawal beyond balance + overdraft_limit yields OVERDRAFT_EXCEEDED,
    which callers treat as fatal to the rest of the run.
    """

    kind = AccountKind.OVERDRAFT

    def __init__(self, account_number: str, balance: Decimal, overdraft_limit: Decimal):
        self._account_number = account_number
        self._balance = check_range(Decimal(str(balance)))
        self._overdraft_limit = Decimal(str(overdraft_limit))

    def __repr__(self) -> str:
        return (f"OverdraftProtectionAccount({self._account_number}, balance={self._balance}, "
                f"limit={self._overdraft_limit})")

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def overdraft_limit(self) -> Decimal:
        return self._overdraft_limit

    def get_balance(self) -> Decimal:
        return self._balance

    def available(self) -> Decimal:
        """Balance plus the unused part of the overdraft."""
        return MONEY_CONTEXT.add(self._balance, self._overdraft_limit)

    def display_info(self) -> str:
        lines = _info_lines(self._account_number, self._balance)
        lines.append(f"Overdraft Limit: {fmt_money(self._overdraft_limit)}")
        return "\n".join(lines)

    def process_transaction(self, read_line: ReadLine = input) -> TransactionResult:
        try:
            amt = _read_amount(read_line, WITHDRAWAL_PROMPT)
        except InvalidAmount as e:
            logger.debug("%s: rejected input (%s)", self._account_number, e)
            return _invalid(self._account_number, self._balance)

        if amt > self.available():
            logger.warning("%s: overdraft limit exceeded by %s (available=%s)",
                           self._account_number, amt, self.available())
            return TransactionResult(
                self._account_number, TransactionStatus.OVERDRAFT_EXCEEDED, amt, self._balance,
                "Exceeds available balance including overdraft.",
            )

        if amt > self._balance:
            status = TransactionStatus.WITHDRAWN_WITH_OVERDRAFT
            message = f"Withdrew {fmt_money(amt)} with overdraft protection"
        else:
            status = TransactionStatus.WITHDRAWN
            message = f"Withdrew {fmt_money(amt)}"
        try:
            self._balance = money_sub(self._balance, amt)
        except InvalidAmount as e:
            logger.debug("%s: rejected amount (%s)", self._account_number, e)
            return _invalid(self._account_number, self._balance)
        logger.debug("%s: %s %s, balance=%s", self._account_number, status.value, amt, self._balance)
        return TransactionResult(self._account_number, status, amt, self._balance, message)


def _invalid(account_number: str, balance: Decimal) -> TransactionResult:
    return TransactionResult(
        account_number, TransactionStatus.INVALID_AMOUNT, None, balance, "Invalid amount.",
    )


def open_account(kind, account_number: str, balance, extra=None):
    """Build an account of the given kind; `extra` is the rate or the overdraft limit."""
    kind = AccountKind(kind)
    if kind is AccountKind.SAVINGS:
        return SavingsAccount(account_number, Decimal(str(balance)), Decimal(str(extra or "0")))
    if kind is AccountKind.CHECKING:
        return CheckingAccount(account_number, Decimal(str(balance)))
    return OverdraftProtectionAccount(account_number, Decimal(str(balance)), Decimal(str(extra or "0")))
