# -*- coding: utf-8 -*-
"""
Custom Exception Classes for the Account Domain.

Purpose:
- Give parsing and balance rules their own error types.
- Let the driver and tests tell a bad amount apart from a shortfall, and a
  plain shortfall apart from an exhausted overdraft.
"""


class BankingError(Exception):
    """Base class for every error raised by the accounts package."""


class InvalidAmount(BankingError):
    """
    Raised when text typed at the prompt cannot be read as an amount:
    - Empty line or end of input.
    - Not a number, or not a finite one (NaN, Infinity).
    """
    pass


class InsufficientFunds(BankingError):
    """
    Raised when a withdrawal is larger than the available balance.
    """
    pass


class OverdraftExceeded(InsufficientFunds):
    """
    Raised when a withdrawal is larger than the balance plus the overdraft
    limit. A subclass of InsufficientFunds so generic handlers still catch it.
    """
    pass
