# -*- coding: utf-8 -*-
"""
Console Bank Accounts Demo

Purpose:
- Opens three accounts (savings, checking, overdraft protection) with fixed
  opening balances.
- Prints their details, then runs one transaction per account, reading each
  amount from standard input.
- Prints the updated details, unless the overdraft account's limit was
  exceeded, which stops the run.

Outputs:
- Human-readable lines on stdout; log records on stderr.
"""


from __future__ import annotations

from typing import List

from accounts.bank_account import open_account
from accounts.logging import get_logger, setup_logging
from accounts.transaction import ReadLine, Transaction, TransactionResult
import accounts.config as cfg

logger = get_logger("accounts.main")


def build_accounts() -> List[Transaction]:
    return [open_account(*seed) for seed in cfg.SEED_ACCOUNTS]


def display_accounts(accounts: List[Transaction], *, headings: bool = True) -> None:
    for acc in accounts:
        if headings:
            print(f"{acc.kind.heading}:")
        print(acc.display_info())
        if headings:
            print("")


def run_transactions(accounts: List[Transaction], read_line: ReadLine = input) -> List[TransactionResult]:
    """
    Run one transaction per account, in order.

    Stops after the first result that halts the run; that result is the last
    element of the returned list.
    """
    results: List[TransactionResult] = []
    for acc in accounts:
        result = acc.process_transaction(read_line)
        results.append(result)
        if result.halts_run:
            logger.info("Run halted at %s: %s", result.account_number, result.status.value)
            break
        print(result.message)
    return results


def main(read_line: ReadLine = input) -> int:
    setup_logging(cfg.LOG_LEVEL, cfg.LOG_FORMAT)
    accounts = build_accounts()

    display_accounts(accounts)

    try:
        results = run_transactions(accounts, read_line)
        if results and results[-1].halts_run:
            print(f"Insufficient balance: {results[-1].message}")
        else:
            print("\nUpdated Account Information:")
            display_accounts(accounts, headings=False)
    except KeyboardInterrupt:
        print("\nGoodbye.")
    except Exception as e:
        logger.exception("Transaction run failed")
        print(f"An error occurred: {e}")
    return 0


if __name__ == "__main__":
    main()
