"""
Central Configuration File (SSOT).
"""

# --- Business Rules ---
CURRENCY = "USD"
CURRENCY_SYMBOLS = {
    "GBP": "£",
    "TRY": "₺",
    "USD": "$",
    "EUR": "€",
}
MONEY_QUANTUM = "0.01"  # display rounding only
MAX_AMOUNT = "79228162514264337593543950335"  # largest amount a balance may hold

# --- Seed Accounts ---
# (kind, account_number, opening_balance, extra) where extra is the
# interest rate in percent for savings and the overdraft limit for overdraft.
SEED_ACCOUNTS = (
    ("savings", "SA123", "1000", "5"),
    ("checking", "CA456", "500", None),
    ("overdraft", "OA789", "200", "300"),
)

# --- Logging ---
LOG_LEVEL: str = "WARNING"  # stdout is the dialogue; logs go to stderr
LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
