# -*- coding: utf-8 -*-
"""
Account models for the console banking demo.

Every balance and amount in this package is a `Decimal`. The global context
is fixed here once so that all modules share the same precision and
rounding: banker's rounding, 28 significant digits.
"""
from decimal import getcontext, ROUND_HALF_EVEN

getcontext().prec = 28
getcontext().rounding = ROUND_HALF_EVEN
