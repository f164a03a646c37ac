# finutils/cashflow/period.py
# Number of compounding periods per year.

ANNUAL = 1.0
MONTHLY = 12.0
WEEKLY = 52.0
DAILY = 365.0

__all__ = ["ANNUAL", "MONTHLY", "WEEKLY", "DAILY"]
