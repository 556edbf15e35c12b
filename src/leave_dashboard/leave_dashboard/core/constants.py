"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""


# date.weekday(): Monday=0 ... Sunday=6
WEEKEND_DAYS = frozenset({5, 6})
WORKING_WEEKDAYS = (0, 1, 2, 3, 4)

# Upstream invoice basis id for "Niet Declarabel" hours.
NON_DECLARABLE_INVOICE_BASIS_ID = 4

DEFAULT_DECLARABILITY_CACHE_SECONDS = 30 * 60
