"""Break-even finder — where an alternative's cumulative cost meets the baseline's.

Scan the two cumulative curves year by year (index 0 = year 1):

  index 0:   alternative ≤ baseline  →  year 0, month 0 (cheaper from day one)
  index i:   alternative > baseline at i−1 and ≤ baseline at i
             →  crossover during year i

The month is a linear interpolation assuming uniform accrual within the year:

  gap   = alt_cum[i−1] − base_cum[i−1]
  rates = (base_cum[i] − base_cum[i−1]) − (alt_cum[i] − alt_cum[i−1])
  month = round(gap / rates × 12)

If ``rates`` is not positive the year is recorded but the month stays None.

A tie at year 1 counts as immediate break-even ("no greater than"), so the
scan never misses a curve that starts at or below the baseline.
"""

from __future__ import annotations

from truck_tco.engine.energy import round_half_up
from truck_tco.models.results import BreakEvenAnalysis, TruckAnalysis


def find_break_even(
    baseline: TruckAnalysis,
    alternative: TruckAnalysis,
    horizon_years: int,
) -> BreakEvenAnalysis:
    """Locate the first crossover of ``alternative`` below ``baseline``.

    Both analyses must cover the same ``horizon_years``.
    """
    base = [y.cumulative_cost for y in baseline.yearly_breakdown[:horizon_years]]
    alt = [y.cumulative_cost for y in alternative.yearly_breakdown[:horizon_years]]

    break_even_year: int | None = None
    break_even_month: int | None = None

    for i in range(min(len(base), len(alt))):
        if i == 0:
            if alt[0] <= base[0]:
                break_even_year = 0
                break_even_month = 0
                break
            continue

        if alt[i - 1] > base[i - 1] and alt[i] <= base[i]:
            gap = alt[i - 1] - base[i - 1]
            rate_diff = (base[i] - base[i - 1]) - (alt[i] - alt[i - 1])
            break_even_year = i
            if rate_diff > 0:
                break_even_month = round_half_up(gap / rate_diff * 12)
            break

    return BreakEvenAnalysis(
        truck1_name=baseline.name,
        truck2_name=alternative.name,
        break_even_year=break_even_year,
        break_even_month=break_even_month,
        total_savings=baseline.total_cost_of_ownership - alternative.total_cost_of_ownership,
    )
