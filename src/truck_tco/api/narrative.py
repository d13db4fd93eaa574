"""Narrative generator — plain-English interpretation of a comparison.

Turns a ``ComparisonResult`` into sectioned text for reports and for
clients that prefer prose over raw numbers.
"""

from __future__ import annotations

from typing import Any

from truck_tco.models.results import BreakEvenAnalysis, ComparisonResult, TruckAnalysis


def describe_break_even(be: BreakEvenAnalysis, horizon_years: int) -> str:
    """One-line description of a break-even record.

    A missing month is never shown as zero: the crossover year is known
    but the timing within it is not.
    """
    if be.break_even_year is None:
        return f"no break-even within {horizon_years} years"
    if be.break_even_year == 0:
        return "cheaper from year 1"
    year = be.break_even_year + 1
    if be.break_even_month is None:
        return f"breaks even in year {year} (timing unknown within that year)"
    return f"breaks even in year {year}, around month {be.break_even_month}"


def _category_lines(a: TruckAnalysis, fleet_size: int = 1) -> list[str]:
    categories = [
        ("Purchase (after incentive)", a.total_purchase_cost),
        ("Fuel / energy", a.total_fuel_cost),
        ("Maintenance", a.total_maintenance_cost),
        ("Insurance", a.total_insurance_cost),
        ("Depreciation", a.depreciation),
        ("Charging infrastructure", a.total_infrastructure_cost),
        ("Downtime risk", a.total_downtime_cost),
    ]
    total = a.total_cost_of_ownership
    lines = []
    for name, val in categories:
        pct = (val / total * 100) if total > 0 else 0
        lines.append(f"  {name:30s}  €{val * fleet_size:12,.0f}  ({pct:5.1f}%)")
    return lines


def headline_metrics(result: ComparisonResult, fleet_size: int = 1) -> dict[str, Any]:
    """Key figures for the best electric option, scaled to ``fleet_size`` trucks.

    Break-even timing is per truck and does not change with fleet size.
    """
    best_be = result.best_break_even
    return {
        "fleet_size": fleet_size,
        "best_electric_name": result.best_electric_analysis.name,
        "max_savings": round(result.max_savings * fleet_size, 2),
        "break_even_year": best_be.break_even_year,
        "break_even_month": best_be.break_even_month,
        "break_even": describe_break_even(best_be, result.timeframe_years),
        "co2_saved_kg": round(result.environmental_comparison.best_electric_co2_saved * fleet_size, 1),
    }


def generate_narrative(result: ComparisonResult, fleet_size: int = 1) -> str:
    """Generate a plain-English narrative from a comparison result.

    Money, fuel and CO₂ totals are multiplied by ``fleet_size``; shares and
    break-even timing are per truck.

    Sections:
      1. Total cost of ownership per truck
      2. Break-even per electric alternative
      3. Verdict
      4. Environmental impact
    """
    horizon = result.timeframe_years
    best = result.best_electric_analysis
    n = fleet_size
    sections: list[str] = []

    # ── 1. TCO per truck ──
    sections.append("=" * 60)
    if n > 1:
        sections.append(f"TOTAL COST OF OWNERSHIP ({horizon} YEARS, FLEET OF {n})")
    else:
        sections.append(f"TOTAL COST OF OWNERSHIP ({horizon} YEARS)")
    sections.append("=" * 60)
    for a in result.analyses():
        sections.append(f"{a.name} ({a.type}): €{a.total_cost_of_ownership * n:,.0f}")
        sections.extend(_category_lines(a, n))

    # ── 2. Break-even ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("BREAK-EVEN VS. DIESEL")
    sections.append("=" * 60)
    for be in (result.diesel_vs_electric1, result.diesel_vs_electric2):
        sign = "saves" if be.total_savings >= 0 else "costs an extra"
        sections.append(
            f"{be.truck2_name}: {describe_break_even(be, horizon)}; "
            f"{sign} €{abs(be.total_savings * n):,.0f} over the horizon"
        )

    # ── 3. Verdict ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("VERDICT")
    sections.append("=" * 60)
    if result.max_savings > 0:
        sections.append(
            f"{best.name} is the better electric option and undercuts "
            f"{result.diesel_analysis.name} by €{result.max_savings * n:,.0f}."
        )
    else:
        sections.append(
            f"{best.name} is the better electric option but still costs "
            f"€{-result.max_savings * n:,.0f} more than {result.diesel_analysis.name}."
        )

    # ── 4. Environment ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("ENVIRONMENTAL IMPACT")
    sections.append("=" * 60)
    for a in result.analyses():
        env = a.environmental_impact
        sections.append(
            f"{a.name}: {env.total_fuel_consumed * n:,.0f} {env.fuel_unit}, "
            f"{env.total_co2_emissions * n / 1000:,.1f} t CO₂"
        )
    saved = result.environmental_comparison.best_electric_co2_saved * n
    if saved >= 0:
        sections.append(f"{best.name} avoids {saved / 1000:,.1f} t CO₂ compared to diesel.")
    else:
        sections.append(
            f"WARNING: {best.name} emits {-saved / 1000:,.1f} t MORE CO₂ than diesel "
            f"under the assumed grid mix."
        )

    return "\n".join(sections)
