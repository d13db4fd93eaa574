"""Engine — deterministic TCO projection and break-even logic."""

from truck_tco.engine.projector import project_truck
from truck_tco.engine.break_even import find_break_even
from truck_tco.engine.orchestrator import run_comparison

__all__ = [
    "project_truck",
    "find_break_even",
    "run_comparison",
]
