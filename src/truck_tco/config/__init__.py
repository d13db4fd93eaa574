"""Configuration models — inputs and fixed lookup tables."""

from truck_tco.config.truck import TechnicalSpecs, TruckParameters
from truck_tco.config.operation import OperationProfile
from truck_tco.config.incentives import (
    REGIONAL_INCENTIVES,
    RegionalIncentive,
    UnknownRegionError,
    get_incentive,
)
from truck_tco.config.presets import DEFAULT_TRUCKS, OPERATION_PROFILE_PRESETS
from truck_tco.config.scenario import ComparisonRequest

__all__ = [
    "TechnicalSpecs",
    "TruckParameters",
    "OperationProfile",
    "RegionalIncentive",
    "REGIONAL_INCENTIVES",
    "UnknownRegionError",
    "get_incentive",
    "OPERATION_PROFILE_PRESETS",
    "DEFAULT_TRUCKS",
    "ComparisonRequest",
]
