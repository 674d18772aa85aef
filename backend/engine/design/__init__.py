"""
Engineering design module.

Provides temperature-compensated string sizing, MPPT current and DC/AC
loading checks, a string/MPPT distribution search, winter-solstice row
spacing, rectangular panel packing, and the design pipeline that combines
them into a validation report.
"""

from .voltage import VoltageLimits, normalized_temp_coeff, voltage_limits
from .current import CurrentCheck, check_current
from .loading import LoadingCheck, RatioStatus, analyze_loading, classify_ratio
from .stringing import (
    DistributionFailure,
    DistributionOutcome,
    DistributionSuccess,
    ElectricalConfig,
    distribute_strings,
)
from .shadow import ShadowAnalysis, shadow_spacing, solstice_altitude
from .layout import LayoutAnalysis, PanelRect, pack_layout
from .report import Diagnostic, Severity, ValidationReport
from .designer import DesignResult, design

__all__ = [
    # voltage
    "VoltageLimits",
    "normalized_temp_coeff",
    "voltage_limits",
    # current
    "CurrentCheck",
    "check_current",
    # loading
    "LoadingCheck",
    "RatioStatus",
    "analyze_loading",
    "classify_ratio",
    # stringing
    "ElectricalConfig",
    "DistributionSuccess",
    "DistributionFailure",
    "DistributionOutcome",
    "distribute_strings",
    # shadow
    "ShadowAnalysis",
    "shadow_spacing",
    "solstice_altitude",
    # layout
    "PanelRect",
    "LayoutAnalysis",
    "pack_layout",
    # report
    "Severity",
    "Diagnostic",
    "ValidationReport",
    # designer
    "DesignResult",
    "design",
]
