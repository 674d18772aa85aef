"""Exceptions raised by the calculation engines.

The engines only raise for missing reference data.  Engineering problems
(voltage window, string layout, loading) are reported as diagnostics on
the validation report instead.
"""

from __future__ import annotations


class DataNotFoundError(LookupError):
    """Reference data (site solar profile, catalog entry) could not be resolved."""
