"""
Named fit parameters with fix/float bookkeeping.

The minimum module only consumes plain value and error vectors; the
helpers here extract them from a list of FitParameter objects.
"""

from pylikely.fitparams.parameter import (
    FitParameter,
    count_floating_fit_parameters,
    find_fit_parameter_by_name,
    get_fit_parameter_errors,
    get_fit_parameter_names,
    get_fit_parameter_values,
)

__all__ = [
    "FitParameter",
    "count_floating_fit_parameters",
    "find_fit_parameter_by_name",
    "get_fit_parameter_errors",
    "get_fit_parameter_names",
    "get_fit_parameter_values",
]
