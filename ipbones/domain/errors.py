"""
Error taxonomy for the valuation core.

Every failure is an input-validation failure: retrying with the same input
reproduces it. Each error carries a machine-readable code in the same style
as diagnostic codes elsewhere (e.g., 'insufficient_data').
"""


class IPBonesError(ValueError):
  """Base class for all valuation core errors."""

  code = 'error'


class InvalidCost(IPBonesError):
  """Cost (or fixed coefficient) is not representable as an integer."""

  code = 'invalid_cost'


class InvalidValue(IPBonesError):
  """Non-numeric input, or non-integer input where an integer is required."""

  code = 'invalid_value'


class MissingAdjustmentSource(IPBonesError):
  """Neither a fixed coefficient nor at least one data point was supplied."""

  code = 'missing_adjustment_source'


class InsufficientData(IPBonesError):
  """Fewer than two data points were supplied for a fit."""

  code = 'insufficient_data'


class DegenerateFit(IPBonesError):
  """Independent variable has zero variance."""

  code = 'degenerate_fit'
