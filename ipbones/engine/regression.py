"""
Pure trend regression engine.

Ordinary least squares of value on position. The zero-based position of
each point in its sequence is the independent variable, so reordering the
input changes the fit. No pandas, no I/O, no rounding.

Key functions:
  fit: Intercept and slope for two or more points
  try_fit: Same, but None when there are fewer than two points
  fitted_values: Trend-line value at every position
"""

import logging
from collections.abc import Sequence
from typing import List, Optional

from ipbones.domain.errors import DegenerateFit
from ipbones.domain.errors import InsufficientData
from ipbones.domain.types import DataPoint
from ipbones.domain.types import RegressionCoefficients

logger = logging.getLogger(__name__)

MIN_POINTS = 2


def fit(points: Sequence[DataPoint]) -> RegressionCoefficients:
  """
  Fit y = intercept + slope * x with x_i = i for i = 0..n-1.

  Args:
    points: Ordered data points; only their values are read

  Returns:
    RegressionCoefficients for the fitted line

  Raises:
    InsufficientData: If fewer than two points are given
    DegenerateFit: If the positions have zero variance
  """
  n = len(points)
  if n < MIN_POINTS:
    raise InsufficientData(
        f'Regression needs at least {MIN_POINTS} data points, got {n}')

  mean_x = (n - 1) / 2.0
  mean_y = sum(p.value for p in points) / n

  sxy = 0.0
  sxx = 0.0
  for i, point in enumerate(points):
    dx = i - mean_x
    sxy += dx * (point.value - mean_y)
    sxx += dx * dx

  if sxx == 0.0:
    raise DegenerateFit(f'Zero variance in positions for {n} data points')

  slope = sxy / sxx
  intercept = mean_y - slope * mean_x

  logger.debug('Fitted %d points: intercept=%r slope=%r', n, intercept, slope)
  return RegressionCoefficients(intercept=intercept, slope=slope)


def try_fit(points: Sequence[DataPoint]) -> Optional[RegressionCoefficients]:
  """Fit when at least two points are given, otherwise None."""
  if len(points) < MIN_POINTS:
    return None
  return fit(points)


def fitted_values(
    points: Sequence[DataPoint],
    coefficients: RegressionCoefficients,
) -> List[float]:
  """Trend-line value at each position of points."""
  return [coefficients.predict(i) for i in range(len(points))]
