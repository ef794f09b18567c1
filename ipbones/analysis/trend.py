'''
Trend-line data for chart rendering.

The presentation layer draws the data points as a scatter over their
position and the fitted line as a dashed segment from the first to the last
position. This module prepares both as DataFrames so a plotting front end
only has to map columns.

Usage:
  from ipbones.analysis.trend import trend_frame, trend_segment

  frame = trend_frame(points)
  segment = trend_segment(points)
'''

from collections.abc import Sequence
from typing import Optional

import pandas as pd

from ipbones.domain.errors import InsufficientData
from ipbones.domain.types import DataPoint, RegressionCoefficients
from ipbones.engine.regression import MIN_POINTS, fit, fitted_values

TREND_COLUMNS = ['index', 'name', 'value', 'fitted', 'residual']


def _resolve(
    points: Sequence[DataPoint],
    coefficients: Optional[RegressionCoefficients],
) -> RegressionCoefficients:
  # Precomputed coefficients still need two positions to draw a line.
  if len(points) < MIN_POINTS:
    raise InsufficientData(
        f'Trend line needs at least {MIN_POINTS} points, got {len(points)}')
  if coefficients is None:
    return fit(points)
  return coefficients


def trend_frame(
    points: Sequence[DataPoint],
    coefficients: Optional[RegressionCoefficients] = None,
) -> pd.DataFrame:
  '''
  One row per data point with its trend-line value.

  Args:
    points: Ordered data points (at least two)
    coefficients: Precomputed fit; fitted from points when omitted

  Returns:
    DataFrame with columns index, name, value, fitted, residual

  Raises:
    InsufficientData: If fewer than two points are given, even with
      precomputed coefficients
  '''
  coefficients = _resolve(points, coefficients)

  frame = pd.DataFrame({
      'index': range(len(points)),
      'name': [p.name for p in points],
      'value': [p.value for p in points],
      'fitted': fitted_values(points, coefficients),
  })
  frame['residual'] = frame['value'] - frame['fitted']
  return frame[TREND_COLUMNS]


def trend_segment(
    points: Sequence[DataPoint],
    coefficients: Optional[RegressionCoefficients] = None,
) -> pd.DataFrame:
  '''Endpoints of the trend line at the first and last position.'''
  coefficients = _resolve(points, coefficients)

  xs = [0, len(points) - 1]
  return pd.DataFrame({
      'index': xs,
      'fitted': [coefficients.predict(x) for x in xs],
  })
