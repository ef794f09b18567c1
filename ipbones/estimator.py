'''
Value estimation entrypoint.

This module turns a cost and one adjustment source into a value estimate:
1. Validates the cost (must be representable as an integer)
2. Applies the fixed coefficient, or the configured data-driven policy
3. Fits the trend line as a secondary output when two or more points exist
4. Returns ValuationResult with full diagnostics

Usage:
  from ipbones.estimator import estimate_value, fit_regression

  value = estimate_value(cost=1000, coefficient=500)
  value = estimate_value(cost=1000, data_points=[('2021', 120), ('2022', 150)])
  coefs = fit_regression([('2021', 120), ('2022', 150), ('2023', 170)])
'''

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Optional, Tuple

from ipbones.domain.errors import InvalidCost
from ipbones.domain.errors import InvalidValue
from ipbones.domain.errors import MissingAdjustmentSource
from ipbones.domain.parsing import to_int
from ipbones.domain.types import (
    DataDriven,
    DataPoint,
    FixedAdjustment,
    RegressionCoefficients,
    ValuationRequest,
    ValuationResult,
)
from ipbones.engine.regression import fit, try_fit
from ipbones.policies.adjustment import FixedCoefficient
from ipbones.scenarios.config import ValuationConfig
from ipbones.scenarios.registry import create_policies

logger = logging.getLogger(__name__)


def estimate_detailed(
    request: ValuationRequest,
    config: Optional[ValuationConfig] = None,
) -> ValuationResult:
  '''
  Estimate value for a request.

  Args:
    request: Cost plus exactly one adjustment mode
    config: ValuationConfig (default: ValuationConfig.default())

  Returns:
    ValuationResult with value, optional trend coefficients and diagnostics

  Raises:
    InvalidCost: If cost is not representable as an integer
    InvalidValue: If a fixed coefficient is not an integer
    MissingAdjustmentSource: If the data-driven mode has no points
    DegenerateFit: If a trend fit is attempted on zero-variance positions
  '''
  if config is None:
    config = ValuationConfig.default()

  cost = to_int(request.cost, field='cost', error=InvalidCost)
  mode = request.mode

  if isinstance(mode, FixedAdjustment):
    adjustment = FixedCoefficient(mode.coefficient).compute()
    logger.debug('Fixed adjustment: cost=%d coefficient=%r', cost,
                 adjustment.value)
    return ValuationResult(
        value=float(cost) + adjustment.value,
        cost=cost,
        adjustment=adjustment.value,
        mode='fixed',
        coefficients=None,
        diag={**adjustment.diag, 'config': config.name},
    )

  if isinstance(mode, DataDriven):
    if not mode.points:
      raise MissingAdjustmentSource(
          'Either provide an added coefficient or at least one data point')

    policies = create_policies(config)
    adjustment = policies['adjustment'].compute(mode.points)
    coefficients = try_fit(mode.points)
    logger.debug('Data adjustment: cost=%d points=%d adjustment=%r fit=%s',
                 cost, len(mode.points), adjustment.value,
                 coefficients is not None)

    diag = dict(adjustment.diag)
    diag['config'] = config.name
    if coefficients is None:
      diag['regression_error'] = 'insufficient_data'

    return ValuationResult(
        value=float(cost) + adjustment.value,
        cost=cost,
        adjustment=adjustment.value,
        mode='data',
        coefficients=coefficients,
        diag=diag,
    )

  raise TypeError(f'Unsupported adjustment mode: {type(mode).__name__}')


def estimate(
    request: ValuationRequest,
    config: Optional[ValuationConfig] = None,
) -> float:
  '''Headline value for a request (see estimate_detailed).'''
  return estimate_detailed(request, config).value


def to_data_points(data_points: Iterable[Any]) -> Tuple[DataPoint, ...]:
  '''
  Normalize caller data points.

  Accepts DataPoint instances, (name, value) pairs, or mappings with
  'name' and 'value' keys.
  '''
  points = []
  for item in data_points:
    if isinstance(item, DataPoint):
      points.append(item)
    elif isinstance(item, Mapping):
      if 'value' not in item:
        raise InvalidValue(f'Data point is missing a value: {item!r}')
      points.append(DataPoint(name=str(item.get('name', '')),
                              value=item['value']))
    elif isinstance(item, (tuple, list)) and len(item) == 2:
      name, value = item
      points.append(DataPoint(name=str(name), value=value))
    else:
      raise InvalidValue(f'Unsupported data point: {item!r}')
  return tuple(points)


def build_request(
    cost: Any,
    coefficient: Any = None,
    data_points: Optional[Iterable[Any]] = None,
) -> ValuationRequest:
  '''
  Build a ValuationRequest from loose caller input.

  A supplied coefficient wins over data points. An empty coefficient text is
  treated as not supplied.

  Raises:
    InvalidCost: If cost is not representable as an integer
    InvalidValue: If a supplied coefficient is not an integer
    MissingAdjustmentSource: If neither source is supplied
  '''
  cost = to_int(cost, field='cost', error=InvalidCost)
  has_coefficient = coefficient is not None and not (
      isinstance(coefficient, str) and not coefficient.strip())

  if has_coefficient:
    coefficient = to_int(coefficient, field='coefficient')
    return ValuationRequest(cost=cost,
                            mode=FixedAdjustment(coefficient=coefficient))

  points = to_data_points(data_points) if data_points is not None else ()
  if not points:
    raise MissingAdjustmentSource(
        'Either provide an added coefficient or at least one data point')

  return ValuationRequest(cost=cost, mode=DataDriven(points=points))


def estimate_value(
    cost: Any,
    coefficient: Any = None,
    data_points: Optional[Iterable[Any]] = None,
    config: Optional[ValuationConfig] = None,
) -> float:
  '''
  Estimate value from a cost and one adjustment source.

  Args:
    cost: Integer cost
    coefficient: Optional fixed integer coefficient
    data_points: Optional ordered data points
    config: ValuationConfig (default: ValuationConfig.default())

  Returns:
    cost + adjustment as a real
  '''
  request = build_request(cost, coefficient, data_points)
  return estimate(request, config)


def fit_regression(data_points: Sequence[Any]) -> RegressionCoefficients:
  '''
  Fit the trend line of values over position.

  Raises:
    InsufficientData: If fewer than two points are given
  '''
  return fit(to_data_points(data_points))
