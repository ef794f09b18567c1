'''
Adjustment policies.

An adjustment is the scalar added to cost to produce a value estimate. It is
either fixed by the caller or derived from an ordered set of data points.
'''

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ipbones.domain.errors import MissingAdjustmentSource
from ipbones.domain.parsing import to_int
from ipbones.domain.types import DataPoint, PolicyOutput


class FixedCoefficient:
  '''
  Caller-fixed adjustment coefficient.

  The coefficient must be representable as an integer; it is added to cost
  as a real.
  '''

  def __init__(self, coefficient):
    '''
    Initialize fixed coefficient policy.

    Args:
      coefficient: Integer coefficient (int, integral float or integer text)

    Raises:
      InvalidValue: If coefficient is not representable as an integer
    '''
    self.coefficient = to_int(coefficient, field='coefficient')

  def compute(self) -> PolicyOutput[float]:
    '''Return the fixed coefficient as a real.'''
    return PolicyOutput(value=float(self.coefficient),
                        diag={
                            'adjustment_method': 'fixed',
                            'coefficient': self.coefficient,
                        })


class AdjustmentPolicy(ABC):
  '''
  Base class for data-driven adjustment policies.

  Subclasses implement compute() to derive one adjustment scalar from the
  point values. The scalar must not depend on whether a regression is
  computable for the same points.
  '''

  @abstractmethod
  def compute(self, points: Sequence[DataPoint]) -> PolicyOutput[float]:
    '''
    Compute adjustment scalar from data points.

    Args:
      points: Ordered, non-empty data points

    Returns:
      PolicyOutput with adjustment scalar and diagnostics

    Raises:
      MissingAdjustmentSource: If points is empty
    '''


class MeanAdjustment(AdjustmentPolicy):
  '''
  Arithmetic mean of the point values.

  A single point contributes its own value.
  '''

  def compute(self, points: Sequence[DataPoint]) -> PolicyOutput[float]:
    if not points:
      raise MissingAdjustmentSource(
          'Either provide an added coefficient or at least one data point')

    total = sum(p.value for p in points)
    mean = total / len(points)
    return PolicyOutput(value=mean,
                        diag={
                            'adjustment_method': 'mean',
                            'num_points': len(points),
                            'points_total': total,
                        })
