'''
Domain types for the valuation core.

These dataclasses provide typed, immutable interfaces between the caller,
the policies, and the regression engine. Every computation takes them as
input and returns fresh instances; nothing is mutated in place.
'''

from dataclasses import dataclass, field, replace
import itertools
from typing import Any, Dict, Generic, Iterable, Optional, Tuple, TypeVar, Union

from ipbones.domain.parsing import to_real

T = TypeVar('T')

_ids = itertools.count(1)


def _next_id() -> int:
  return next(_ids)


@dataclass(frozen=True)
class PolicyOutput(Generic[T]):
  '''
  Standard output from any policy.

  Attributes:
    value: The computed value (type depends on policy)
    diag: Dictionary of diagnostic information
  '''
  value: T
  diag: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DataPoint:
  '''
  A single labelled observation supplied by the caller.

  The position of a point in its sequence is its independent variable;
  the point itself only carries a label and a value.

  Attributes:
    name: Text label
    value: Observed value, coerced to a finite real
    id: Identifier assigned once at creation and never reused
  '''
  name: str
  value: float
  id: int = field(default_factory=_next_id, compare=False)

  def __post_init__(self):
    object.__setattr__(self, 'value',
                       to_real(self.value, field=f'value of {self.name!r}'))

  def with_name(self, name: str) -> 'DataPoint':
    '''Edited copy with a new label and the same id.'''
    return replace(self, name=name)

  def with_value(self, value: Any) -> 'DataPoint':
    '''Edited copy with a new value and the same id.'''
    return replace(self, value=value)


@dataclass(frozen=True)
class RegressionCoefficients:
  '''
  Intercept and slope of a fitted trend line.

  Attributes:
    intercept: Fitted value at position 0
    slope: Change in fitted value per position
  '''
  intercept: float
  slope: float

  def predict(self, x: float) -> float:
    '''Trend-line value at position x.'''
    return self.intercept + self.slope * x

  def equation(self) -> str:
    '''Display form, e.g. "Y = 100.00 + 2.50·X".'''
    return f'Y = {self.intercept:.2f} + {self.slope:.2f}·X'


@dataclass(frozen=True)
class FixedAdjustment:
  '''Adjust cost by a caller-fixed integer coefficient.'''
  coefficient: int


@dataclass(frozen=True)
class DataDriven:
  '''Adjust cost by a scalar derived from an ordered sequence of points.'''
  points: Tuple[DataPoint, ...]

  def __post_init__(self):
    object.__setattr__(self, 'points', tuple(self.points))


AdjustmentMode = Union[FixedAdjustment, DataDriven]


@dataclass(frozen=True)
class ValuationRequest:
  '''
  Input to the value estimator.

  Attributes:
    cost: Asset cost, must be representable as an integer
    mode: Exactly one adjustment source
  '''
  cost: int
  mode: AdjustmentMode

  @classmethod
  def fixed(cls, cost: int, coefficient: int) -> 'ValuationRequest':
    return cls(cost=cost, mode=FixedAdjustment(coefficient=coefficient))

  @classmethod
  def from_points(cls, cost: int,
                  points: Iterable[DataPoint]) -> 'ValuationRequest':
    return cls(cost=cost, mode=DataDriven(points=tuple(points)))


@dataclass(frozen=True)
class RoyaltyRequest:
  '''Input to the royalty calculator.'''
  object_value: int


@dataclass(frozen=True)
class ValuationResult:
  '''
  Complete valuation result with diagnostics.

  Attributes:
    value: Headline value estimate (cost + adjustment)
    cost: Validated cost
    adjustment: Adjustment scalar added to cost
    mode: 'fixed' or 'data'
    coefficients: Trend-line coefficients, only when a fit was possible
    diag: Merged diagnostics from the adjustment policy
  '''
  value: float
  cost: int
  adjustment: float
  mode: str
  coefficients: Optional[RegressionCoefficients] = None
  diag: Dict[str, Any] = field(default_factory=dict)

  def to_dict(self) -> Dict[str, Any]:
    '''Convert to dictionary for DataFrame creation.'''
    result: Dict[str, Any] = {
        'value': self.value,
        'cost': self.cost,
        'adjustment': self.adjustment,
        'mode': self.mode,
        'intercept': None,
        'slope': None,
    }
    if self.coefficients:
      result['intercept'] = self.coefficients.intercept
      result['slope'] = self.coefficients.slope
    result.update(self.diag)
    return result


@dataclass(frozen=True)
class RoyaltyResult:
  '''
  Royalty computed for an object value.

  Attributes:
    royalty: Royalty amount, truncated toward zero
    object_value: Validated object value
    rate_pct: Royalty rate in whole percent
    diag: Diagnostics from the royalty policy
  '''
  royalty: int
  object_value: int
  rate_pct: int
  diag: Dict[str, Any] = field(default_factory=dict)
