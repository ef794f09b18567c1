"""
Royalty policies.

A royalty is a fixed percentage of an object value, computed in integer
arithmetic and truncated toward zero.
"""

from abc import ABC
from abc import abstractmethod

from ipbones.domain.parsing import to_int
from ipbones.domain.types import PolicyOutput


class RoyaltyPolicy(ABC):
  """
  Base class for royalty policies.

  Subclasses implement compute() to return a royalty amount.
  """

  @abstractmethod
  def compute(self, object_value: int) -> PolicyOutput[int]:
    """
    Compute royalty for a validated integer object value.

    Returns:
      PolicyOutput with royalty amount and diagnostics
    """

class BasicRoyalty(RoyaltyPolicy):
  """
  Single fixed-rate royalty.

  No tiering, no negotiation: royalty = object_value * rate_pct / 100,
  truncated toward zero.
  """

  def __init__(self, rate_pct: int = 25):
    """
    Initialize basic royalty policy.

    Args:
      rate_pct: Royalty rate in whole percent (default: 25%)
    """
    self.rate_pct = to_int(rate_pct, field='rate_pct')
    if self.rate_pct < 0:
      raise ValueError(f'rate_pct must be non-negative, got {self.rate_pct}')

  def compute(self, object_value: int) -> PolicyOutput[int]:
    """Return object_value * rate_pct // 100, truncated toward zero."""
    product = object_value * self.rate_pct
    royalty = abs(product) // 100
    if product < 0:
      royalty = -royalty
    return PolicyOutput(
      value=royalty,
      diag={
        'royalty_method': 'basic',
        'royalty_rate_pct': self.rate_pct,
      }
    )
