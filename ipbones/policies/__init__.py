"""
Valuation policies.

Each policy computes one input of the valuation (the adjustment added to
cost, or the royalty taken from a value) and returns both a value and
diagnostic information.

To add a new policy:
1. Create a new class inheriting from the appropriate base
   (e.g., AdjustmentPolicy)
2. Implement the compute() method returning PolicyOutput
3. Register in scenarios/registry.py

Example:
  class MedianAdjustment(AdjustmentPolicy):
    def compute(self, points: Sequence[DataPoint]) -> PolicyOutput[float]:
      median = ...  # your calculation
      return PolicyOutput(value=median, diag={'adjustment_method': 'median'})
"""

from ipbones.policies.adjustment import AdjustmentPolicy
from ipbones.policies.adjustment import FixedCoefficient
from ipbones.policies.adjustment import MeanAdjustment
from ipbones.policies.royalty import BasicRoyalty
from ipbones.policies.royalty import RoyaltyPolicy

__all__ = [
  'AdjustmentPolicy', 'FixedCoefficient', 'MeanAdjustment',
  'RoyaltyPolicy', 'BasicRoyalty',
]
