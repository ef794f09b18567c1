'''
Intangible asset valuation core.

Estimates a value for an intangible asset from its cost plus either a fixed
adjustment coefficient or a small set of historical data points, fits a
trend line over those points, and derives a basic royalty from a value.

Usage:
  from ipbones import compute_royalty, estimate_value, fit_regression

  estimate_value(cost=1000, coefficient=500)              # 1500.0
  estimate_value(cost=1000, data_points=[('A', 200)])     # 1200.0
  fit_regression([('a', 1), ('b', 3), ('c', 5)])          # Y = 1.00 + 2.00·X
  compute_royalty(10001)                                  # 2500
'''

from ipbones.estimator import estimate_value
from ipbones.estimator import fit_regression
from ipbones.royalties import compute_royalty

__all__ = [
    'estimate_value',
    'fit_regression',
    'compute_royalty',
]
