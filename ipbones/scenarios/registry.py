"""
Policy registry for mapping string names to policy factories.

This lets configurations name policies with plain strings (JSON friendly)
while still instantiating the correct policy classes.

To add a new policy:
1. Implement the policy class in the appropriate module
   (e.g., policies/adjustment.py)
2. Register a factory in the matching dictionary below

Example:
  ADJUSTMENT_POLICIES['median'] = lambda config: MedianAdjustment()
"""

from collections.abc import Callable
from typing import Any, cast

from ipbones.policies.adjustment import AdjustmentPolicy
from ipbones.policies.adjustment import MeanAdjustment
from ipbones.policies.royalty import BasicRoyalty
from ipbones.policies.royalty import RoyaltyPolicy
from ipbones.scenarios.config import ValuationConfig

ADJUSTMENT_POLICIES: dict[str, Callable[[ValuationConfig], AdjustmentPolicy]] = {
    'mean': lambda config: MeanAdjustment(),
}

ROYALTY_POLICIES: dict[str, Callable[[ValuationConfig], RoyaltyPolicy]] = {
    'basic':
        lambda config: BasicRoyalty(rate_pct=config.royalty_rate_pct),
}

POLICY_REGISTRY = {
    'adjustment': ADJUSTMENT_POLICIES,
    'royalty': ROYALTY_POLICIES,
}

def create_policies(config: ValuationConfig) -> dict[str, Any]:
  """
  Create policy instances from configuration.

  Args:
    config: ValuationConfig with policy names

  Returns:
    Dictionary with instantiated policy objects:
    - adjustment: AdjustmentPolicy
    - royalty: RoyaltyPolicy

  Raises:
    KeyError: If a policy name is not found in the registry
  """
  try:
    adjustment_factory = ADJUSTMENT_POLICIES[config.adjustment]
  except KeyError as e:
    raise KeyError(f"Unknown adjustment policy: '{config.adjustment}'. "
                   f'Available: {list(ADJUSTMENT_POLICIES.keys())}') from e

  try:
    royalty_factory = ROYALTY_POLICIES[config.royalty]
  except KeyError as e:
    raise KeyError(f"Unknown royalty policy: '{config.royalty}'. "
                   f'Available: {list(ROYALTY_POLICIES.keys())}') from e

  return {
      'adjustment': adjustment_factory(config),
      'royalty': royalty_factory(config),
  }

def list_policies() -> dict[str, list[str]]:
  """
  List all available policies by category.

  Returns:
    Dictionary mapping category names to list of policy names
  """
  result: dict[str, list[str]] = {}
  for category, policies_dict in POLICY_REGISTRY.items():
    policy_dict = cast(dict[str, object], policies_dict)
    result[category] = list(policy_dict.keys())
  return result
