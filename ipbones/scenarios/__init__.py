"""Valuation configuration and policy registry."""

from ipbones.scenarios.config import ValuationConfig
from ipbones.scenarios.registry import create_policies
from ipbones.scenarios.registry import list_policies
from ipbones.scenarios.registry import POLICY_REGISTRY

__all__ = [
  'ValuationConfig',
  'POLICY_REGISTRY',
  'create_policies',
  'list_policies',
]
