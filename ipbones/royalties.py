"""
Royalty calculation entrypoint.

  from ipbones.royalties import compute_royalty

  compute_royalty(10000)  # 2500
  compute_royalty(10001)  # 2500, truncated
"""

import logging
from typing import Any, Optional

from ipbones.domain.errors import InvalidValue
from ipbones.domain.parsing import to_int
from ipbones.domain.types import RoyaltyRequest, RoyaltyResult
from ipbones.scenarios.config import ValuationConfig
from ipbones.scenarios.registry import create_policies

logger = logging.getLogger(__name__)


def compute_royalty_detailed(
    request: RoyaltyRequest,
    config: Optional[ValuationConfig] = None,
) -> RoyaltyResult:
  """
  Compute royalty for a request.

  Args:
    request: Object value to take the royalty from
    config: ValuationConfig (default: ValuationConfig.default())

  Returns:
    RoyaltyResult with royalty amount and diagnostics

  Raises:
    InvalidValue: If object value is not representable as an integer
  """
  if config is None:
    config = ValuationConfig.default()

  object_value = to_int(request.object_value,
                        field='object value',
                        error=InvalidValue)
  policy = create_policies(config)['royalty']
  output = policy.compute(object_value)
  logger.debug('Royalty for %d: %d', object_value, output.value)

  return RoyaltyResult(
      royalty=output.value,
      object_value=object_value,
      rate_pct=output.diag.get('royalty_rate_pct', config.royalty_rate_pct),
      diag=dict(output.diag),
  )


def compute_royalty(
    object_value: Any,
    config: Optional[ValuationConfig] = None,
) -> int:
  """Royalty amount for object_value under config (25% by default)."""
  request = RoyaltyRequest(object_value=object_value)
  return compute_royalty_detailed(request, config).royalty


def compute_basic(object_value: Any) -> int:
  """Basic 25% royalty, truncated toward zero."""
  return compute_royalty(object_value, ValuationConfig.default())
