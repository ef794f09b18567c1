"""
Valuation configuration.

ValuationConfig is a serializable (JSON-friendly) configuration class that
names the policies used for the adjustment and the royalty, so a run can be
reproduced from a small JSON file.
"""

from dataclasses import asdict
from dataclasses import dataclass
import json
from pathlib import Path
from typing import Any


@dataclass
class ValuationConfig:
  """
  Configuration for value and royalty estimation.

  Policy fields are strings (policy names) that map to factories in the
  registry.

  Attributes:
    name: Human-readable configuration name
    adjustment: Data-driven adjustment policy name (e.g., 'mean')
    royalty: Royalty policy name (e.g., 'basic')
    royalty_rate_pct: Royalty rate in whole percent
  """
  name: str = 'default'
  adjustment: str = 'mean'
  royalty: str = 'basic'
  royalty_rate_pct: int = 25

  @classmethod
  def default(cls) -> 'ValuationConfig':
    """
    Create default configuration.

    Uses:
      - Mean of data point values as the data-driven adjustment
      - Basic royalty at 25%
    """
    return cls(
        name='default',
        adjustment='mean',
        royalty='basic',
        royalty_rate_pct=25,
    )

  def to_dict(self) -> dict[str, Any]:
    """Convert to dictionary."""
    return asdict(self)

  def to_json(self) -> str:
    """Serialize to JSON string."""
    return json.dumps(self.to_dict(), indent=2)

  @classmethod
  def from_dict(cls, data: dict[str, Any]) -> 'ValuationConfig':
    """Create from dictionary."""
    return cls(**data)

  @classmethod
  def from_json(cls, json_str: str) -> 'ValuationConfig':
    """Create from JSON string."""
    return cls.from_dict(json.loads(json_str))

  @classmethod
  def from_file(cls, path: Path) -> 'ValuationConfig':
    """Load from a JSON file."""
    if not path.exists():
      raise FileNotFoundError(f'Config file not found: {path}')
    return cls.from_json(path.read_text(encoding='utf-8'))
