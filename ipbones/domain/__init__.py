"""Domain types for the valuation core."""

from ipbones.domain.dataset import DataSet
from ipbones.domain.errors import DegenerateFit
from ipbones.domain.errors import InsufficientData
from ipbones.domain.errors import InvalidCost
from ipbones.domain.errors import InvalidValue
from ipbones.domain.errors import IPBonesError
from ipbones.domain.errors import MissingAdjustmentSource
from ipbones.domain.types import DataDriven
from ipbones.domain.types import DataPoint
from ipbones.domain.types import FixedAdjustment
from ipbones.domain.types import PolicyOutput
from ipbones.domain.types import RegressionCoefficients
from ipbones.domain.types import RoyaltyRequest
from ipbones.domain.types import RoyaltyResult
from ipbones.domain.types import ValuationRequest
from ipbones.domain.types import ValuationResult

__all__ = [
    'DataPoint',
    'DataSet',
    'RegressionCoefficients',
    'FixedAdjustment',
    'DataDriven',
    'ValuationRequest',
    'RoyaltyRequest',
    'ValuationResult',
    'RoyaltyResult',
    'PolicyOutput',
    'IPBonesError',
    'InvalidCost',
    'InvalidValue',
    'MissingAdjustmentSource',
    'InsufficientData',
    'DegenerateFit',
]
