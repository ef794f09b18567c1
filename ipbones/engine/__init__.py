'''Trend regression engine with pure math functions.'''

from ipbones.engine.regression import (
    fit,
    fitted_values,
    try_fit,
)

__all__ = [
    'fit',
    'fitted_values',
    'try_fit',
]
