'''
Boundary coercion of caller input.

Values are carried as reals internally. Integer-ness is only checked where an
integer is contractually required (cost, fixed coefficient, royalty object
value). Text is parsed as an integer first, then as a real, the way the data
entry form does it: ASCII digits with an optional sign, no digit separators.
'''

from decimal import Decimal
from math import isfinite
from numbers import Integral, Real
import re
from typing import Any, Type

from ipbones.domain.errors import IPBonesError
from ipbones.domain.errors import InvalidValue

_INT_TEXT = re.compile(r'[+-]?[0-9]+', re.ASCII)
_REAL_TEXT = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?',
                        re.ASCII)


def to_int(
    raw: Any,
    field: str = 'value',
    error: Type[IPBonesError] = InvalidValue,
) -> int:
  '''
  Coerce raw input to an integer.

  Args:
    raw: int, integral float or Decimal, or integer text
    field: Field name used in the error message
    error: Error class raised on failure

  Returns:
    The integer value

  Raises:
    error: If raw is not representable as an integer
  '''
  if isinstance(raw, bool):
    raise error(f'{field} must be an integer, got {raw!r}')

  if isinstance(raw, Integral):
    return int(raw)

  if isinstance(raw, Decimal):
    if raw.is_finite() and raw == raw.to_integral_value():
      return int(raw)
    raise error(f'{field} must be an integer, got {raw!r}')

  if isinstance(raw, Real):
    as_float = float(raw)
    if isfinite(as_float) and as_float.is_integer():
      return int(as_float)
    raise error(f'{field} must be an integer, got {raw!r}')

  if isinstance(raw, str):
    text = raw.strip()
    if _INT_TEXT.fullmatch(text):
      return int(text)
    raise error(f'{field} must be an integer, got {raw!r}')

  raise error(f'{field} must be an integer, got {type(raw).__name__}')


def to_real(raw: Any, field: str = 'value') -> float:
  '''
  Coerce raw input to a finite real.

  Raises:
    InvalidValue: If raw is not numeric or not finite
  '''
  if isinstance(raw, bool):
    raise InvalidValue(f'{field} must be numeric, got {raw!r}')

  if isinstance(raw, Integral):
    return float(raw)

  if isinstance(raw, (Real, Decimal)):
    value = float(raw)
  elif isinstance(raw, str):
    text = raw.strip()
    if _INT_TEXT.fullmatch(text):
      try:
        value = float(int(text))
      except OverflowError as e:
        raise InvalidValue(f'{field} must be finite, got {raw!r}') from e
    elif _REAL_TEXT.fullmatch(text):
      value = float(text)
    else:
      raise InvalidValue(f'{field} must be numeric, got {raw!r}')
  else:
    raise InvalidValue(f'{field} must be numeric, got {type(raw).__name__}')

  if not isfinite(value):
    raise InvalidValue(f'{field} must be finite, got {raw!r}')
  return value
