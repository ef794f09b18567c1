from decimal import Decimal
import math

import pytest

from ipbones.domain.errors import InvalidCost
from ipbones.domain.errors import InvalidValue
from ipbones.domain.parsing import to_int
from ipbones.domain.parsing import to_real


class TestToInt:
  """Tests for integer coercion at the boundary."""

  def test_int_passthrough(self):
    assert to_int(1000) == 1000

  def test_integral_float(self):
    """A float with no fractional part is an integer."""
    assert to_int(1000.0) == 1000

  def test_text(self):
    """Integer text parses, surrounding whitespace ignored."""
    assert to_int(' -42 ') == -42

  def test_fractional_float_rejected(self):
    with pytest.raises(InvalidValue, match='must be an integer'):
      to_int(10.5)

  def test_decimal_text_rejected(self):
    """Decimal text is not an integer even when integral."""
    with pytest.raises(InvalidValue):
      to_int('1000.0')

  def test_bool_rejected(self):
    with pytest.raises(InvalidValue):
      to_int(True)

  def test_none_rejected(self):
    with pytest.raises(InvalidValue, match='NoneType'):
      to_int(None)

  def test_nan_rejected(self):
    with pytest.raises(InvalidValue):
      to_int(float('nan'))

  def test_integral_decimal(self):
    """A whole-number Decimal is an integer."""
    assert to_int(Decimal('10000')) == 10000
    assert to_int(Decimal('10000.00')) == 10000

  @pytest.mark.parametrize('raw', [Decimal('10000.5'), Decimal('NaN'),
                                   Decimal('Infinity')])
  def test_non_integral_decimal_rejected(self, raw):
    with pytest.raises(InvalidValue, match='must be an integer'):
      to_int(raw)

  @pytest.mark.parametrize('text', ['1_000', '\u0661\u0662', '+', '1 000'])
  def test_only_ascii_digit_text(self, text):
    """Digit separators and non-ASCII digits are not integers."""
    with pytest.raises(InvalidValue, match='must be an integer'):
      to_int(text)

  def test_signed_text(self):
    assert to_int('+7') == 7

  def test_custom_error_and_field(self):
    """Error class and field name are configurable."""
    with pytest.raises(InvalidCost, match='cost must be an integer'):
      to_int('abc', field='cost', error=InvalidCost)


class TestToReal:
  """Tests for real coercion."""

  def test_int(self):
    result = to_real(3)
    assert result == 3.0
    assert isinstance(result, float)

  def test_float(self):
    assert to_real(2.75) == 2.75

  def test_integer_text(self):
    assert to_real('120') == 120.0

  def test_real_text(self):
    assert to_real('12.5') == 12.5

  def test_non_numeric_text(self):
    with pytest.raises(InvalidValue, match='must be numeric'):
      to_real('twelve')

  def test_infinite_rejected(self):
    with pytest.raises(InvalidValue, match='must be finite'):
      to_real(math.inf)

  def test_overflowing_text_rejected(self):
    with pytest.raises(InvalidValue, match='must be finite'):
      to_real('1e999')

  @pytest.mark.parametrize('text', ['nan', 'inf', '1_000.5', '\u0661\u0662'])
  def test_non_ascii_or_special_text_rejected(self, text):
    with pytest.raises(InvalidValue, match='must be numeric'):
      to_real(text)

  def test_decimal(self):
    assert to_real(Decimal('12.5')) == 12.5

  def test_decimal_infinite_rejected(self):
    with pytest.raises(InvalidValue, match='must be finite'):
      to_real(Decimal('Infinity'))

  def test_bool_rejected(self):
    with pytest.raises(InvalidValue):
      to_real(False)
