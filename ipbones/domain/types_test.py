import dataclasses

import pytest

from ipbones.domain.errors import InvalidValue
from ipbones.domain.types import DataDriven
from ipbones.domain.types import DataPoint
from ipbones.domain.types import FixedAdjustment
from ipbones.domain.types import RegressionCoefficients
from ipbones.domain.types import ValuationRequest
from ipbones.domain.types import ValuationResult


class TestDataPoint:
  """Tests for DataPoint dataclass."""

  def test_value_coerced_to_real(self):
    point = DataPoint(name='2021', value=120)
    assert point.value == 120.0
    assert isinstance(point.value, float)

  def test_text_value(self):
    """Numeric text is accepted the way the entry form reads it."""
    assert DataPoint(name='2022', value='150.5').value == 150.5

  def test_non_numeric_value(self):
    with pytest.raises(InvalidValue, match="value of '2021'"):
      DataPoint(name='2021', value='n/a')

  def test_ids_unique(self):
    """Every new point gets a fresh id."""
    ids = {DataPoint(name='x', value=1).id for _ in range(50)}
    assert len(ids) == 50

  def test_edit_keeps_id(self):
    """Edited copies keep the id; the original is untouched."""
    point = DataPoint(name='a', value=1)
    renamed = point.with_name('b')
    revalued = point.with_value('2.5')

    assert renamed.id == point.id
    assert revalued.id == point.id
    assert renamed.name == 'b'
    assert revalued.value == 2.5
    assert point.name == 'a'
    assert point.value == 1.0

  def test_frozen(self):
    point = DataPoint(name='a', value=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
      point.value = 2.0  # type: ignore[misc]


class TestRegressionCoefficients:
  """Tests for RegressionCoefficients dataclass."""

  def test_predict(self):
    coefs = RegressionCoefficients(intercept=100.0, slope=2.5)
    assert coefs.predict(0) == 100.0
    assert coefs.predict(4) == 110.0

  def test_equation(self):
    coefs = RegressionCoefficients(intercept=1.0, slope=-0.125)
    assert coefs.equation() == 'Y = 1.00 + -0.12·X'


class TestValuationRequest:
  """Tests for ValuationRequest constructors."""

  def test_fixed(self):
    request = ValuationRequest.fixed(cost=1000, coefficient=500)
    assert isinstance(request.mode, FixedAdjustment)
    assert request.mode.coefficient == 500

  def test_from_points_makes_tuple(self):
    """Points are captured as an immutable tuple."""
    points = [DataPoint(name='a', value=1), DataPoint(name='b', value=2)]
    request = ValuationRequest.from_points(cost=10, points=points)
    points.append(DataPoint(name='c', value=3))

    assert isinstance(request.mode, DataDriven)
    assert isinstance(request.mode.points, tuple)
    assert len(request.mode.points) == 2


class TestValuationResult:
  """Tests for ValuationResult dataclass."""

  def test_to_dict_without_fit(self):
    result = ValuationResult(value=1500.0,
                             cost=1000,
                             adjustment=500.0,
                             mode='fixed',
                             diag={'adjustment_method': 'fixed'})

    d = result.to_dict()

    assert d['value'] == 1500.0
    assert d['intercept'] is None
    assert d['slope'] is None
    assert d['adjustment_method'] == 'fixed'

  def test_to_dict_with_fit(self):
    result = ValuationResult(
        value=1200.0,
        cost=1000,
        adjustment=200.0,
        mode='data',
        coefficients=RegressionCoefficients(intercept=190.0, slope=5.0),
    )

    d = result.to_dict()

    assert d['intercept'] == 190.0
    assert d['slope'] == 5.0
    assert d['mode'] == 'data'
