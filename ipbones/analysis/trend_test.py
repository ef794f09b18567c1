import pytest

from ipbones.analysis.trend import TREND_COLUMNS
from ipbones.analysis.trend import trend_frame
from ipbones.analysis.trend import trend_segment
from ipbones.domain.errors import InsufficientData
from ipbones.domain.types import RegressionCoefficients


class TestTrendFrame:
  """Tests for trend_frame."""

  def test_columns_and_rows(self, noisy_points):
    frame = trend_frame(noisy_points)

    assert list(frame.columns) == TREND_COLUMNS
    assert len(frame) == 5
    assert frame['index'].tolist() == [0, 1, 2, 3, 4]
    assert frame['name'].tolist() == ['Y0', 'Y1', 'Y2', 'Y3', 'Y4']

  def test_fitted_and_residuals(self, noisy_points):
    """Fitted line is y = 120 + 20x for the noisy series."""
    frame = trend_frame(noisy_points)

    assert frame['fitted'].tolist() == pytest.approx(
        [120.0, 140.0, 160.0, 180.0, 200.0])
    assert frame['residual'].tolist() == pytest.approx(
        [0.0, 10.0, -20.0, 10.0, 0.0])

  def test_residuals_sum_to_zero(self, noisy_points):
    residuals = trend_frame(noisy_points)['residual']
    assert residuals.sum() == pytest.approx(0.0, abs=1e-9)

  def test_precomputed_coefficients(self, noisy_points):
    coefs = RegressionCoefficients(intercept=0.0, slope=1.0)

    frame = trend_frame(noisy_points, coefs)

    assert frame['fitted'].tolist() == [0.0, 1.0, 2.0, 3.0, 4.0]

  def test_insufficient(self, single_point):
    with pytest.raises(InsufficientData):
      trend_frame(single_point)

  def test_precomputed_coefficients_need_two_points(self, single_point):
    coefs = RegressionCoefficients(intercept=0.0, slope=1.0)

    with pytest.raises(InsufficientData, match='got 1'):
      trend_frame(single_point, coefs)

    with pytest.raises(InsufficientData, match='got 0'):
      trend_frame([], coefs)


class TestTrendSegment:
  """Tests for trend_segment."""

  def test_endpoints(self, noisy_points):
    segment = trend_segment(noisy_points)

    assert segment['index'].tolist() == [0, 4]
    assert segment['fitted'].tolist() == pytest.approx([120.0, 200.0])

  def test_insufficient(self, single_point):
    with pytest.raises(InsufficientData):
      trend_segment(single_point)

  def test_precomputed_coefficients_need_two_points(self, single_point):
    """A single position would give a zero-length segment."""
    coefs = RegressionCoefficients(intercept=0.0, slope=1.0)

    with pytest.raises(InsufficientData, match='got 1'):
      trend_segment(single_point, coefs)

    with pytest.raises(InsufficientData, match='got 0'):
      trend_segment([], coefs)


class TestPackageExports:
  """Tests for the analysis package namespace."""

  def test_trend_helpers_exported(self):
    import ipbones.analysis as analysis

    assert analysis.trend_frame is trend_frame
    assert analysis.trend_segment is trend_segment
