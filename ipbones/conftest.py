import pytest

from ipbones.domain.types import DataPoint


def _make_points(values: list[float], prefix: str = 'P') -> tuple[DataPoint, ...]:
  """Helper to create DataPoints labelled P0, P1, ... from values."""
  return tuple(
      DataPoint(name=f'{prefix}{i}', value=v) for i, v in enumerate(values))


@pytest.fixture
def linear_points() -> tuple[DataPoint, ...]:
  """Five points exactly on y = 100 + 2.5x."""
  return _make_points([100.0 + 2.5 * x for x in range(5)])


@pytest.fixture
def noisy_points() -> tuple[DataPoint, ...]:
  """Yearly licence income with a rising but noisy trend."""
  return _make_points([120, 150, 140, 190, 200], prefix='Y')


@pytest.fixture
def single_point() -> tuple[DataPoint, ...]:
  """A single data point, too few for a fit."""
  return (DataPoint(name='A', value=200),)
