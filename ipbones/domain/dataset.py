"""
Caller-side working set of data points.

The engine only ever reads points. This container is what an entry form
edits: rows are added, relabelled, revalued and removed by id, and the
current ordered tuple is handed to the estimator.
"""

from typing import Any, Dict, Iterator, List, Tuple

from ipbones.domain.errors import InvalidValue
from ipbones.domain.types import DataPoint


class DataSet:
  """Ordered, editable collection of DataPoints keyed by stable id."""

  def __init__(self, points: Tuple[DataPoint, ...] = ()):
    self._points: List[DataPoint] = list(points)

  def __len__(self) -> int:
    return len(self._points)

  def __iter__(self) -> Iterator[DataPoint]:
    return iter(self._points)

  @property
  def points(self) -> Tuple[DataPoint, ...]:
    """Snapshot of the current points in order."""
    return tuple(self._points)

  def add(self, name: str, value: Any) -> DataPoint:
    """
    Append a new point.

    Args:
      name: Non-empty label
      value: Number or numeric text

    Returns:
      The created DataPoint (with a fresh id)

    Raises:
      InvalidValue: If name is empty or value is not numeric
    """
    if not name:
      raise InvalidValue('Data point name must not be empty')
    if isinstance(value, str) and not value.strip():
      raise InvalidValue(f'Data point {name!r} has an empty value')

    point = DataPoint(name=name, value=value)
    self._points.append(point)
    return point

  def rename(self, point_id: int, name: str) -> DataPoint:
    """Relabel the point with point_id, keeping its id and position."""
    return self._replace(point_id, lambda p: p.with_name(name))

  def revalue(self, point_id: int, value: Any) -> DataPoint:
    """Change the value of the point with point_id, keeping its id."""
    return self._replace(point_id, lambda p: p.with_value(value))

  def remove(self, point_id: int) -> DataPoint:
    """Remove and return the point with point_id."""
    index = self._index_of(point_id)
    return self._points.pop(index)

  def to_records(self) -> List[Dict[str, Any]]:
    return [{'id': p.id, 'name': p.name, 'value': p.value} for p in self]

  def _index_of(self, point_id: int) -> int:
    for i, point in enumerate(self._points):
      if point.id == point_id:
        return i
    raise KeyError(f'No data point with id {point_id}')

  def _replace(self, point_id: int, edit) -> DataPoint:
    index = self._index_of(point_id)
    updated = edit(self._points[index])
    self._points[index] = updated
    return updated
