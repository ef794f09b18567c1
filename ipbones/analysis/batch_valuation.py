'''
Batch valuation for many independent cases.

Each case has a cost and either a fixed coefficient or its own ordered set
of data points. Cases never share points: the trend fit of one case only
sees that case's rows.

Input tables:
  cases:  case, cost[, coefficient]
  points: case, name, value   (row order is position order within a case)

Usage (Python API):
  from ipbones.analysis.batch_valuation import batch_valuation

  df = batch_valuation(cases_df, points_df)
  df.to_csv('results.csv', index=False)
'''

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pandas as pd

from ipbones.domain.errors import IPBonesError
from ipbones.domain.errors import InvalidValue
from ipbones.domain.types import DataPoint
from ipbones.estimator import build_request, estimate_detailed
from ipbones.scenarios.config import ValuationConfig

logger = logging.getLogger(__name__)

POINT_COLUMNS = ['name', 'value']


def _require_columns(df: pd.DataFrame, columns: List[str], what: str) -> None:
  missing = [c for c in columns if c not in df.columns]
  if missing:
    raise InvalidValue(f'{what} is missing columns: {missing}')


def points_from_frame(df: pd.DataFrame) -> Tuple[DataPoint, ...]:
  '''Data points from a frame with name and value columns, in row order.'''
  _require_columns(df, POINT_COLUMNS, 'Points table')
  return tuple(
      DataPoint(name=str(row.name), value=row.value)
      for row in df[POINT_COLUMNS].itertuples(index=False))


def load_points_csv(path: Path) -> Tuple[DataPoint, ...]:
  '''Load data points from a CSV with name and value columns.'''
  if not path.exists():
    raise FileNotFoundError(f'Points file not found: {path}')
  return points_from_frame(pd.read_csv(path))


def load_table_csv(path: Path) -> pd.DataFrame:
  '''Load a cases or points table from CSV.'''
  if not path.exists():
    raise FileNotFoundError(f'Table file not found: {path}')
  return pd.read_csv(path)


def _rows_by_case(points: Optional[pd.DataFrame]) -> Dict[str, pd.DataFrame]:
  if points is None or points.empty:
    return {}
  _require_columns(points, ['case'] + POINT_COLUMNS, 'Points table')
  return {
      str(case): group
      for case, group in points.groupby('case', sort=False)
  }


def batch_valuation(
    cases: pd.DataFrame,
    points: Optional[pd.DataFrame] = None,
    config: Optional[ValuationConfig] = None,
) -> pd.DataFrame:
  '''
  Estimate value for every case.

  Args:
    cases: Table with case and cost columns, optional coefficient column
    points: Table with case, name and value columns
    config: ValuationConfig (default: ValuationConfig.default())

  Returns:
    DataFrame with one row per case:
    - case, value, cost, adjustment, mode, intercept, slope
    - ... adjustment diagnostics ...
    - error, error_code: set for failed cases, value left empty

  Raises:
    ValueError: If no case succeeded
  '''
  if config is None:
    config = ValuationConfig.default()

  _require_columns(cases, ['case', 'cost'], 'Cases table')
  case_rows = _rows_by_case(points)
  has_coefficient = 'coefficient' in cases.columns

  rows = []
  for record in cases.to_dict('records'):
    case = str(record['case'])
    coefficient = record.get('coefficient') if has_coefficient else None
    if coefficient is not None and pd.isna(coefficient):
      coefficient = None

    try:
      rows_for_case = case_rows.get(case)
      case_points = (points_from_frame(rows_for_case)
                     if rows_for_case is not None else ())
      request = build_request(record['cost'], coefficient, case_points)
      result = estimate_detailed(request, config)
    except IPBonesError as e:
      logger.warning('Failed to value case %s: %s', case, e)
      rows.append({'case': case, 'error': str(e), 'error_code': e.code})
      continue

    rows.append({'case': case, **result.to_dict()})

  if not any('error' not in row for row in rows):
    raise ValueError(f'No successful results for any of {len(rows)} cases')

  return pd.DataFrame(rows)
