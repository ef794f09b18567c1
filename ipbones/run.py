'''
Command-line entrypoint for value, royalty and trend calculations.

Usage (CLI):
  # Value from a fixed coefficient
  python -m ipbones.run value --cost 1000 --coefficient 500

  # Value from data points (position order = argument order)
  python -m ipbones.run value --cost 1000 --point 2021=120 --point 2022=150

  # Value from a CSV with name,value columns
  python -m ipbones.run value --cost 1000 --points-csv data/points.csv

  # Royalty (25% by default, truncated)
  python -m ipbones.run royalty --object-value 10001

  # Trend line only, optionally with per-point chart data
  python -m ipbones.run regression --point a=1 --point b=3 --point c=5 \
    --output trend.csv

  # Batch of cases
  python -m ipbones.run batch --cases-csv cases.csv --points-csv points.csv \
    --output results.csv -v
'''

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple

from ipbones.analysis.batch_valuation import batch_valuation
from ipbones.analysis.batch_valuation import load_points_csv
from ipbones.analysis.batch_valuation import load_table_csv
from ipbones.analysis.trend import trend_frame
from ipbones.domain.errors import IPBonesError
from ipbones.domain.errors import InvalidValue
from ipbones.domain.types import DataPoint, RoyaltyRequest
from ipbones.estimator import build_request, estimate_detailed, fit_regression
from ipbones.royalties import compute_royalty_detailed
from ipbones.scenarios.config import ValuationConfig

logger = logging.getLogger(__name__)

SEPARATOR = '=' * 70


def parse_point(text: str) -> Tuple[str, str]:
  '''Split NAME=VALUE into its parts.'''
  name, sep, value = text.partition('=')
  if not sep or not name or not value:
    raise InvalidValue(f'Data point must look like NAME=VALUE, got {text!r}')
  return name, value


def _collect_points(args: argparse.Namespace) -> Tuple[DataPoint, ...]:
  if args.points_csv is not None:
    return load_points_csv(args.points_csv)
  return tuple(
      DataPoint(name=name, value=value)
      for name, value in (parse_point(p) for p in args.point or []))


def _add_point_args(parser: argparse.ArgumentParser) -> None:
  group = parser.add_mutually_exclusive_group()
  group.add_argument('--point',
                     action='append',
                     metavar='NAME=VALUE',
                     help='Data point, repeat in position order')
  group.add_argument('--points-csv',
                     type=Path,
                     help='CSV file with name,value columns')


def build_parser() -> argparse.ArgumentParser:
  parser = argparse.ArgumentParser(
      description='Intangible asset value and royalty calculator',
      formatter_class=argparse.RawDescriptionHelpFormatter,
      epilog=__doc__,
  )
  parser.add_argument('--config',
                      type=Path,
                      help='ValuationConfig JSON file')
  parser.add_argument('-v',
                      '--verbose',
                      action='store_true',
                      help='Verbose output')

  sub = parser.add_subparsers(dest='command', required=True)

  value = sub.add_parser('value', help='Estimate value from cost')
  value.add_argument('--cost', type=str, required=True, help='Integer cost')
  value.add_argument('--coefficient',
                     type=str,
                     help='Fixed added coefficient (integer)')
  _add_point_args(value)

  royalty = sub.add_parser('royalty', help='Compute basic royalty')
  royalty.add_argument('--object-value',
                       type=str,
                       required=True,
                       help='Integer object value')

  regression = sub.add_parser('regression', help='Fit trend line')
  _add_point_args(regression)
  regression.add_argument('--output',
                          type=Path,
                          help='Write per-point trend CSV for charting')

  batch = sub.add_parser('batch', help='Value many cases from CSV')
  batch.add_argument('--cases-csv',
                     type=Path,
                     required=True,
                     help='CSV with case,cost[,coefficient] columns')
  batch.add_argument('--points-csv',
                     type=Path,
                     help='CSV with case,name,value columns')
  batch.add_argument('--output',
                     type=Path,
                     required=True,
                     help='Output CSV file path')

  return parser


def _run_value(args: argparse.Namespace, config: ValuationConfig) -> None:
  request = build_request(args.cost, args.coefficient, _collect_points(args))
  result = estimate_detailed(request, config)

  logger.info(SEPARATOR)
  logger.info('Value Evaluation (%s)', config.name)
  logger.info(SEPARATOR)
  logger.info('  Cost: %d', result.cost)
  logger.info('  Adjustment (%s): %.2f', result.mode, result.adjustment)
  logger.info('  Method IP-Economist: %.2f', result.value)
  if result.coefficients is not None:
    logger.info('  Regression line: %s', result.coefficients.equation())
  logger.info(SEPARATOR)


def _run_royalty(args: argparse.Namespace, config: ValuationConfig) -> None:
  result = compute_royalty_detailed(
      RoyaltyRequest(object_value=args.object_value), config)
  logger.info('Royalty (%d%%): %d', result.rate_pct, result.royalty)


def _run_regression(args: argparse.Namespace) -> None:
  points = _collect_points(args)
  coefficients = fit_regression(points)
  logger.info('Regression line: %s', coefficients.equation())
  logger.debug('  intercept=%r slope=%r', coefficients.intercept,
               coefficients.slope)

  if args.output is not None:
    frame = trend_frame(points, coefficients)
    args.output.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(args.output, index=False)
    logger.info('Trend data saved to %s', args.output)


def _run_batch(args: argparse.Namespace, config: ValuationConfig) -> None:
  cases = load_table_csv(args.cases_csv)
  points = None
  if args.points_csv is not None:
    points = load_table_csv(args.points_csv)

  df = batch_valuation(cases, points, config)
  args.output.parent.mkdir(parents=True, exist_ok=True)
  df.to_csv(args.output, index=False)

  failed = df['error'].notna().sum() if 'error' in df.columns else 0
  logger.info('Valued %d cases (%d failed), saved to %s', len(df), failed,
              args.output)


def main(argv: Optional[Sequence[str]] = None) -> int:
  '''CLI entrypoint. Returns the process exit status.'''
  parser = build_parser()
  args = parser.parse_args(argv)

  logging.basicConfig(
      level=logging.DEBUG if args.verbose else logging.INFO,
      format='%(message)s',
  )

  config = ValuationConfig.default()
  if args.config is not None:
    config = ValuationConfig.from_file(args.config)

  try:
    if args.command == 'value':
      _run_value(args, config)
    elif args.command == 'royalty':
      _run_royalty(args, config)
    elif args.command == 'regression':
      _run_regression(args)
    elif args.command == 'batch':
      _run_batch(args, config)
  except IPBonesError as e:
    logger.error('Error: %s', e)
    return 1

  return 0


if __name__ == '__main__':
  raise SystemExit(main())
