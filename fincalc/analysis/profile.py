"""
NPV profile analysis.

An NPV profile evaluates NPV across a grid of discount rates for one or more
cash-flow series. The profile crosses zero at the IRR, so the table doubles
as a visual check on the Newton solver.

CLI Usage:
  python -m fincalc.analysis.profile \\
      --sample irr_example \\
      --cash-flows=-500,200,200,200 \\
      --rates 0.0,0.05,0.10,0.15,0.20
"""

import argparse
import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

import pandas as pd

from fincalc.analysis.plot_profile import plot_npv_profile
from fincalc.config import PRESETS, SolverConfig
from fincalc.engine.irr import solve_irr
from fincalc.engine.npv import npv
from fincalc.samples import get_sample, list_samples

logger = logging.getLogger(__name__)


class NpvProfileBuilder:
  """
  Build NPV profile tables and IRR summaries for named cash-flow series.

  Every series is evaluated at the same discount rates so the columns can
  be compared side by side.
  """

  def __init__(
      self,
      series: Mapping[str, Sequence[float]],
      config: Optional[SolverConfig] = None,
  ):
    """
    Initialize profile builder.

    Args:
        series: Mapping of series name to cash flows (index = period)
        config: IRR solver configuration (default: SolverConfig.default())
    """
    if not series:
      raise ValueError('series cannot be empty')

    self.series: Dict[str, List[float]] = {
        name: [float(cf) for cf in flows] for name, flows in series.items()
    }
    self.config = config or SolverConfig.default()

    logger.info('Initialized NpvProfileBuilder')
    for name, flows in self.series.items():
      logger.info('  %s: %d periods, net $%.2f', name, len(flows), sum(flows))

  def build(self, discount_rates: Sequence[float]) -> pd.DataFrame:
    """
    Build the NPV profile table.

    Args:
        discount_rates: Rates to evaluate (e.g., [0.0, 0.05, 0.10])

    Returns:
        DataFrame with discount rates as index, series names as columns,
        and NPVs as cell values (NaN where the rate is invalid)
    """
    if not discount_rates:
      raise ValueError('discount_rates cannot be empty')

    logger.info('Building NPV profile: %d rates x %d series',
                len(discount_rates), len(self.series))

    data_rows = []
    for r in discount_rates:
      data_rows.append([npv(r, flows) for flows in self.series.values()])

    df = pd.DataFrame(
        data_rows,
        index=pd.Index(list(discount_rates), name='Discount Rate'),
        columns=pd.Index(list(self.series), name='Series'),
    )
    return df

  def irr_summary(self) -> pd.DataFrame:
    """
    Solve IRR for every series.

    Returns:
        DataFrame indexed by series name with columns irr (NaN on failure),
        error (ErrorCode value or None) and iterations
    """
    rows = []
    for name, flows in self.series.items():
      record = solve_irr(flows, **self.config.solver_kwargs()).to_dict()
      rows.append({
          'series': name,
          'irr': record['value'],
          'error': record['error'],
          'iterations': record.get('iterations'),
      })
    return pd.DataFrame(rows).set_index('series')


def parse_float_list(text: str) -> List[float]:
  """Parse '0.05, 0.10' or '-500,200' into floats; blank items are skipped."""
  return [float(token) for token in text.split(',') if token.strip()]


def frange(start: float, stop: float, step: float) -> List[float]:
  """
  Discount-rate grid from start to stop, both ends included.

  Points are rounded to 12 decimals so 0.1 + 0.2 style drift does not leak
  into the table index. A stop below start yields an empty grid.
  """
  if step <= 0:
    raise ValueError(f'rate step must be positive, got {step}')
  count = int(round((stop - start) / step)) + 1
  return [round(start + i * step, 12) for i in range(max(count, 0))]


def format_profile(table: pd.DataFrame) -> str:
  """Render a profile with percentage rate labels and $ amounts."""
  labelled = table.rename(index=lambda r: f'{r:.1%}')
  return labelled.to_string(float_format=lambda x: f'${x:.2f}')


def _collect_series(args: argparse.Namespace) -> Dict[str, List[float]]:
  series: Dict[str, List[float]] = {}
  for name in args.sample or []:
    series[name] = get_sample(name)
  for i, raw in enumerate(args.cash_flows or [], start=1):
    series[f'custom_{i}'] = parse_float_list(raw)
  if not series:
    series['irr_example'] = get_sample('irr_example')
    logger.warning('No series specified, using sample: irr_example')
  return series


def _resolve_config(args: argparse.Namespace) -> SolverConfig:
  if args.solver_config:
    return SolverConfig.from_file(args.solver_config)
  return PRESETS[args.preset]()


def main(argv: Optional[Sequence[str]] = None) -> None:
  """CLI entrypoint for NPV profile analysis."""
  parser = argparse.ArgumentParser(
      description='NPV Profile Analysis',
      formatter_class=argparse.RawDescriptionHelpFormatter,
      epilog=f"""
Samples: {', '.join(list_samples())}

Examples:
  # Built-in sample over explicit rates
  python -m fincalc.analysis.profile \\
      --sample irr_example --rates 0.0,0.05,0.10,0.15,0.20

  # Custom series over a rate range, saved with a chart
  python -m fincalc.analysis.profile \\
      --cash-flows=-500,200,200,200 \\
      --rate-min 0.0 --rate-max 0.30 --rate-step 0.02 \\
      --output profile.csv --plot profile.png
      """)

  parser.add_argument('--sample',
                      action='append',
                      help='Named sample series (repeatable)')
  parser.add_argument('--cash-flows',
                      action='append',
                      help='Comma-separated cash flows (repeatable)')

  # Option 1: Explicit list
  parser.add_argument('--rates',
                      type=str,
                      help='Comma-separated discount rates (e.g., 0.08,0.10)')

  # Option 2: Range specification
  parser.add_argument('--rate-min', type=float, help='Minimum discount rate')
  parser.add_argument('--rate-max', type=float, help='Maximum discount rate')
  parser.add_argument('--rate-step',
                      type=float,
                      default=0.01,
                      help='Discount rate step (default: 0.01)')

  parser.add_argument('--preset',
                      default='default',
                      choices=sorted(PRESETS),
                      help='Solver preset')
  parser.add_argument('--solver-config',
                      type=Path,
                      help='JSON solver config (overrides --preset)')
  parser.add_argument('--output', type=Path, help='Output CSV path (optional)')
  parser.add_argument('--plot', type=Path, help='Output PNG path (optional)')
  parser.add_argument('--verbose',
                      '-v',
                      action='store_true',
                      help='Verbose output')

  args = parser.parse_args(argv)

  logging.basicConfig(
      level=logging.DEBUG if args.verbose else logging.INFO,
      format='%(asctime)s [%(levelname)s] %(message)s',
      datefmt='%Y-%m-%d %H:%M:%S',
  )

  series = _collect_series(args)
  config = _resolve_config(args)

  if args.rates:
    discount_rates = parse_float_list(args.rates)
  elif args.rate_min is not None and args.rate_max is not None:
    discount_rates = frange(args.rate_min, args.rate_max, args.rate_step)
  else:
    discount_rates = [0.0, 0.05, 0.10, 0.15, 0.20, 0.25]
    logger.warning('No discount rates specified, using default: %s',
                   discount_rates)

  builder = NpvProfileBuilder(series, config)
  table = builder.build(discount_rates)
  summary = builder.irr_summary()

  print('\n' + '=' * 80)
  print('NPV Profile')
  print('=' * 80)
  print(format_profile(table))
  print('\n' + '=' * 80)
  print('Internal Rate of Return')
  print('=' * 80)
  for name, row in summary.iterrows():
    if pd.isna(row['error']):
      print(f'{name}: {row["irr"] * 100:.2f}%')
    else:
      print(f'{name}: failed ({row["error"]})')
  print('=' * 80 + '\n')

  if args.output:
    table.to_csv(args.output)
    logger.info('Saved to: %s', args.output)

  if args.plot:
    irr_by_series = {
        name: row['irr'] for name, row in summary.iterrows()
        if pd.isna(row['error'])
    }
    plot_npv_profile(table, args.plot, irr_by_series)


if __name__ == '__main__':
  main()
