'''
Demonstration entrypoint.

Runs every calculation in the library on fixed sample inputs and reports
the results with two-decimal currency ($) and percentage (%) formatting.

Usage:
  python -m fincalc.run
  python -m fincalc.run --preset precise

  from fincalc.run import build_demo_report
  for line in build_demo_report():
    print(line)
'''

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from fincalc.config import PRESETS, SolverConfig
from fincalc.engine.irr import solve_irr
from fincalc.engine.npv import compute_npv
from fincalc.engine.tvm import compound_interest
from fincalc.engine.tvm import future_value
from fincalc.engine.tvm import present_value
from fincalc.engine.tvm import simple_interest
from fincalc.samples import get_sample

logger = logging.getLogger(__name__)

FREQUENCY_NAMES = {1: 'annually', 2: 'semi-annually', 4: 'quarterly',
                   12: 'monthly', 365: 'daily'}


def format_currency(amount: float) -> str:
  return f'${amount:.2f}'


def format_rate(rate: float) -> str:
  return f'{rate * 100:.2f}%'


def format_cash_flows(cash_flows: Sequence[float]) -> str:
  return '[' + ', '.join(format_currency(cf) for cf in cash_flows) + ']'


def build_demo_report(config: Optional[SolverConfig] = None) -> List[str]:
  '''
  Build the demonstration report.

  Args:
    config: IRR solver configuration (default: SolverConfig.default())

  Returns:
    Report lines, one section per calculation separated by blank lines
  '''
  if config is None:
    config = SolverConfig.default()

  lines = ['--- Financial Library Demonstrations ---', '']

  pv_fv, rate_fv, periods_fv = 1000.0, 0.05, 10
  fv = future_value(pv_fv, rate_fv, periods_fv)
  lines += [
      'Future Value (FV):',
      f'  Present Value: {format_currency(pv_fv)}',
      f'  Annual Rate: {format_rate(rate_fv)}',
      f'  Periods: {periods_fv} years',
      f'  Calculated FV: {format_currency(fv)}',
      '',
  ]

  fv_pv, rate_pv, periods_pv = 2000.0, 0.08, 5
  pv = present_value(fv_pv, rate_pv, periods_pv)
  lines += [
      'Present Value (PV):',
      f'  Future Value: {format_currency(fv_pv)}',
      f'  Annual Discount Rate: {format_rate(rate_pv)}',
      f'  Periods: {periods_pv} years',
      f'  Calculated PV: {format_currency(pv)}',
      '',
  ]

  npv_flows = get_sample('npv_example')
  npv_rate = 0.10
  npv_result = compute_npv(npv_rate, npv_flows)
  lines += [
      'Net Present Value (NPV):',
      f'  Discount Rate: {format_rate(npv_rate)}',
      f'  Cash Flows: {format_cash_flows(npv_flows)}',
  ]
  if npv_result.ok:
    lines.append(f'  Calculated NPV: {format_currency(npv_result.value)}')
  else:
    lines.append('  NPV calculation failed.')
  lines.append('')

  principal_si, rate_si, years_si = 5000.0, 0.06, 3.0
  si = simple_interest(principal_si, rate_si, years_si)
  lines += [
      'Simple Interest:',
      f'  Principal: {format_currency(principal_si)}',
      f'  Annual Rate: {format_rate(rate_si)}',
      f'  Time: {years_si:.2f} years',
      f'  Calculated Simple Interest: {format_currency(si)}',
      '',
  ]

  principal_ci, rate_ci, frequency_ci, years_ci = 1000.0, 0.07, 12, 5.0
  amount = compound_interest(principal_ci, rate_ci, frequency_ci, years_ci)
  frequency_name = FREQUENCY_NAMES.get(frequency_ci, 'per year')
  lines += [
      'Compound Interest (Total Amount):',
      f'  Principal: {format_currency(principal_ci)}',
      f'  Annual Rate: {format_rate(rate_ci)}',
      f'  Compounding Frequency: {frequency_ci} ({frequency_name})',
      f'  Time: {years_ci:.2f} years',
      f'  Calculated Total Amount: {format_currency(amount)}',
      '',
  ]

  for title, sample, failure_note in (
      ('Internal Rate of Return (IRR):', 'irr_example', ''),
      ('Internal Rate of Return (IRR) - No Convergence Example:',
       'irr_no_sign_change', ' (expected)'),
  ):
    flows = get_sample(sample)
    irr_result = solve_irr(flows, **config.solver_kwargs())
    lines += [title, f'  Cash Flows: {format_cash_flows(flows)}']
    if irr_result.ok:
      lines.append(f'  Calculated IRR: {format_rate(irr_result.value)}')
    else:
      lines.append('  IRR calculation failed or did not converge'
                   f'{failure_note}.')
    lines.append('')

  return lines


def main(argv: Optional[Sequence[str]] = None) -> None:
  '''CLI entrypoint.'''
  parser = argparse.ArgumentParser(
      description='Run the financial calculator demonstration')
  parser.add_argument('--preset',
                      type=str,
                      default='default',
                      choices=sorted(PRESETS),
                      help='IRR solver preset')
  parser.add_argument('--solver-config',
                      type=Path,
                      help='JSON solver config (overrides --preset)')
  parser.add_argument('--verbose',
                      '-v',
                      action='store_true',
                      help='Verbose output')
  args = parser.parse_args(argv)

  if args.solver_config:
    config = SolverConfig.from_file(args.solver_config)
  else:
    config = PRESETS[args.preset]()

  if args.verbose:
    logging.getLogger('fincalc').setLevel(logging.DEBUG)

  for line in build_demo_report(config):
    logger.info('%s', line)


if __name__ == '__main__':
  logging.basicConfig(
      level=logging.INFO,
      format='%(message)s',
  )
  main()
