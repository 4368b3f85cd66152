'''
Financial calculator: time value of money, NPV and IRR.

Every calculation comes in two forms. The compute_* / solve_irr form returns
a CalcResult carrying the value, an ErrorCode on failure and diagnostics.
The plain form returns a float, with 0.0 (closed-form formulas) or NaN
(NPV, IRR) as the failure sentinel. Failures are also written as a
one-line diagnostic to the fincalc.engine loggers.

Usage:
  from fincalc import npv, solve_irr

  value = npv(0.10, [-10000, 3000, 4000, 5000, 3000])
  result = solve_irr([-1000, 300, 400, 500, 600])
  if result.ok:
    print(f'IRR: {result.value:.2%}')
'''

from fincalc.config import SolverConfig
from fincalc.domain.types import CalcResult
from fincalc.domain.types import ErrorCode
from fincalc.engine import compound_interest
from fincalc.engine import compute_compound_interest
from fincalc.engine import compute_future_value
from fincalc.engine import compute_npv
from fincalc.engine import compute_present_value
from fincalc.engine import compute_simple_interest
from fincalc.engine import future_value
from fincalc.engine import irr
from fincalc.engine import npv
from fincalc.engine import present_value
from fincalc.engine import simple_interest
from fincalc.engine import solve_irr

__all__ = [
    'CalcResult',
    'ErrorCode',
    'SolverConfig',
    'compound_interest',
    'compute_compound_interest',
    'compute_future_value',
    'compute_npv',
    'compute_present_value',
    'compute_simple_interest',
    'future_value',
    'irr',
    'npv',
    'present_value',
    'simple_interest',
    'solve_irr',
]
