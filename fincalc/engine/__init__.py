'''Calculation engine with pure math functions.'''

from fincalc.engine.irr import irr
from fincalc.engine.irr import solve_irr
from fincalc.engine.npv import compute_npv
from fincalc.engine.npv import npv
from fincalc.engine.tvm import compound_interest
from fincalc.engine.tvm import compute_compound_interest
from fincalc.engine.tvm import compute_future_value
from fincalc.engine.tvm import compute_present_value
from fincalc.engine.tvm import compute_simple_interest
from fincalc.engine.tvm import future_value
from fincalc.engine.tvm import present_value
from fincalc.engine.tvm import simple_interest

__all__ = [
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
