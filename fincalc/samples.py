"""
Registry of named sample cash-flow series.

Lets the CLIs and the demonstration report refer to fixed inputs by name:

  from fincalc.samples import get_sample
  flows = get_sample('irr_example')
"""

from typing import Dict, List, Tuple

SAMPLE_CASH_FLOWS: Dict[str, Tuple[float, ...]] = {
    'npv_example': (-10000.0, 3000.0, 4000.0, 5000.0, 3000.0),
    'irr_example': (-1000.0, 300.0, 400.0, 500.0, 600.0),
    'irr_no_sign_change': (-1000.0, -200.0, -50.0),
}


def get_sample(name: str) -> List[float]:
  """Return a fresh list copy of the named sample series."""
  if name not in SAMPLE_CASH_FLOWS:
    raise KeyError(f'Unknown sample: {name}. '
                   f'Available: {", ".join(list_samples())}')
  return list(SAMPLE_CASH_FLOWS[name])


def list_samples() -> List[str]:
  """Names of all registered samples, sorted."""
  return sorted(SAMPLE_CASH_FLOWS)
