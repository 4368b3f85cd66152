'''
Analysis utilities built on the calculation engine.

Note: To avoid RuntimeWarning when using -m flag, import directly:
  from fincalc.analysis.profile import NpvProfileBuilder
  from fincalc.analysis.plot_profile import plot_npv_profile
'''

__all__ = [
    'NpvProfileBuilder',
    'plot_npv_profile',
]

# Direct imports for convenience (may cause RuntimeWarning with -m flag)
from fincalc.analysis.plot_profile import plot_npv_profile
from fincalc.analysis.profile import NpvProfileBuilder
