'''
Chart an NPV profile.

Draws NPV against discount rate for each series, with the zero line and the
solved IRR marked, and saves the figure as PNG.
'''

import logging
from pathlib import Path
from typing import Mapping, Optional

import matplotlib.pyplot as plt
import pandas as pd

logger = logging.getLogger(__name__)


def plot_npv_profile(
    table: pd.DataFrame,
    output_path: Path,
    irr_by_series: Optional[Mapping[str, float]] = None,
) -> Path:
  '''
  Plot an NPV profile table built by NpvProfileBuilder.

  Args:
      table: Discount rates as index, series names as columns
      output_path: Where to write the PNG (parent directories are created)
      irr_by_series: Converged IRR per series name, drawn as markers

  Returns:
      The path written
  '''
  if table.empty:
    raise ValueError('table cannot be empty')

  rates_pct = [r * 100 for r in table.index]

  _, ax = plt.subplots(figsize=(12, 7))

  for name in table.columns:
    ax.plot(rates_pct,
            table[name].tolist(),
            'o-',
            label=str(name),
            linewidth=2,
            markersize=5,
            alpha=0.8)

  for name, rate in (irr_by_series or {}).items():
    ax.plot([rate * 100], [0.0],
            'D',
            color='red',
            markersize=8,
            label=f'IRR {name}: {rate:.2%}')

  ax.axhline(0.0, color='black', linewidth=1)
  ax.set_xlabel('Discount Rate (%)', fontsize=12, fontweight='bold')
  ax.set_ylabel('Net Present Value ($)', fontsize=12, fontweight='bold')
  ax.set_title('NPV Profile', fontsize=14, fontweight='bold', pad=20)
  ax.legend(loc='best', fontsize=11, framealpha=0.9)
  ax.grid(True, alpha=0.3, linestyle='--')

  plt.tight_layout()

  output_path.parent.mkdir(parents=True, exist_ok=True)
  plt.savefig(output_path, dpi=150, bbox_inches='tight')
  logger.info('Saved: %s', output_path)

  plt.close()
  return output_path
