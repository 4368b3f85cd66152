import matplotlib

matplotlib.use('Agg')

import pandas as pd
import pytest

from fincalc.analysis.plot_profile import plot_npv_profile
from fincalc.analysis.profile import NpvProfileBuilder


class TestPlotNpvProfile:
  """Tests for plot_npv_profile function."""

  def test_writes_png(self, tmp_path, conventional_flows):
    """Creates missing directories and returns the path."""
    table = NpvProfileBuilder({'a': conventional_flows}).build([0.0, 0.1, 0.3])
    output = tmp_path / 'out' / 'profile.png'

    result = plot_npv_profile(table, output, {'a': 0.2489})

    assert result == output
    assert output.exists()

  def test_without_irr_markers(self, tmp_path, conventional_flows):
    table = NpvProfileBuilder({'a': conventional_flows}).build([0.0, 0.1])
    output = tmp_path / 'profile.png'

    plot_npv_profile(table, output)

    assert output.exists()

  def test_empty_table(self, tmp_path):
    with pytest.raises(ValueError, match='table cannot be empty'):
      plot_npv_profile(pd.DataFrame(), tmp_path / 'profile.png')
