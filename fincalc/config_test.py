import json

import pytest

from fincalc.config import PRESETS
from fincalc.config import SolverConfig
from fincalc.engine.irr import solve_irr


class TestSolverConfig:
  """Tests for SolverConfig dataclass."""

  def test_default(self):
    """Defaults match the solver signature."""
    config = SolverConfig.default()

    assert config.guess == 0.1
    assert config.tolerance == 1e-6
    assert config.max_iterations == 1000
    assert config == SolverConfig()

  def test_presets(self):
    """Named presets are registered."""
    assert set(PRESETS) == {'default', 'precise', 'quick'}
    assert PRESETS['precise']().tolerance == 1e-10
    assert PRESETS['quick']().max_iterations == 100

  def test_json_round_trip(self):
    """Serialize and restore."""
    config = SolverConfig(guess=0.05, tolerance=1e-8, max_iterations=50)

    assert SolverConfig.from_json(config.to_json()) == config

  def test_from_dict_partial(self):
    """Missing keys take defaults."""
    config = SolverConfig.from_dict({'guess': 0.2})

    assert config.guess == 0.2
    assert config.max_iterations == 1000

  def test_from_dict_unknown_key(self):
    """Unknown keys are rejected."""
    with pytest.raises(TypeError):
      SolverConfig.from_dict({'guess': 0.2, 'method': 'bisection'})

  def test_from_file(self, tmp_path):
    """Load from a JSON file."""
    path = tmp_path / 'solver.json'
    path.write_text(json.dumps({'tolerance': 1e-9}), encoding='utf-8')

    assert SolverConfig.from_file(path).tolerance == 1e-9

  def test_from_missing_file(self, tmp_path):
    with pytest.raises(FileNotFoundError, match='Solver config not found'):
      SolverConfig.from_file(tmp_path / 'missing.json')

  def test_solver_kwargs(self, conventional_flows):
    """Kwargs splat straight into solve_irr."""
    config = SolverConfig(max_iterations=1)
    result = solve_irr(conventional_flows, **config.solver_kwargs())

    assert result.diag['max_iterations'] == 1
