"""
Solver configuration for IRR calculations.

SolverConfig is a serializable (JSON-friendly) description of the Newton
iteration parameters. It is passed per call; nothing here is global state.
"""

from dataclasses import asdict
from dataclasses import dataclass
import json
from pathlib import Path
from typing import Any

from fincalc.engine.irr import DEFAULT_GUESS
from fincalc.engine.irr import DEFAULT_MAX_ITERATIONS
from fincalc.engine.irr import DEFAULT_TOLERANCE


@dataclass(frozen=True)
class SolverConfig:
  """
  Newton-Raphson parameters for the IRR solver.

  Attributes:
    guess: Starting rate for the iteration
    tolerance: Absolute tolerance on |NPV| at the returned rate
    max_iterations: Cap on Newton steps before giving up
  """
  guess: float = DEFAULT_GUESS
  tolerance: float = DEFAULT_TOLERANCE
  max_iterations: int = DEFAULT_MAX_ITERATIONS

  @classmethod
  def default(cls) -> 'SolverConfig':
    """Guess 10%, tolerance 1e-6, 1000 iterations."""
    return cls()

  @classmethod
  def precise(cls) -> 'SolverConfig':
    """Tight tolerance for reporting IRR to many decimals."""
    return cls(tolerance=1e-10)

  @classmethod
  def quick(cls) -> 'SolverConfig':
    """Loose tolerance and a short iteration cap, for large grids."""
    return cls(tolerance=1e-4, max_iterations=100)

  def solver_kwargs(self) -> dict[str, Any]:
    """Keyword arguments for fincalc.engine.irr.solve_irr."""
    return self.to_dict()

  def to_dict(self) -> dict[str, Any]:
    """Convert to dictionary."""
    return asdict(self)

  def to_json(self) -> str:
    """Serialize to JSON string."""
    return json.dumps(self.to_dict(), indent=2)

  @classmethod
  def from_dict(cls, data: dict[str, Any]) -> 'SolverConfig':
    """Create from dictionary."""
    return cls(**data)

  @classmethod
  def from_json(cls, json_str: str) -> 'SolverConfig':
    """Create from JSON string."""
    return cls.from_dict(json.loads(json_str))

  @classmethod
  def from_file(cls, path: Path) -> 'SolverConfig':
    """Load from a JSON file."""
    if not path.exists():
      raise FileNotFoundError(f'Solver config not found: {path}')
    return cls.from_json(path.read_text(encoding='utf-8'))


PRESETS = {
    'default': SolverConfig.default,
    'precise': SolverConfig.precise,
    'quick': SolverConfig.quick,
}
