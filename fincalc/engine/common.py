"""
Numeric helpers shared by the calculation engine.

Pure functions, plus reject() which writes the one-line diagnostic for a
failed calculation before handing back the sentinel result.
"""

import logging
from typing import Any, List, Sequence, TypeVar

from fincalc.domain.types import CalcResult, ErrorCode, failure

T = TypeVar('T')


def reject(log: logging.Logger, level: int, code: ErrorCode, sentinel: T,
           message: str, **diag: Any) -> CalcResult[T]:
  """
  Log a failure diagnostic and build the failed CalcResult.

  Args:
    log: Logger of the module that detected the failure
    level: Logging level for the diagnostic
    code: Failure reason
    sentinel: Value to report in place of a result (0.0 or NaN)
    message: Human-readable, single-line diagnostic
    **diag: Extra diagnostic context stored on the result

  Returns:
    CalcResult with error set and value equal to the sentinel
  """
  log.log(level, message)
  return failure(code, sentinel, message, **diag)


def discount_denominators(rate: float, periods: int) -> List[float]:
  """
  Compute [(1+rate)^0, (1+rate)^1, ..., (1+rate)^periods].

  Built by running multiplication so each power is computed once per
  evaluation. Overflow saturates to inf and underflow to 0.0, as with
  IEEE pow; callers check for 0.0 before dividing.
  """
  base = 1.0 + rate
  out = [1.0]
  for _ in range(periods):
    out.append(out[-1] * base)
  return out


def safe_pow(base: float, exponent: float) -> float:
  """
  base ** exponent, saturating to 0.0 or +/-inf instead of raising.

  Also covers integer exponents too large to convert to float (e.g. 10**400
  periods), where Python raises OverflowError before computing anything.
  """
  try:
    return base**exponent
  except OverflowError:
    pass
  if abs(base) == 1.0:
    magnitude = 1.0
  elif (abs(base) > 1.0) == (exponent > 0):
    magnitude = float('inf')
  else:
    magnitude = 0.0
  odd = is_integral(exponent) and int(exponent) % 2 == 1
  return -magnitude if base < 0 and odd else magnitude


def has_sign_change(values: Sequence[float]) -> bool:
  """True if values hold at least one strictly negative and one strictly positive entry."""
  has_negative = any(v < 0 for v in values)
  has_positive = any(v > 0 for v in values)
  return has_negative and has_positive


def is_integral(x: float) -> bool:
  """True if x is a finite whole number (e.g. 5, 5.0 or 10**400)."""
  if isinstance(x, int):
    return True
  try:
    return float(x).is_integer()
  except (TypeError, ValueError, OverflowError):
    return False
