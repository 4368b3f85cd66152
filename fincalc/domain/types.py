'''
Domain types for the financial calculator.

Every calculation returns a CalcResult: the computed value (or the failure
sentinel) together with an optional ErrorCode and diagnostic information.
The sentinel float is kept on failed results so callers that only want a
number can keep using it.
'''

from dataclasses import dataclass, field
from enum import Enum
import math
from typing import Any, Dict, Generic, Optional, Sequence, TypeVar

T = TypeVar('T')

CashFlowSeries = Sequence[float]


class ErrorCode(str, Enum):
  '''
  Reasons a calculation can fail.

  All of them are local validation or convergence failures; none is fatal
  to the caller.
  '''
  INVALID_RATE = 'invalid_rate'
  INVALID_PERIODS = 'invalid_periods'
  INVALID_PRINCIPAL_OR_RATE = 'invalid_principal_or_rate'
  EMPTY_SERIES = 'empty_series'
  NO_SIGN_CHANGE = 'no_sign_change'
  DEGENERATE_BASE = 'degenerate_base'
  STATIONARY_DERIVATIVE = 'stationary_derivative'
  DID_NOT_CONVERGE = 'did_not_converge'


@dataclass(frozen=True)
class CalcResult(Generic[T]):
  '''
  Outcome of a single calculation.

  Attributes:
    value: Computed value, or the sentinel (0.0 or NaN) when error is set
    error: Failure reason, None on success
    diag: Dictionary of diagnostic information
  '''
  value: T
  error: Optional[ErrorCode] = None
  diag: Dict[str, Any] = field(default_factory=dict)

  @property
  def ok(self) -> bool:
    '''True when the calculation succeeded.'''
    return self.error is None

  @property
  def message(self) -> str:
    '''Human-readable failure message, empty on success.'''
    return str(self.diag.get('message', ''))

  def to_dict(self) -> Dict[str, Any]:
    '''Convert to dictionary for DataFrame creation.'''
    result: Dict[str, Any] = {
        'value': self.value,
        'error': self.error.value if self.error else None,
    }
    result.update(self.diag)
    return result


def success(value: T, **diag: Any) -> CalcResult[T]:
  '''Create a successful CalcResult.'''
  return CalcResult(value=value, diag=diag)


def failure(code: ErrorCode, sentinel: T, message: str,
            **diag: Any) -> CalcResult[T]:
  '''Create a failed CalcResult carrying the sentinel value.'''
  return CalcResult(value=sentinel, error=code,
                    diag={'message': message, **diag})


def is_failure_sentinel(value: float) -> bool:
  '''True for the NaN sentinel used by the NPV and IRR sentinel forms.'''
  return math.isnan(value)
