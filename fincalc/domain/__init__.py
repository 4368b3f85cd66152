"""Domain types for the financial calculator."""

from fincalc.domain.types import CalcResult
from fincalc.domain.types import CashFlowSeries
from fincalc.domain.types import ErrorCode
from fincalc.domain.types import failure
from fincalc.domain.types import is_failure_sentinel
from fincalc.domain.types import success

__all__ = [
    'CalcResult',
    'CashFlowSeries',
    'ErrorCode',
    'failure',
    'is_failure_sentinel',
    'success',
]
