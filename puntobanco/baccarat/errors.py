"""Exceptions raised by the baccarat package."""

from typing import Optional

from puntobanco.common.shoe import ShoeExhaustedError


class BaccaratError(Exception):
    """Base class for baccarat errors."""


class InvalidBetError(BaccaratError, ValueError):
    """Raised when a bet breaks the table's betting rules."""

    def __init__(self, message: str, area: Optional[str] = None):
        super().__init__(message)
        self.area = area


class InsufficientFundsError(BaccaratError):
    """Raised when a stake exceeds the available balance."""

    def __init__(self, balance: float, amount: float):
        super().__init__(f"Insufficient balance: {balance:.2f} available, {amount:.2f} required")
        self.balance = balance
        self.amount = amount


__all__ = ["BaccaratError", "InvalidBetError", "InsufficientFundsError", "ShoeExhaustedError"]
