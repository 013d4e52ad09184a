from __future__ import annotations

from decimal import Context, Decimal, Inexact, localcontext
from threading import Lock
from typing import Union

Amount = Union[Decimal, int, str]

# Balance arithmetic must never round; an inexact result is refused instead.
EXACT_CONTEXT = Context(prec=28, traps=[Inexact])


def _to_decimal(value: Amount) -> Decimal:
    if isinstance(value, float):
        raise TypeError("Use Decimal, int or str for money, not float")
    if not isinstance(value, Decimal):
        value = Decimal(value)
    try:
        with localcontext(EXACT_CONTEXT):
            return +value
    except Inexact as exc:
        raise ValueError(
            f"{value} has more than {EXACT_CONTEXT.prec} significant digits"
        ) from exc


class Account:
    """Balance holder guarded by its own lock.

    ``withdraw`` and ``deposit`` are the only ways to mutate the balance and
    each one holds the lock for a single check-and-mutate. No caller ever
    holds two account locks at once. Both primitives return ``False`` and
    leave the balance untouched when the result cannot be held exactly.
    """

    def __init__(self, account_id: str, balance: Amount = Decimal("0")) -> None:
        if not account_id:
            raise ValueError("Account id must not be empty")
        balance = _to_decimal(balance)
        if balance < 0:
            raise ValueError("Initial balance must be positive.")

        self._account_id = account_id
        self._balance = balance
        self._lock = Lock()

    def __repr__(self) -> str:
        return f"Account({self._account_id!r}, balance={self.balance})"

    @property
    def account_id(self) -> str:
        return self._account_id

    @property
    def balance(self) -> Decimal:
        with self._lock:
            return self._balance

    def withdraw(self, amount: Amount) -> bool:
        amount = _check_amount(amount)
        with self._lock:
            if self._balance < amount:
                return False
            try:
                with localcontext(EXACT_CONTEXT):
                    self._balance -= amount
            except Inexact:
                return False
            return True

    def deposit(self, amount: Amount) -> bool:
        amount = _check_amount(amount)
        with self._lock:
            try:
                with localcontext(EXACT_CONTEXT):
                    self._balance += amount
            except Inexact:
                return False
            return True


def _check_amount(amount: Amount) -> Decimal:
    amount = _to_decimal(amount)
    if amount < 0:
        raise ValueError(f"Amount must not be negative: {amount}")
    return amount
