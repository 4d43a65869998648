"""Bank accounts whose balance may only change while they are locked."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager


class AccountError(RuntimeError):
    """Raised when an account is used in a way its lock state forbids."""


class Account:
    """An account with an identifier, an integer balance and a lock."""

    def __init__(self, id: int, balance: int) -> None:
        self.id = id
        self._balance = balance
        self._locked = False

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id!r}, balance={self._balance!r}, "
            f"locked={self._locked!r})"
        )

    @property
    def is_locked(self) -> bool:
        """Whether the account is currently locked."""
        return self._locked

    def get_balance(self) -> int:
        """Return the current balance."""
        return self._balance

    def change_balance(self, diff: int) -> None:
        """Add ``diff`` to the balance; the account must be locked first."""
        if not self._locked:
            raise AccountError("at first lock the account")
        self._balance += diff

    def lock(self) -> None:
        """Lock the account; locking it twice is an error."""
        if self._locked:
            raise AccountError("already locked")
        self._locked = True

    def unlock(self) -> None:
        """Release the lock. Unlocking an unlocked account does nothing."""
        self._locked = False

    @contextmanager
    def locked(self) -> Iterator[Account]:
        """Hold the lock for the duration of a ``with`` block."""
        self.lock()
        try:
            yield self
        finally:
            self.unlock()