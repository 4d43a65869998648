"""Transfers of money between two accounts for a fee."""

from __future__ import annotations

from .account import Account


class InvalidTransferError(ValueError):
    """Raised when a transfer request is not acceptable."""


class Transaction:
    """Moves money between accounts, charging a fixed fee."""

    def __init__(self, fee: int = 1) -> None:
        self.fee = fee

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fee={self.fee!r})"

    def make(self, source: Account, target: Account, amount: int) -> bool:
        """Carry out a transfer and report whether it succeeded.

        Raises ``InvalidTransferError`` for a transfer to the same account or
        one that is too small, and ``ValueError`` for a negative amount.
        Returns ``False`` without touching the accounts when the fee is too
        large for the amount.
        """
        if source.id == target.id:
            raise InvalidTransferError("invalid action")
        if amount < 0:
            raise ValueError("sum can't be negative")
        if amount < 100:
            raise InvalidTransferError("too small")
        if self.fee * 2 > amount:
            return False

        with source.locked(), target.locked():
            self._credit(target, amount)
            success = self._debit(target, amount + self.fee)
            if not success:
                target.change_balance(-amount)
            self.save_to_database(source, target, amount)
        return success

    @staticmethod
    def _credit(account: Account, amount: int) -> None:
        assert amount > 0
        account.change_balance(amount)

    @staticmethod
    def _debit(account: Account, amount: int) -> bool:
        assert amount > 0
        if account.get_balance() > amount:
            account.change_balance(-amount)
            return True
        return False

    def save_to_database(self, source: Account, target: Account, amount: int) -> None:
        """Record the transfer and both resulting balances."""
        print(f"{source.id} send to {target.id} ${amount}")
        print(f"Balance {source.id} is {source.get_balance()}")
        print(f"Balance {target.id} is {target.get_balance()}")