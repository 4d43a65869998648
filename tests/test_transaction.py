import pytest

from banklab.account import Account, AccountError
from banklab.transaction import InvalidTransferError, Transaction


def test_default_fee_is_one():
    assert Transaction().fee == 1


def test_fee_can_be_changed():
    transaction = Transaction()
    transaction.fee = 30
    assert transaction.fee == 30


def test_same_account_rejected():
    transaction = Transaction()
    account = Account(1, 1000)
    other = Account(1, 500)
    with pytest.raises(InvalidTransferError, match="invalid action"):
        transaction.make(account, other, 200)


def test_negative_amount_rejected():
    transaction = Transaction()
    with pytest.raises(ValueError, match="sum can't be negative"):
        transaction.make(Account(1, 1000), Account(2, 1000), -5)


def test_small_amount_rejected():
    transaction = Transaction()
    with pytest.raises(InvalidTransferError, match="too small"):
        transaction.make(Account(1, 1000), Account(2, 1000), 99)


def test_fee_too_large_returns_false_and_leaves_accounts():
    transaction = Transaction(fee=60)
    source = Account(1, 1000)
    target = Account(2, 1000)
    assert transaction.make(source, target, 100) is False
    assert source.get_balance() == 1000
    assert target.get_balance() == 1000
    assert not source.is_locked and not target.is_locked


def test_successful_transfer_charges_fee(capsys):
    transaction = Transaction(fee=5)
    source = Account(1, 1000)
    target = Account(2, 500)
    amount = 200
    assert transaction.make(source, target, amount) is True
    assert source.get_balance() == 1000
    assert target.get_balance() == 500 - transaction.fee
    assert not source.is_locked and not target.is_locked
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        f"1 send to 2 ${amount}",
        "Balance 1 is 1000",
        f"Balance 2 is {target.get_balance()}",
    ]


def test_insufficient_balance_restores_target(capsys):
    transaction = Transaction(fee=3)
    source = Account(1, 1000)
    target = Account(2, transaction.fee)
    assert transaction.make(source, target, 150) is False
    assert target.get_balance() == transaction.fee
    assert source.get_balance() == 1000
    out = capsys.readouterr().out
    assert "1 send to 2 $150" in out


def test_locked_target_raises_and_releases_source():
    transaction = Transaction()
    source = Account(1, 1000)
    target = Account(2, 1000)
    target.lock()
    with pytest.raises(AccountError, match="already locked"):
        transaction.make(source, target, 200)
    assert source.is_locked is False
    assert target.get_balance() == 1000


def test_locked_source_raises():
    transaction = Transaction()
    source = Account(1, 1000)
    source.lock()
    target = Account(2, 1000)
    with pytest.raises(AccountError):
        transaction.make(source, target, 200)
    assert target.is_locked is False


def test_accounts_reusable_after_transfer():
    transaction = Transaction()
    source = Account(1, 1000)
    target = Account(2, 1000)
    first = transaction.make(source, target, 100)
    second = transaction.make(source, target, 100)
    assert first is True and second is True
    assert target.get_balance() == 1000 - 2 * transaction.fee