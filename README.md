# banklab

A small library that models bank accounts and money transfers between them.

## Accounts

`banklab.account.Account(id, balance)` holds an identifier (`id`) and an
integer balance.

- `get_balance()` returns the current balance.
- `change_balance(diff)` adds `diff` to the balance. The account must be
  locked first, otherwise `AccountError` is raised.
- `lock()` locks the account; locking an account that is already locked
  raises `AccountError`.
- `unlock()` releases the lock; unlocking an unlocked account does nothing.
- `is_locked` tells whether the account is currently locked.
- `locked()` is a context manager that locks the account on entry and
  unlocks it on exit, even when the block raises.

`AccountError` is a subclass of `RuntimeError`.

```python
from banklab.account import Account

acc = Account(1, 500)
with acc.locked():
    acc.change_balance(-100)
print(acc.get_balance())  # 400
```

## Transactions

`banklab.transaction.Transaction(fee=1)` carries out transfers and charges a
fixed fee, kept in its `fee` attribute.

`make(source, target, amount)` checks the request in this order:

1. both accounts have the same `id`: raises `InvalidTransferError`;
2. `amount` is negative: raises `ValueError`;
3. `amount` is below 100: raises `InvalidTransferError`;
4. twice the fee is larger than `amount`: returns `False` and leaves both
   accounts untouched.

Otherwise it locks both accounts for the duration of the transfer (so an
account that is already locked makes it raise `AccountError`), and then:

- credits `target` with `amount`;
- debits `target` by `amount + fee` if its balance is strictly greater than
  that; if not, the credit is taken back;
- calls `save_to_database(source, target, amount)`;
- returns whether the debit succeeded.

The balance of `source` is not changed by `make`. `InvalidTransferError` is a
subclass of `ValueError`.

```python
from banklab.account import Account
from banklab.transaction import Transaction

source = Account(1, 1000)
target = Account(2, 200)
ok = Transaction().make(source, target, 300)
# ok is True; target ends at 200 + 300 - 301 = 199
```

`save_to_database` prints a three-line summary to standard output:

```
1 send to 2 $300
Balance 1 is 1000
Balance 2 is 199
```

Override it in a subclass to record transfers elsewhere.

## Greeting

```python
from banklab.greeting import hello

hello()  # "Hello, future!"
```

## What the package does not do

There is no persistent storage: accounts live only in memory, and
`save_to_database` only prints. The package has no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```