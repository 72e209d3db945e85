# minibank

A small command-line bank that keeps people and their accounts in a SQLite
database file.

## Install

    pip install .

## Usage

Start the interactive shell. It reads commands from standard input and uses
`Bank.db` in the current directory unless another database path is given:

    minibank
    minibank path/to/other.db

The shell greets you, then shows `Enter a command: ` before each line it
reads. It stops at `exit` or at the end of input. These commands are
understood:

    add person [person id] "[person name]"
    add account [account number] [balance] [owner id]
    add account [account number] [balance] [owner id] "[owner name]"
    show --all
    show account
    show person
    show account [account number]
    show person [person id]
    deposit [account number] [amount]
    withdraw [account number] [amount]
    remove account [account number]
    remove person [person id]
    help [command]
    exit

Command names and the words `account`, `person` and `--all` are
case-insensitive. Names must be written in double quotes. The first form of
`add account` needs an owner that already exists; the second creates the owner
along with the account. Removing a person also removes every account they
own. A line that is not understood is answered with
`Invalid command, please try again.`

A session might look like this:

    Enter a command: add person 1 "Ada Example"
    Enter a command: add account 100 250 1
    Enter a command: deposit 100 50
    Deposited 50
    Enter a command: show person 1
    Person with ID : 1
    With name : Ada Example
    Owns 1 accounts with a total balance of 300.0$

## Library use

The same pieces are available from Python:

    from minibank.models import Person, Account
    from minibank.storage import BankStore

    with BankStore("Bank.db") as store:
        owner = Person(1, "Ada Example")
        store.add_person(owner)
        store.add_account(Account(100, 250.0, owner))
        print(store.owner_summary(1))   # (1, 250.0)

- `Person` and `Account` are dataclasses; ids, account numbers and balances
  are stored as their absolute values.
- `Account.deposit` and `Account.withdraw` return the new balance and raise
  `TransactionError` (a `ValueError`) when the amount is not positive or, for
  a withdrawal, larger than the balance. `Account.describe` returns a short
  text summary.
- `BankStore` offers `get_account`, `get_person`, `add_person`,
  `add_account`, `update_balance`, `delete_account`, `delete_person`,
  `accounts`, `people` and `owner_summary`. Adding a duplicate or an account
  whose owner is missing raises `ValueError`; updating or deleting something
  that does not exist raises `KeyError`.
- `minibank.shell.BankShell` runs the command language over any store:
  `handle(line)` executes one command and `run(lines)` processes an iterable
  of lines, writing to the stream passed as `out`.

## Limitations

Balances are plain floating-point numbers in a single unnamed currency. There
is no transaction history, no transfers between accounts and no access
control.

## Tests

    pip install .[test]
    pytest