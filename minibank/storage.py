"""SQLite-backed persistence for people and accounts."""

from __future__ import annotations

import os
import sqlite3

from minibank.models import Account, Person

_SCHEMA = (
    "create table if not exists Person("
    "id int primary key, name varchar(255) not null)",
    "create table if not exists Account("
    "accountNumber int primary key, balance double, owner int not null, "
    "foreign key(owner) references Person(id) on delete cascade)",
)

_ACCOUNT_QUERY = (
    "select a.accountNumber, a.balance, p.id, p.name "
    "from Account a left join Person p on p.id = a.owner"
)


def _account_from_row(row: tuple) -> Account:
    number, balance, owner_id, owner_name = row
    owner = Person(owner_id, owner_name) if owner_id is not None else Person()
    return Account(number, balance, owner)


class BankStore:
    """A bank database holding people and the accounts they own."""

    def __init__(self, path: str | os.PathLike = "Bank.db") -> None:
        self._conn = sqlite3.connect(os.fspath(path))
        self._conn.execute("PRAGMA foreign_keys = ON")
        with self._conn:
            for statement in _SCHEMA:
                self._conn.execute(statement)

    def close(self) -> None:
        """Close the underlying database connection."""
        self._conn.close()

    def __enter__(self) -> BankStore:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def get_account(self, number: int) -> Account | None:
        """Return the account with this number, or None if there is none."""
        row = self._conn.execute(
            _ACCOUNT_QUERY + " where a.accountNumber = ?", (number,)
        ).fetchone()
        return _account_from_row(row) if row else None

    def get_person(self, person_id: int) -> Person | None:
        """Return the person with this id, or None if there is none."""
        row = self._conn.execute(
            "select id, name from Person where id = ?", (person_id,)
        ).fetchone()
        return Person(*row) if row else None

    def add_person(self, person: Person) -> None:
        """Store a new person; raise ValueError if the id is taken."""
        if self.get_person(person.id) is not None:
            raise ValueError(f"Person with ID {person.id} already exists")
        with self._conn:
            self._conn.execute(
                "insert into Person values (?, ?)", (person.id, person.name)
            )

    def add_account(self, account: Account) -> None:
        """Store a new account whose owner already exists."""
        if self.get_account(account.number) is not None:
            raise ValueError(f"Account with number {account.number} already exists")
        if self.get_person(account.owner.id) is None:
            raise ValueError(f"Person with ID {account.owner.id} doesn't exist")
        with self._conn:
            self._conn.execute(
                "insert into Account values (?, ?, ?)",
                (account.number, account.balance, account.owner.id),
            )

    def update_balance(self, number: int, balance: float) -> None:
        """Set the balance of an existing account; raise KeyError if missing."""
        with self._conn:
            cursor = self._conn.execute(
                "update Account set balance = ? where accountNumber = ?",
                (balance, number),
            )
        if cursor.rowcount == 0:
            raise KeyError(number)

    def delete_account(self, number: int) -> None:
        """Remove an account; raise KeyError if it does not exist."""
        with self._conn:
            cursor = self._conn.execute(
                "delete from Account where accountNumber = ?", (number,)
            )
        if cursor.rowcount == 0:
            raise KeyError(number)

    def delete_person(self, person_id: int) -> None:
        """Remove a person and, with them, every account they own."""
        with self._conn:
            cursor = self._conn.execute(
                "delete from Person where id = ?", (person_id,)
            )
        if cursor.rowcount == 0:
            raise KeyError(person_id)

    def accounts(self) -> list[Account]:
        """Return every account in the order they were added."""
        rows = self._conn.execute(_ACCOUNT_QUERY + " order by a.rowid").fetchall()
        return [_account_from_row(row) for row in rows]

    def people(self) -> list[Person]:
        """Return every person in the order they were added."""
        rows = self._conn.execute(
            "select id, name from Person order by rowid"
        ).fetchall()
        return [Person(*row) for row in rows]

    def owner_summary(self, person_id: int) -> tuple[int, float]:
        """Return how many accounts a person owns and their total balance."""
        count, total = self._conn.execute(
            "select count(*), coalesce(sum(balance), 0) from Account where owner = ?",
            (person_id,),
        ).fetchone()
        return int(count), float(total)