"""Interactive command shell for managing the bank's people and accounts."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from typing import Callable, TextIO

from minibank.models import Account, Person, TransactionError
from minibank.storage import BankStore

WELCOME = "Welcome to bank of America"
PROMPT = "Enter a command: "
INVALID = "Invalid command, please try again."

_HELP = {
    "exit": "exit - Close the program\n",
    "add": (
        "add account [account number] [account balance] [account owner id]"
        " - Add a new account with already existing owner\n"
        "add account [account number] [account balance] [owner id] [owner name]"
        " - Add a new account with a new owner\n"
        'add person [person id] "[person name]" - Add a new person\n'
    ),
    "help": "help - Show this message\n",
    "show": (
        "show account [account number] - Show the info of the account\n"
        "show person [person id] - Show the info of the person\n"
        "show - Show the info of the whole bank\n"
    ),
    "remove": (
        "remove account [account number] - Delete the account with that number\n"
        "remove person [person id] - Delete the person wwith that ID\n"
    ),
    "withdraw": (
        "withdraw [account number] [ammount]"
        " - Withdraws from the account the specific ammount\n"
    ),
    "deposit": (
        "deposit [account number] [ammount]"
        " - Deposits from the account the specific ammount\n"
    ),
}


def equals_ignore_case(first: str, second: str) -> bool:
    """Compare two strings without regard to letter case."""
    return first.lower() == second.lower()


def split_words(phrase: str, splitter: str = " ") -> list[str]:
    """Split on a single character, dropping empty pieces."""
    return [piece for piece in phrase.split(splitter) if piece]


def is_number(text: str) -> bool:
    """Return True if every character is an ASCII decimal digit."""
    return all(char in "0123456789" for char in text)


class _InvalidCommand(Exception):
    """Signals that the entered line is not a valid command."""


class BankShell:
    """Reads textual commands and applies them to a bank store."""

    def __init__(self, store: BankStore, out: TextIO | None = None) -> None:
        self._store = store
        self._out = out if out is not None else sys.stdout
        self._handlers: dict[str, Callable[[list[str], list[str]], bool]] = {
            "deposit": self._deposit,
            "withdraw": self._withdraw,
            "show": self._show,
            "remove": self._remove,
            "add": self._add,
            "help": self._help,
            "exit": self._exit,
        }

    def _say(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self._out)

    def handle(self, line: str) -> bool:
        """Execute one command line; return False once the shell should stop."""
        words = split_words(line)
        names = split_words(line, '"')
        keep_running = True
        try:
            if not words:
                raise _InvalidCommand
            handler = self._handlers.get(words[0].lower())
            if handler is None:
                raise _InvalidCommand
            keep_running = handler(words, names)
        except (_InvalidCommand, ValueError):
            self._say(INVALID)
        return keep_running

    def run(self, lines: Iterable[str]) -> None:
        """Greet the user and process lines until exit or end of input."""
        self._say(WELCOME)
        for line in lines:
            self._say(PROMPT, end="")
            if not self.handle(line.rstrip("\r\n")):
                break

    def _find_account(self, text: str) -> Account | None:
        return self._store.get_account(int(text)) if is_number(text) else None

    def _find_person(self, text: str) -> Person | None:
        return self._store.get_person(int(text)) if is_number(text) else None

    def _deposit(self, words: list[str], names: list[str]) -> bool:
        if len(words) < 3:
            raise _InvalidCommand
        account = self._find_account(words[1])
        if account is None:
            self._say("Account doesnt exist.")
            return True
        amount = float(words[2])
        try:
            account.deposit(amount)
            self._say(f"Deposited {amount:g}")
        except TransactionError:
            self._say("Deposit failed")
        self._store.update_balance(account.number, account.balance)
        return True

    def _withdraw(self, words: list[str], names: list[str]) -> bool:
        if len(words) < 3:
            raise _InvalidCommand
        account = self._find_account(words[1])
        if account is None:
            self._say("Account doesnt exist.")
            return True
        amount = float(words[2])
        try:
            account.withdraw(amount)
            self._say(f"Withdrew {amount:g}")
        except TransactionError:
            self._say("Withdraw failed")
        self._store.update_balance(account.number, account.balance)
        return True

    def _print_accounts(self) -> None:
        for account in self._store.accounts():
            self._say(f"Number : {account.number}")
            self._say(f"Balance : {account.balance}$")
            self._say(f"Owner ID : {account.owner.id}")
            self._say()

    def _print_people(self) -> None:
        for person in self._store.people():
            self._say(f"ID : {person.id}")
            self._say(f"Name : {person.name}")
            self._say()

    def _show(self, words: list[str], names: list[str]) -> bool:
        if len(words) == 2:
            target = words[1]
            if equals_ignore_case(target, "--all"):
                self._print_people()
                self._print_accounts()
            elif equals_ignore_case(target, "account"):
                self._print_accounts()
            elif equals_ignore_case(target, "person"):
                self._print_people()
            else:
                raise _InvalidCommand
            return True
        if len(words) < 3 or not is_number(words[2]):
            raise _InvalidCommand
        if equals_ignore_case(words[1], "account"):
            account = self._find_account(words[2])
            if account is None:
                self._say("Account does not exist.")
            else:
                self._say(f"Account with Number : {account.number}")
                self._say(f"Has a balance of : {account.balance}$")
                self._say(
                    f"Owned by {account.owner.name} with id : {account.owner.id}"
                )
        elif equals_ignore_case(words[1], "person"):
            person = self._find_person(words[2])
            if person is None:
                self._say("Person does not exist.")
            else:
                count, total = self._store.owner_summary(person.id)
                self._say(f"Person with ID : {person.id}")
                self._say(f"With name : {person.name}")
                self._say(f"Owns {count} accounts with a total balance of {total}$")
        else:
            raise _InvalidCommand
        return True

    def _remove(self, words: list[str], names: list[str]) -> bool:
        if len(words) < 3 or not is_number(words[2]):
            raise _InvalidCommand
        if equals_ignore_case(words[1], "account"):
            account = self._find_account(words[2])
            if account is None:
                self._say("Account does not exist.")
            else:
                self._store.delete_account(account.number)
                self._say("Delete was successfull.")
        elif equals_ignore_case(words[1], "person"):
            person = self._find_person(words[2])
            if person is None:
                self._say("Person does not exist.")
            else:
                self._store.delete_person(person.id)
                self._say("Delete was successfull.")
        else:
            raise _InvalidCommand
        return True

    def _add(self, words: list[str], names: list[str]) -> bool:
        if len(words) < 2:
            raise _InvalidCommand
        if equals_ignore_case(words[1], "account"):
            self._add_account(words, names)
        elif (
            equals_ignore_case(words[1], "person")
            and len(words) >= 3
            and is_number(words[2])
            and len(names) == 2
        ):
            if self._find_person(words[2]) is None:
                self._store.add_person(Person(int(words[2]), names[1]))
            else:
                self._say("Person with the same ID already exist.")
        else:
            raise _InvalidCommand
        return True

    def _add_account(self, words: list[str], names: list[str]) -> None:
        if len(words) < 5:
            raise _InvalidCommand
        if self._find_account(words[2]) is not None or not is_number(words[4]):
            self._say(
                f"Account with number : {words[2]} already exists or invalid data."
            )
            return
        number = int(words[2])
        balance = float(words[3])
        if len(words) == 5:
            owner = self._find_person(words[4])
            if owner is None:
                self._say(f"Person with ID : {words[4]} doesnt exist.")
            else:
                self._store.add_account(Account(number, balance, owner))
        elif len(words) >= 6 and len(names) == 2:
            if self._find_person(words[4]) is None:
                owner = Person(int(words[4]), names[1])
                self._store.add_person(owner)
                self._store.add_account(Account(number, balance, owner))
            else:
                self._say("Person with the same ID already exist.")
        else:
            raise _InvalidCommand

    def _help(self, words: list[str], names: list[str]) -> bool:
        if len(words) == 1:
            self._say("".join(_HELP.values()), end="")
        elif len(words) == 2:
            text = _HELP.get(words[1].lower())
            if text is None:
                raise _InvalidCommand
            self._say(text, end="")
        return True

    def _exit(self, words: list[str], names: list[str]) -> bool:
        self._say("Closing the program...")
        return False


def main(argv: list[str] | None = None) -> int:
    """Run the interactive bank shell on standard input."""
    parser = argparse.ArgumentParser(description="Manage bank people and accounts.")
    parser.add_argument(
        "database", nargs="?", default="Bank.db", help="path of the bank database"
    )
    args = parser.parse_args(argv)
    with BankStore(args.database) as store:
        BankShell(store, sys.stdout).run(sys.stdin)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())