"""Domain objects: people who own accounts and the accounts themselves."""

from __future__ import annotations

from dataclasses import dataclass, field


class TransactionError(ValueError):
    """Raised when a deposit or withdrawal cannot be carried out."""


@dataclass
class Person:
    """An account holder. The identifier is always stored as a non-negative number."""

    id: int = 0
    name: str = ""

    def __post_init__(self) -> None:
        self.id = abs(int(self.id))


@dataclass
class Account:
    """A bank account with a non-negative number and balance and an owner."""

    number: int
    balance: float
    owner: Person = field(default_factory=Person)

    def __post_init__(self) -> None:
        self.number = abs(int(self.number))
        self.balance = abs(float(self.balance))

    def deposit(self, amount: float) -> float:
        """Add a positive amount to the balance and return the new balance."""
        if not amount > 0:
            raise TransactionError("Deposit failed")
        self.balance += amount
        return self.balance

    def withdraw(self, amount: float) -> float:
        """Take a positive amount no larger than the balance; return the new balance."""
        if not (amount > 0 and amount <= self.balance):
            raise TransactionError("Withdraw failed")
        self.balance -= amount
        return self.balance

    def describe(self) -> str:
        """Return a multi-line human-readable summary of the account."""
        return (
            f"Account Number: {self.number}\n"
            f"Balance: {self.balance:g}\n"
            f"Owner: {self.owner.id}  {self.owner.name}"
        )