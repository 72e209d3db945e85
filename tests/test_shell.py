import io

import pytest

from minibank.models import Account, Person
from minibank.shell import (
    INVALID,
    BankShell,
    equals_ignore_case,
    is_number,
    main,
    split_words,
)
from minibank.storage import BankStore


@pytest.fixture
def env(tmp_path):
    store = BankStore(tmp_path / "bank.db")
    out = io.StringIO()
    yield BankShell(store, out), store, out
    store.close()


def test_equals_ignore_case():
    assert equals_ignore_case("Exit", "EXIT") is True
    assert equals_ignore_case("ab", "abc") is False
    assert equals_ignore_case("abc", "abd") is False


def test_split_words_drops_empty_pieces():
    assert split_words("  add   person 1 ") == ["add", "person", "1"]
    assert split_words('add person 1 "John Doe"', '"') == ["add person 1 ", "John Doe"]
    assert split_words("") == []


def test_is_number():
    assert is_number("123") is True
    assert is_number("12a") is False
    assert is_number("-1") is False
    assert is_number("1.5") is False


def test_add_person(env):
    shell, store, out = env
    assert shell.handle('add person 7 "John Doe"') is True
    assert store.get_person(7) == Person(7, "John Doe")
    assert out.getvalue() == ""


def test_add_person_duplicate(env):
    shell, store, out = env
    shell.handle('add person 7 "Ann"')
    shell.handle('add person 7 "Bob"')
    assert "Person with the same ID already exist." in out.getvalue()
    assert store.get_person(7).name == "Ann"


def test_add_person_without_quotes_is_invalid(env):
    shell, store, out = env
    shell.handle("add person 7 Ann")
    assert INVALID in out.getvalue()
    assert store.get_person(7) is None


def test_add_account_existing_owner(env):
    shell, store, out = env
    shell.handle('add person 3 "Ann"')
    shell.handle("add account 10 250 3")
    account = store.get_account(10)
    assert account.balance == 250.0
    assert account.owner == Person(3, "Ann")


def test_add_account_missing_owner(env):
    shell, store, out = env
    shell.handle("add account 10 250 3")
    assert "Person with ID : 3 doesnt exist." in out.getvalue()
    assert store.get_account(10) is None


def test_add_account_new_owner(env):
    shell, store, out = env
    shell.handle('add account 11 40 4 "Jane Roe"')
    assert store.get_person(4) == Person(4, "Jane Roe")
    assert store.get_account(11).owner.id == 4


def test_add_account_existing_number(env):
    shell, store, out = env
    store.add_person(Person(1, "Ann"))
    store.add_account(Account(10, 5, Person(1, "Ann")))
    shell.handle("add account 10 99 1")
    assert "Account with number : 10 already exists or invalid data." in out.getvalue()
    assert store.get_account(10).balance == 5.0


def test_deposit(env):
    shell, store, out = env
    store.add_person(Person(1, "Ann"))
    store.add_account(Account(10, 100, Person(1, "Ann")))
    shell.handle("deposit 10 50")
    assert "Deposited 50" in out.getvalue()
    assert store.get_account(10).balance == 150.0


def test_deposit_negative_fails(env):
    shell, store, out = env
    store.add_person(Person(1, "Ann"))
    store.add_account(Account(10, 100, Person(1, "Ann")))
    shell.handle("deposit 10 -5")
    assert "Deposit failed" in out.getvalue()
    assert store.get_account(10).balance == 100.0


def test_withdraw_and_overdraw(env):
    shell, store, out = env
    store.add_person(Person(1, "Ann"))
    store.add_account(Account(10, 100, Person(1, "Ann")))
    shell.handle("withdraw 10 30")
    assert store.get_account(10).balance == 70.0
    shell.handle("withdraw 10 1000")
    assert "Withdraw failed" in out.getvalue()
    assert store.get_account(10).balance == 70.0


def test_deposit_missing_account(env):
    shell, store, out = env
    shell.handle("deposit 99 5")
    assert out.getvalue() == "Account doesnt exist.\n"


def test_deposit_bad_amount_is_invalid(env):
    shell, store, out = env
    store.add_person(Person(1, "Ann"))
    store.add_account(Account(10, 100, Person(1, "Ann")))
    shell.handle("deposit 10 lots")
    assert INVALID in out.getvalue()
    assert store.get_account(10).balance == 100.0


def test_remove_person_cascades(env):
    shell, store, out = env
    shell.handle('add account 10 5 1 "Ann"')
    shell.handle("remove person 1")
    assert "Delete was successfull." in out.getvalue()
    assert store.get_person(1) is None
    assert store.get_account(10) is None


def test_remove_missing_account(env):
    shell, store, out = env
    shell.handle("remove account 42")
    assert out.getvalue() == "Account does not exist.\n"


def test_show_account(env):
    shell, store, out = env
    shell.handle('add account 10 5 1 "Ann"')
    shell.handle("show account 10")
    text = out.getvalue()
    assert "Account with Number : 10" in text
    assert "Owned by Ann with id : 1" in text


def test_show_person_summary(env):
    shell, store, out = env
    shell.handle('add account 10 5 1 "Ann"')
    shell.handle("add account 11 7 1")
    shell.handle("show person 1")
    text = out.getvalue()
    assert "Person with ID : 1" in text
    assert "With name : Ann" in text
    assert "Owns 2 accounts" in text


def test_show_all_lists_everyone(env):
    shell, store, out = env
    shell.handle('add account 10 5 1 "Ann"')
    shell.handle("show --all")
    text = out.getvalue()
    assert "Name : Ann" in text
    assert "Number : 10" in text
    assert text.index("Name : Ann") < text.index("Number : 10")


def test_show_alone_is_invalid(env):
    shell, store, out = env
    shell.handle("show")
    assert out.getvalue() == INVALID + "\n"


def test_help_lists_every_command(env):
    shell, store, out = env
    shell.handle("help")
    text = out.getvalue()
    for name in ("exit", "add", "help", "show", "remove", "withdraw", "deposit"):
        assert f"\n{name} " in "\n" + text


def test_help_single_and_unknown(env):
    shell, store, out = env
    shell.handle("help exit")
    assert out.getvalue() == "exit - Close the program\n"
    shell.handle("help nothing")
    assert out.getvalue().endswith(INVALID + "\n")


@pytest.mark.parametrize("line", ["", "   ", "fly away", "remove account"])
def test_invalid_lines(env, line):
    shell, store, out = env
    assert shell.handle(line) is True
    assert out.getvalue() == INVALID + "\n"


def test_exit_is_case_insensitive(env):
    shell, store, out = env
    assert shell.handle("EXIT") is False
    assert out.getvalue() == "Closing the program...\n"


def test_run_stops_at_exit(env):
    shell, store, out = env
    shell.run(['add person 1 "Ann"\n', "exit\n", 'add person 2 "Bob"\n'])
    assert store.get_person(1) is not None and store.get_person(2) is None
    assert out.getvalue().startswith("Welcome to bank of America\n")


def test_main_reads_stdin(tmp_path, monkeypatch, capsys):
    db = tmp_path / "main.db"
    monkeypatch.setattr("sys.stdin", io.StringIO('add person 5 "Eve"\nexit\n'))
    assert main([str(db)]) == 0
    assert "Closing the program..." in capsys.readouterr().out
    with BankStore(db) as store:
        assert store.get_person(5) == Person(5, "Eve")