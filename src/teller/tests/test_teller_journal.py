import pytest
from datetime import datetime, timezone
from uuid import UUID, uuid4
from src.teller.domain.breakdown import Breakdown
from src.teller.domain.cash_request import RequestLine
from src.teller.domain.teller_event import TellerEventKind
from src.teller.interfaces.teller_id_source import TellerIdSource
from src.teller.interfaces.teller_time_source import TellerTimeSource
from src.teller.services.limited_teller_machine import LimitedTellerMachine
from src.teller.store.teller_journal import TellerJournal


# --- Mocks ---

class FixedTimeSource(TellerTimeSource):
    def __init__(self, fixed_time: datetime):
        self.fixed_time = fixed_time

    def now(self) -> datetime:
        return self.fixed_time


class FixedIdSource(TellerIdSource):
    def __init__(self, fixed_id: UUID):
        self.fixed_id = fixed_id

    def new_id(self) -> UUID:
        return self.fixed_id


# --- Fixtures ---

@pytest.fixture
def fixed_time():
    return datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_id():
    return uuid4()


@pytest.fixture
def journal():
    return TellerJournal()


@pytest.fixture
def machine(journal, fixed_time, fixed_id):
    return LimitedTellerMachine(
        journal=journal,
        time_source=FixedTimeSource(fixed_time),
        id_source=FixedIdSource(fixed_id),
    )


# --- Tests ---

def test_deposit_is_journaled(machine, journal, fixed_time, fixed_id):
    machine.deposit(10, 1, 20, 2, 10, 1)

    history = journal.get_history()
    assert len(history) == 1
    event = history[0]
    assert event.id == fixed_id
    assert event.timestamp == fixed_time
    assert event.kind == TellerEventKind.DEPOSIT
    assert event.lines == (RequestLine(20, 2), RequestLine(10, 2))
    assert event.value == 60


def test_withdrawal_is_journaled_with_breakdowns(machine, journal):
    machine.deposit(10, 1, 20, 2)
    assert machine.withdraw(1, 11)

    event = journal.get_history()[-1]
    assert event.kind == TellerEventKind.WITHDRAWAL
    assert event.lines == (RequestLine(1, 11),)
    assert event.breakdowns[0] == Breakdown(20, 1, 10, 2)


def test_failures_and_no_ops_are_not_journaled(machine, journal):
    machine.deposit(10, 3)
    with pytest.raises(ValueError):
        machine.deposit(10, 1, 3, 1)
    machine.deposit()
    machine.deposit(5, 0)
    assert not machine.withdraw(1, 31)
    assert machine.withdraw()
    assert machine.withdraw(10, 0)

    assert len(journal.get_history()) == 1


def test_net_value_matches_holdings(machine, journal):
    machine.deposit(20, 3, 1, 4)
    machine.withdraw(5, 3, 1, 6)
    machine.deposit(10, 2)
    machine.withdraw(20, 1)

    assert journal.net_value() == machine.total_value()


def test_history_is_a_copy(machine):
    machine.deposit(1, 1)
    machine.history().clear()
    assert len(machine.history()) == 1


def test_journal_can_be_disabled():
    machine = LimitedTellerMachine(journal_enabled=False)
    machine.deposit(1, 1)

    assert machine.journal is None
    assert machine.history() == []
