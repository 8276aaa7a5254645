import pytest
from src.teller.domain.denomination_ledger import DenominationLedger
from src.teller.domain.denomination_set import DenominationSet
from src.teller.domain.withdrawal_result import WithdrawalOutcome
from src.teller.services.withdrawal_transaction import WithdrawalTransaction


@pytest.fixture
def transaction():
    return WithdrawalTransaction()


def create_ledger(counts) -> DenominationLedger:
    return DenominationLedger(DenominationSet.reference(), counts)


def test_direct_withdrawal_without_conversion(transaction):
    ledger = create_ledger({1: 5, 5: 5, 10: 5, 20: 5})

    result = transaction.execute(ledger, [1, 3, 5, 5, 10, 2, 20, 4])

    assert result.fulfilled
    assert result.outcome == WithdrawalOutcome.FULFILLED
    assert result.breakdowns == ()
    assert result.dispensed == {1: 3, 5: 5, 10: 2, 20: 4}
    assert ledger.counts() == {20: 1, 10: 3, 5: 0, 1: 2}


def test_conversion_commits_scratch(transaction):
    ledger = create_ledger({10: 1, 20: 2})

    result = transaction.execute(ledger, [1, 11])

    assert result.fulfilled
    assert len(result.breakdowns) == 3
    assert ledger.counts() == {20: 1, 10: 1, 5: 1, 1: 4}


def test_empty_request_succeeds_without_change(transaction):
    ledger = create_ledger({10: 1})

    result = transaction.execute(ledger, [])

    assert result.fulfilled
    assert result.outcome == WithdrawalOutcome.EMPTY_REQUEST
    assert ledger.counts() == {20: 0, 10: 1, 5: 0, 1: 0}


def test_zero_quantity_line_is_a_no_op(transaction):
    ledger = create_ledger({20: 100})

    result = transaction.execute(ledger, [20, 0])

    assert result.fulfilled
    assert result.dispensed == {}
    assert ledger.quantity(20) == 100


@pytest.mark.parametrize("values, outcome", [
    ([1], WithdrawalOutcome.MALFORMED_REQUEST),
    ([1, 100, 5], WithdrawalOutcome.MALFORMED_REQUEST),
    ([11, 2], WithdrawalOutcome.UNSUPPORTED_DENOMINATION),
    ([1, -10], WithdrawalOutcome.NEGATIVE_QUANTITY),
    ([1, 100, 5, -10], WithdrawalOutcome.NEGATIVE_QUANTITY),
])
def test_invalid_requests_fail_without_change(transaction, values, outcome):
    ledger = create_ledger({1: 100, 5: 100, 10: 100, 20: 100})

    result = transaction.execute(ledger, values)

    assert not result.fulfilled
    assert result.outcome == outcome
    assert result.detail
    assert ledger.counts() == {20: 100, 10: 100, 5: 100, 1: 100}


def test_failing_line_rolls_back_earlier_lines(transaction):
    ledger = create_ledger({20: 1, 1: 2})

    # 20 is taken first, leaving nothing to break for the 1s
    result = transaction.execute(ledger, [20, 1, 1, 5])

    assert not result.fulfilled
    assert result.outcome == WithdrawalOutcome.INSUFFICIENT_SUPPLY
    assert ledger.counts() == {20: 1, 10: 0, 5: 0, 1: 2}


def test_largest_first_lets_later_lines_use_change(transaction):
    ledger = create_ledger({20: 1})

    result = transaction.execute(ledger, [5, 2, 10, 1])

    assert result.fulfilled
    assert ledger.counts() == {20: 0, 10: 0, 5: 0, 1: 0}


def test_repeated_lines_accumulate(transaction):
    ledger = create_ledger({10: 3})

    result = transaction.execute(ledger, [10, 1, 10, 1])

    assert result.fulfilled
    assert result.dispensed == {10: 2}
    assert ledger.quantity(10) == 1
