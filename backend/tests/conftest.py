import pytest

from dangi.schemas import Expense, Participant, Settlement, Share


def equal_expense(expense_id, amount, payer_id, participant_ids):
    share = amount / len(participant_ids)
    return Expense(
        id=expense_id,
        amount=amount,
        payer_id=payer_id,
        shares=[Share(participant_id=pid, amount=share) for pid in participant_ids],
    )


@pytest.fixture
def participants():
    return [
        Participant(id="a", name="علی"),
        Participant(id="b", name="سارا"),
        Participant(id="c", name="رضا"),
    ]


@pytest.fixture
def trip_expenses():
    return [
        equal_expense("e1", 300, "a", ["a", "b", "c"]),
        equal_expense("e2", 150, "b", ["a", "b", "c"]),
    ]


@pytest.fixture
def make_settlement():
    def _make(from_id, to_id, amount, settlement_id=None):
        return Settlement(id=settlement_id, from_id=from_id, to_id=to_id, amount=amount)
    return _make
