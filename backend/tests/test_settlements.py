import pytest

from dangi.errors import SelfSettlementError, UnknownParticipantError
from dangi.schemas import ParticipantBalance, Settlement
from dangi.services.balance_calculator import calculate_balances
from dangi.services.settlement_calculator import calculate_optimal_settlements, validate_settlement

from conftest import equal_expense


def _balance(pid, amount):
    return ParticipantBalance(
        participant_id=pid, participant_name=pid.upper(), total_paid=0, total_share=0, balance=amount,
    )


def test_settlements_single_transfer(participants, trip_expenses):
    balances = calculate_balances(trip_expenses, participants)
    settlements = calculate_optimal_settlements(balances)
    assert len(settlements) == 1
    s = settlements[0]
    assert (s.from_id, s.to_id, s.amount) == ("c", "a", 150)
    assert (s.from_name, s.to_name) == ("رضا", "علی")


def test_settlements_largest_first():
    balances = [_balance("a", 50), _balance("b", 100), _balance("c", -30), _balance("d", -120)]
    settlements = calculate_optimal_settlements(balances)
    assert [(s.from_id, s.to_id, s.amount) for s in settlements] == [
        ("d", "b", 100),
        ("d", "a", 20),
        ("c", "a", 30),
    ]


def test_settled_balances_are_skipped():
    balances = [_balance("a", 0.005), _balance("b", -0.005), _balance("c", 0)]
    assert calculate_optimal_settlements(balances) == []


def test_settlement_amounts_are_rounded_to_whole_units():
    balances = [_balance("a", 100.5), _balance("b", -50.25), _balance("c", -50.25)]
    settlements = calculate_optimal_settlements(balances)
    assert [s.amount for s in settlements] == [50, 50]


def test_input_balances_are_not_mutated():
    balances = [_balance("a", 100), _balance("b", -100)]
    calculate_optimal_settlements(balances)
    assert [b.balance for b in balances] == [100, -100]


def test_transfer_count_bound():
    balances = [
        _balance("a", 400), _balance("b", 250), _balance("c", 50),
        _balance("d", -300), _balance("e", -200), _balance("f", -125), _balance("g", -75),
    ]
    settlements = calculate_optimal_settlements(balances)
    assert len(settlements) <= 3 + 4 - 1


def test_replaying_suggestions_settles_everyone(participants):
    expenses = [
        equal_expense("e1", 900, "a", ["a", "b", "c"]),
        equal_expense("e2", 600, "b", ["a", "b", "c"]),
        equal_expense("e3", 120, "c", ["b", "c"]),
    ]
    balances = calculate_balances(expenses, participants)
    suggested = calculate_optimal_settlements(balances)
    replayed = [Settlement(from_id=s.from_id, to_id=s.to_id, amount=s.amount) for s in suggested]

    after = calculate_balances(expenses, participants, replayed)
    assert all(abs(b.balance) < 0.01 for b in after)
    assert calculate_optimal_settlements(after) == []


def test_validate_settlement(participants, make_settlement):
    validate_settlement(make_settlement("a", "b", 10), participants)


def test_validate_settlement_same_person(participants, make_settlement):
    with pytest.raises(SelfSettlementError):
        validate_settlement(make_settlement("a", "a", 10), participants)


def test_validate_settlement_outsider(participants, make_settlement):
    with pytest.raises(UnknownParticipantError) as exc:
        validate_settlement(make_settlement("a", "x", 10), participants)
    assert exc.value.participant_id == "x"
