"""Net balance per participant from expenses, shares and settlements."""
import logging
from typing import Iterable, Sequence

from dangi.errors import UnknownParticipantError
from dangi.schemas import EntityId, Expense, Participant, ParticipantBalance, Settlement

logger = logging.getLogger(__name__)


def calculate_balances(
    expenses: Iterable[Expense],
    participants: Sequence[Participant],
    settlements: Iterable[Settlement] = (),
    strict: bool = False,
) -> list[ParticipantBalance]:
    """
    balance = (paid - share) + settlement adjustment.
    Positive = is owed money, negative = owes money.

    A settlement adds to the payer's adjustment and subtracts from the
    receiver's. Expenses or settlements that reference someone missing from
    ``participants`` are skipped for that person, unless ``strict`` is set,
    in which case UnknownParticipantError is raised.
    """
    paid: dict[EntityId, float] = {p.id: 0.0 for p in participants}
    share: dict[EntityId, float] = {p.id: 0.0 for p in participants}
    adjust: dict[EntityId, float] = {p.id: 0.0 for p in participants}

    def _add(totals: dict[EntityId, float], participant_id: EntityId, amount: float) -> None:
        if participant_id not in totals:
            if strict:
                raise UnknownParticipantError(participant_id)
            logger.warning("Ignoring amount %s for unknown participant %r", amount, participant_id)
            return
        totals[participant_id] += amount

    for e in expenses:
        _add(paid, e.payer_id, e.amount)
        for s in e.shares:
            _add(share, s.participant_id, s.amount)

    for s in settlements:
        _add(adjust, s.from_id, s.amount)
        _add(adjust, s.to_id, -s.amount)

    return [
        ParticipantBalance(
            participant_id=p.id,
            participant_name=p.name,
            total_paid=paid[p.id],
            total_share=share[p.id],
            balance=paid[p.id] - share[p.id] + adjust[p.id],
        )
        for p in participants
    ]
