"""Minimize number of transfers so everyone is settled (who owes whom)."""
import logging
from typing import Iterable, Sequence

from dangi.config import SETTLED_TOLERANCE
from dangi.errors import SelfSettlementError, UnknownParticipantError
from dangi.money import round_half_up
from dangi.schemas import Participant, ParticipantBalance, Settlement, SuggestedSettlement

logger = logging.getLogger(__name__)


def calculate_optimal_settlements(balances: Iterable[ParticipantBalance]) -> list[SuggestedSettlement]:
    """
    Greedy matching: the largest debtor pays the largest creditor until one of
    them is even, then move on. Balances within the settled tolerance of zero
    are left out. Amounts are rounded to whole currency units.
    """
    creditors = []  # [balance, remaining]
    debtors = []
    for b in balances:
        if b.balance > SETTLED_TOLERANCE:
            creditors.append([b, b.balance])
        elif b.balance < -SETTLED_TOLERANCE:
            debtors.append([b, -b.balance])
    creditors.sort(key=lambda x: -x[1])
    debtors.sort(key=lambda x: -x[1])

    out: list[SuggestedSettlement] = []
    i, j = 0, 0
    while i < len(creditors) and j < len(debtors):
        creditor, debtor = creditors[i], debtors[j]
        amount = min(creditor[1], debtor[1])
        if amount > SETTLED_TOLERANCE:
            out.append(SuggestedSettlement(
                from_id=debtor[0].participant_id,
                from_name=debtor[0].participant_name,
                to_id=creditor[0].participant_id,
                to_name=creditor[0].participant_name,
                amount=round_half_up(amount),
            ))
        creditor[1] -= amount
        debtor[1] -= amount
        if creditor[1] < SETTLED_TOLERANCE:
            i += 1
        if debtor[1] < SETTLED_TOLERANCE:
            j += 1

    logger.debug(
        "%d creditors, %d debtors -> %d suggested settlements",
        len(creditors), len(debtors), len(out),
    )
    return out


def validate_settlement(settlement: Settlement, participants: Sequence[Participant]) -> None:
    """Both sides must be project participants and must differ."""
    if settlement.from_id == settlement.to_id:
        raise SelfSettlementError()
    member_ids = {p.id for p in participants}
    for participant_id in (settlement.from_id, settlement.to_id):
        if participant_id not in member_ids:
            raise UnknownParticipantError(participant_id)
