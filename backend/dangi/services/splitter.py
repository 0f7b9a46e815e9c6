"""Divide an expense amount into per-participant shares."""
import logging
from typing import Callable, Iterable, Optional, Sequence, Union

from dangi.config import SPLIT_TOLERANCE
from dangi.errors import ManualSharesRequiredError, NoParticipantsError, ZeroTotalWeightError
from dangi.schemas import CustomShare, EntityId, Participant, Share, SplitResult, SplitType

logger = logging.getLogger(__name__)


def _split_equal(amount: float, participants: Sequence[Participant]) -> list[SplitResult]:
    if not participants:
        raise NoParticipantsError()
    share_amount = amount / len(participants)
    return [SplitResult(participant_id=p.id, amount=share_amount, weight=1) for p in participants]


def _split_weighted(amount: float, participants: Sequence[Participant]) -> list[SplitResult]:
    """Split in proportion to each participant's weight (e.g. flat area)."""
    if not participants:
        raise NoParticipantsError()
    total_weight = sum(p.weight for p in participants)
    if total_weight == 0:
        raise ZeroTotalWeightError()
    return [
        SplitResult(participant_id=p.id, amount=amount * p.weight / total_weight, weight=p.weight)
        for p in participants
    ]


def _split_percentage(amount: float, participants: Sequence[Participant]) -> list[SplitResult]:
    """Percentages are used as given; they are not required to sum to 100."""
    return [
        SplitResult(
            participant_id=p.id,
            amount=amount * (p.percentage or 0) / 100,
            weight=p.percentage or 0,
        )
        for p in participants
    ]


def _split_manual(custom_shares: Sequence[CustomShare]) -> list[SplitResult]:
    return [
        SplitResult(participant_id=s.participant_id, amount=s.amount, weight=1)
        for s in custom_shares
    ]


_STRATEGIES: dict[SplitType, Callable[[float, Sequence[Participant]], list[SplitResult]]] = {
    SplitType.EQUAL: _split_equal,
    SplitType.WEIGHTED: _split_weighted,
    SplitType.PERCENTAGE: _split_percentage,
}


def resolve_split_type(split_type: Union[SplitType, str, None]) -> SplitType:
    """Map a strategy tag to a SplitType; unknown or missing tags mean EQUAL."""
    if isinstance(split_type, SplitType):
        return split_type
    try:
        return SplitType(str(split_type).upper())
    except ValueError:
        logger.debug("Unknown split type %r, falling back to EQUAL", split_type)
        return SplitType.EQUAL


def calculate_split(
    amount: float,
    participants: Sequence[Participant],
    split_type: Union[SplitType, str, None] = SplitType.EQUAL,
    custom_shares: Optional[Sequence[CustomShare]] = None,
) -> list[SplitResult]:
    """
    Divide ``amount`` between ``participants`` using ``split_type``.

    MANUAL returns the custom shares as given and requires at least one.
    EQUAL, WEIGHTED and PERCENTAGE return one share per participant in input
    order; EQUAL and WEIGHTED raise NoParticipantsError for an empty list.
    """
    strategy = resolve_split_type(split_type)
    logger.debug("Splitting %s between %d participants (%s)", amount, len(participants), strategy.value)

    if strategy is SplitType.MANUAL:
        if not custom_shares:
            raise ManualSharesRequiredError()
        return _split_manual(custom_shares)

    return _STRATEGIES[strategy](amount, participants)


def validate_split(amount: float, shares: Iterable[SplitResult]) -> bool:
    """True when the shares add up to ``amount`` within the split tolerance."""
    total = sum(s.amount for s in shares)
    return abs(total - amount) < SPLIT_TOLERANCE


def build_expense_shares(
    amount: float,
    participants: Sequence[Participant],
    split_type: Union[SplitType, str, None] = SplitType.EQUAL,
    included_participant_ids: Optional[Iterable[EntityId]] = None,
    custom_shares: Optional[Sequence[CustomShare]] = None,
) -> list[Share]:
    """
    Compute the share snapshots stored with a new expense.

    Only ``included_participant_ids`` take part when given, otherwise every
    participant does. Supplying ``custom_shares`` forces a MANUAL split. The
    payer does not have to be among the included participants. Each share
    keeps the weight (or percentage) used for it, so later weight changes do
    not alter the expense.
    """
    if included_participant_ids is not None:
        included = set(included_participant_ids)
        participants = [p for p in participants if p.id in included]

    if not participants:
        raise NoParticipantsError()

    effective = SplitType.MANUAL if custom_shares else split_type
    results = calculate_split(amount, participants, effective, custom_shares)
    return [
        Share(participant_id=r.participant_id, amount=r.amount, weight_at_time=r.weight)
        for r in results
    ]
