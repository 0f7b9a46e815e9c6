"""Project summary: total spent, balances and suggested settlements."""
from dangi.schemas import ProjectSummary, SummaryInput
from dangi.services.balance_calculator import calculate_balances
from dangi.services.settlement_calculator import calculate_optimal_settlements


def calculate_project_summary(data: SummaryInput) -> ProjectSummary:
    total_expenses = sum(e.amount for e in data.expenses)
    balances = calculate_balances(data.expenses, data.participants, data.settlements)
    return ProjectSummary(
        project_id=data.project_id,
        project_name=data.project_name,
        currency=data.currency,
        total_expenses=total_expenses,
        participant_balances=balances,
        settlements=calculate_optimal_settlements(balances),
    )
