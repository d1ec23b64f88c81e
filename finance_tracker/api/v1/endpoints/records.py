from finance_tracker.api.v1.endpoints.crud import build_crud_router
from finance_tracker.models.budget import SavingsGoal, SavingsGoalCreate
from finance_tracker.models.credit import Credit, CreditCreate
from finance_tracker.models.note import Note, NoteCreate
from finance_tracker.models.recurring import ExpenseTemplate, ExpenseTemplateCreate
from finance_tracker.models.transaction import Expense, ExpenseCreate, Income, IncomeCreate
from finance_tracker.repositories.records import (
    CreditRepository,
    ExpenseRepository,
    IncomeRepository,
    NoteRepository,
    SavingsGoalRepository,
    TemplateRepository,
)

expenses_router = build_crud_router(
    ExpenseRepository, ExpenseCreate, Expense, "Expense", category_key="category"
)
income_router = build_crud_router(IncomeRepository, IncomeCreate, Income, "Income", category_key="source")
credits_router = build_crud_router(CreditRepository, CreditCreate, Credit, "Credit")
notes_router = build_crud_router(NoteRepository, NoteCreate, Note, "Note")
templates_router = build_crud_router(TemplateRepository, ExpenseTemplateCreate, ExpenseTemplate, "Template")
savings_goals_router = build_crud_router(SavingsGoalRepository, SavingsGoalCreate, SavingsGoal, "Savings goal")
