"""Repositories for collections that need nothing beyond plain CRUD."""

from finance_tracker.models.budget import SavingsGoal
from finance_tracker.models.credit import Credit
from finance_tracker.models.note import Note
from finance_tracker.models.recurring import ExpenseTemplate, RecurringItem
from finance_tracker.models.transaction import Expense, Income
from finance_tracker.repositories.base import JsonRepository


class ExpenseRepository(JsonRepository[Expense]):
    collection = "expenses"
    model = Expense


class IncomeRepository(JsonRepository[Income]):
    collection = "income"
    model = Income


class CreditRepository(JsonRepository[Credit]):
    collection = "credits"
    model = Credit


class NoteRepository(JsonRepository[Note]):
    collection = "notes"
    model = Note


class TemplateRepository(JsonRepository[ExpenseTemplate]):
    collection = "expenseTemplates"
    model = ExpenseTemplate


class SavingsGoalRepository(JsonRepository[SavingsGoal]):
    collection = "savingsGoals"
    model = SavingsGoal


class RecurringItemRepository(JsonRepository[RecurringItem]):
    collection = "recurringItems"
    model = RecurringItem
