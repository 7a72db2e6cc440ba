"""Category totals and statistics over dated financial transactions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class Transaction:
    """A single spending record; dates are ISO strings compared as text."""

    amount: float
    date: str
    description: str


@dataclass
class CategoryStats:
    """Aggregated figures for the transactions of one category."""

    total_amount: float = 0.0
    transaction_count: int = 0
    max_transaction: Transaction | None = None

    @property
    def max_amount(self) -> float:
        return self.max_transaction.amount if self.max_transaction else 0.0

    def __str__(self) -> str:
        text = (
            f"Total Amount: {self.total_amount:.2f}, "
            f"Transaction Count: {self.transaction_count}"
        )
        if self.transaction_count <= 0:
            return text + ", Average Amount: N/A, Max Transaction: N/A"
        text += f", Average Amount: {self.total_amount / self.transaction_count:.2f}"
        if self.max_transaction is None:
            return text + ", Max Transaction: N/A (no valid transactions processed for max)"
        best = self.max_transaction
        return text + f", Max Transaction: {best.amount:.2f} on {best.date} ({best.description})"


Transactions = Mapping[str, Iterable[Transaction]]


def _matching(
    transactions: Transactions,
    category: str,
    start_date: str | None,
    end_date: str | None,
) -> Iterator[Transaction]:
    for transaction in transactions.get(category, ()):
        if start_date and transaction.date < start_date:
            continue
        if end_date and transaction.date > end_date:
            continue
        yield transaction


def sum_transactions(
    transactions: Transactions,
    category: str,
    start_date: str | None = None,
    end_date: str | None = None,
) -> float:
    """Sum the amounts in ``category`` whose date lies in the inclusive range.

    An empty or missing bound leaves that side of the range open.
    """
    return sum(
        (t.amount for t in _matching(transactions, category, start_date, end_date)),
        0.0,
    )


def category_statistics(
    transactions: Transactions,
    category: str,
    start_date: str | None = None,
    end_date: str | None = None,
) -> CategoryStats:
    """Total, count and largest transaction of ``category`` within the range."""
    stats = CategoryStats()
    for transaction in _matching(transactions, category, start_date, end_date):
        stats.total_amount += transaction.amount
        stats.transaction_count += 1
        if stats.max_transaction is None or transaction.amount > stats.max_transaction.amount:
            stats.max_transaction = transaction
    return stats


def _demo_transactions() -> dict[str, list[Transaction]]:
    records = [
        ("Еда", Transaction(250.50, "2024-05-20", "Обед в ресторане")),
        ("Транспорт", Transaction(75.00, "2024-05-20", "Такси")),
        ("Еда", Transaction(120.00, "2024-05-21", "Продукты")),
        ("Развлечения", Transaction(300.00, "2024-05-21", "Кино")),
        ("Транспорт", Transaction(50.25, "2024-05-22", "Бензин")),
        ("Еда", Transaction(85.75, "2024-05-22", "Кофе и выпечка")),
        ("Еда", Transaction(150.00, "2024-05-23", "Ужин")),
        ("Еда", Transaction(25.00, "2024-06-01", "Фрукты")),
        ("Еда", Transaction(180.00, "2024-06-02", "Продукты на неделю")),
        ("Транспорт", Transaction(220.00, "2024-06-03", "Билеты на поезд")),
    ]
    grouped: dict[str, list[Transaction]] = {}
    for category, transaction in records:
        grouped.setdefault(category, []).append(transaction)
    return grouped


def run_demo() -> None:
    """Print totals and statistics for a built-in set of transactions."""
    transactions = _demo_transactions()

    print("Сумма с фильтром по дате")
    category = "Еда"
    total = sum_transactions(transactions, category)
    print(f'Общая сумма (все даты) в категории "{category}": {total:.2f}')
    total = sum_transactions(transactions, category, "2024-05-01", "2024-05-31")
    print(f'Общая сумма (май 2024) в категории "{category}": {total:.2f}')
    total = sum_transactions(transactions, category, "2024-06-01")
    print(f'Общая сумма (с июня 2024) в категории "{category}": {total:.2f}')
    category = "Транспорт"
    total = sum_transactions(transactions, category, "2024-06-01", "2024-06-30")
    print(f'Общая сумма (июнь 2024) в категории "{category}": {total:.2f}')

    print("\n Комплексная статистика")
    category = "Еда"
    stats = category_statistics(transactions, category, "2024-05-01", "2024-05-31")
    print(f'Статистика для категории "{category}" (май 2024): {stats}')
    stats = category_statistics(transactions, category, "2024-06-01")
    print(f'Статистика для категории "{category}" (с июня 2024): {stats}')
    stats = category_statistics(transactions, category)
    print(f'Статистика для категории "{category}" (все время): {stats}')
    for category in ("Развлечения", "Одежда"):
        stats = category_statistics(transactions, category)
        print(f'Статистика для категории "{category}" (все время): {stats}')