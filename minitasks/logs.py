"""Cleaning an event journal of old or unimportant entries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

_FORMAT = "%Y-%m-%d %H:%M:%S"
_log = logging.getLogger(__name__)


@dataclass
class LogEntry:
    """A journal entry with a timestamp, an importance level and a message."""

    timestamp: str
    importance_level: int
    message: str

    def __str__(self) -> str:
        return f"[{self.timestamp}] Importance: {self.importance_level} | Message: {self.message}"


def parse_timestamp(text: str) -> datetime:
    """Parse ``YYYY-MM-DD HH:MM:SS``; raise ValueError if it does not match."""
    return datetime.strptime(text, _FORMAT)


def _parse_or_earliest(text: str) -> datetime:
    try:
        return parse_timestamp(text)
    except ValueError:
        _log.warning("Ошибка парсинга времени: %s", text)
        return datetime.min


def clean_log(entries: list[LogEntry], cutoff: str, min_importance: int) -> None:
    """Remove in place every entry older than ``cutoff`` or below ``min_importance``.

    Entries whose timestamp cannot be parsed count as the oldest possible;
    an unparsable cutoff removes nothing by age.
    """
    cutoff_time = _parse_or_earliest(cutoff)
    if cutoff_time == datetime.min and cutoff:
        _log.warning(
            "Внимание: не удалось корректно распознать время отсечки. "
            "Результаты могут быть неверными."
        )
    entries[:] = [
        entry
        for entry in entries
        if not (
            _parse_or_earliest(entry.timestamp) < cutoff_time
            or entry.importance_level < min_importance
        )
    ]


def format_log(title: str, entries: list[LogEntry]) -> str:
    """Render the journal under ``title``."""
    lines = [f"--- {title} ---"]
    if entries:
        lines.extend(str(entry) for entry in entries)
    else:
        lines.append("(Журнал пуст)")
    lines.append("-" * (29 + len(title)))
    return "\n".join(lines)


def _demo_journal() -> list[LogEntry]:
    return [
        LogEntry("2024-05-01 10:00:00", 1, "System check: OK"),
        LogEntry("2024-05-15 12:30:00", 3, "User login: admin"),
        LogEntry("2024-05-20 08:15:00", 5, "CRITICAL: Database connection failed"),
        LogEntry("2024-06-01 09:00:00", 2, "Warning: Disk space low"),
        LogEntry("2024-06-02 11:00:00", 4, "User action: data export"),
        LogEntry("2024-06-02 15:00:00", 1, "Info: Scheduled task started"),
        LogEntry("2024-06-03 10:00:00", 3, "System update pending"),
    ]


def _print_rules(cutoff: str, threshold: int) -> None:
    print(f"  - Старше даты: {cutoff}")
    print(f"  - ИЛИ Уровень важности < {threshold}\n")


def run_demo() -> None:
    """Clean a built-in journal with two importance thresholds."""
    journal = _demo_journal()
    print(format_log("Исходный журнал", journal))
    cutoff = "2024-06-01 00:00:00"
    threshold = 3
    print("\nПрименяются правила очистки:")
    _print_rules(cutoff, threshold)
    clean_log(journal, cutoff, threshold)
    print(format_log("Журнал после очистки", journal))

    print("\nТестирование с другим порогом важности:")
    journal = _demo_journal()
    threshold = 2
    _print_rules(cutoff, threshold)
    clean_log(journal, cutoff, threshold)
    print(format_log("Журнал после второй очистки", journal))