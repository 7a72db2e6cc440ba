"""Normalising student scores and reporting how each one changed."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass

_RULE = "-" * 60


@dataclass(frozen=True)
class NormalizationParams:
    """How scores are raised and the bounds they are held to."""

    percentage_increase_factor: float
    flat_bonus: int
    max_score: int = 100
    min_score: int = 0


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _report_line(name: str, original: int, params: NormalizationParams) -> str:
    raised = original * (1.0 + params.percentage_increase_factor) + params.flat_bonus
    rounded = _round_half_away(raised)
    after_min = max(params.min_score, rounded)
    final = min(params.max_score, after_min)
    change = final - original

    if final == params.max_score and after_min > params.max_score:
        status = f"ограничен максимумом ({params.max_score})"
    elif final == params.min_score and rounded < params.min_score:
        status = f"скорректирован до минимума ({params.min_score})"
    else:
        status = "без спец. ограничений"

    return f"{name}: [{original}] -> [{final}] (Изменение: {change:+d}, Статус: {status})"


def normalized_report(scores: Mapping[str, int], params: NormalizationParams) -> list[str]:
    """One report line per student, in name order, showing old and new score."""
    return [_report_line(name, scores[name], params) for name in sorted(scores)]


def run_demo() -> None:
    """Normalise a built-in set of scores with two parameter sets."""
    scores = {
        "Анна Иванова": 85,
        "Петр Сидоров": 45,
        "Мария Кузнецова": 98,
        "Иван Попов": 60,
        "Елена Смирнова": 30,
        "Сергей Федоров": 92,
    }

    print("--- Первоначальные баллы студентов ---")
    for name in sorted(scores):
        print(f"{name}: {scores[name]}")
    print("\n" + _RULE + "\n")

    params = NormalizationParams(0.10, 5, 100, 0)
    print("--- Параметры нормирования ---")
    print(f"Процентное увеличение: {params.percentage_increase_factor * 100:g}%")
    print(f"Плоский бонус: {params.flat_bonus} балла(ов)")
    print(f"Максимальный балл: {params.max_score}")
    print(f"Минимальный балл: {params.min_score}")
    print("\n" + _RULE + "\n")

    print("--- Отчет об изменении баллов после нормирования ---")
    for line in normalized_report(scores, params):
        print(line)
    print("\n" + _RULE)

    alternative = NormalizationParams(0.05, 0, 100, 0)
    print("--- Отчет с альтернативными параметрами (+5%, 0 плоский бонус) ---")
    for line in normalized_report(scores, alternative):
        print(line)
    print("\n" + _RULE)