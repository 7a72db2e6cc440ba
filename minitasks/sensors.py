"""Replacing out-of-range sensor readings with a marker value."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

_RULE = "-" * 60


@dataclass(frozen=True)
class CorrectionParams:
    """Accepted range of readings, the replacement marker and NaN handling."""

    lower_bound: float
    upper_bound: float
    marker_value: float
    treat_input_nan_as_outlier: bool = False


def _is_outlier(value: float, params: CorrectionParams) -> bool:
    if math.isnan(value):
        return params.treat_input_nan_as_outlier
    return value < params.lower_bound or value > params.upper_bound


def correct_readings(readings: list[float], params: CorrectionParams) -> int:
    """Replace outliers in place with the marker and return how many were replaced.

    NaN readings count as outliers only when the parameters say so.
    """
    replaced = 0
    for position, value in enumerate(readings):
        if _is_outlier(value, params):
            readings[position] = params.marker_value
            replaced += 1
    return replaced


def _format_value(value: float) -> str:
    return "NaN" if math.isnan(value) else f"{value:.2f}"


def format_readings(title: str, readings: Iterable[float]) -> str:
    """Render readings as ``title: [a, b, ...]`` with two decimals and NaN."""
    return f"{title}: [" + ", ".join(_format_value(value) for value in readings) + "]"


def run_demo() -> None:
    """Correct a built-in series of readings in three scenarios."""
    data = [25.5, 26.1, -2.0, 27.0, 150.5, 24.8, math.nan, 25.9, -5.7, 101.0]
    print(format_readings("Исходные показания датчика", data))
    print(_RULE)

    scenario = list(data)
    print("Сценарий 1: Коррекция (0.0 до 100.0), маркер -1.0, NaN не трогаем")
    count = correct_readings(scenario, CorrectionParams(0.0, 100.0, -1.0, False))
    print(format_readings("Скорректированные данные (Сценарий 1)", scenario))
    print(f"Количество замен (Сценарий 1): {count}")
    print(_RULE)

    scenario = list(data)
    print("Сценарий 2: Коррекция (10.0 до 50.0), маркер NaN, входные NaN = аномалия")
    count = correct_readings(scenario, CorrectionParams(10.0, 50.0, math.nan, True))
    print(format_readings("Скорректированные данные (Сценарий 2)", scenario))
    print(f"Количество замен (Сценарий 2): {count}")
    print(_RULE)

    empty: list[float] = []
    print("Сценарий 3: Пустой вектор данных")
    count = correct_readings(empty, CorrectionParams(0.0, 100.0, -1.0, False))
    print(format_readings("Скорректированные данные (Сценарий 3)", empty))
    print(f"Количество замен (Сценарий 3): {count}")
    print(_RULE)