"""Ordering cars into a parade column by type and per-type criteria."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CarType(Enum):
    """Kinds of cars, in the order they drive in the parade."""

    MILITARY = "Военный"
    RETRO = "Ретро"
    SPORTS = "Спортивный"

    @property
    def label(self) -> str:
        return self.value

    @property
    def priority(self) -> int:
        return list(CarType).index(self)


@dataclass
class Car:
    """A parade car; the year matters only for retro cars."""

    id: str
    type: CarType
    sub_type: str = ""
    year: int | None = None
    original_order_index: int = 0

    def __str__(self) -> str:
        text = f"ID: {self.id}, Тип: {self.type.label}"
        if self.sub_type:
            text += f" ({self.sub_type})"
        if self.type is CarType.RETRO and self.year is not None:
            text += f", Год: {self.year}"
        return text


def _parade_key(car: Car) -> tuple:
    if car.type is CarType.RETRO:
        detail: tuple = (0, car.year) if car.year is not None else (1, 0)
    else:
        detail = (0, car.sub_type)
    return (car.type.priority, detail)


def organize_parade(cars: list[Car]) -> None:
    """Sort the cars in place, keeping the original order among equals.

    Military before retro before sports; military and sports cars by
    sub-type, retro cars by year with dated cars first.
    """
    cars.sort(key=_parade_key)


def run_demo() -> None:
    """Order a built-in set of cars and print them before and after."""
    specs = [
        ("M001", CarType.MILITARY, "Танк", None),
        ("S001", CarType.SPORTS, "Купе", None),
        ("R001", CarType.RETRO, "", 1950),
        ("M002", CarType.MILITARY, "Джип", None),
        ("R002", CarType.RETRO, "Седан", 1945),
        ("S002", CarType.SPORTS, "Родстер", None),
        ("M003", CarType.MILITARY, "Танк", None),
        ("R003", CarType.RETRO, "", 1950),
        ("S003", CarType.SPORTS, "Купе", None),
        ("M004", CarType.MILITARY, "БТР", None),
        ("R004", CarType.RETRO, "", 1965),
    ]
    cars = [
        Car(car_id, car_type, sub_type, year, index)
        for index, (car_id, car_type, sub_type, year) in enumerate(specs)
    ]

    print("Исходный порядок автомобилей:")
    for car in cars:
        print(car)
    print("\n-------------------------------------------\n")

    organize_parade(cars)

    print("Порядок автомобилей для парада:")
    for car in cars:
        print(car)