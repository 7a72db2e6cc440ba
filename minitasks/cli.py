"""Interactive menu that runs the individual demonstration tasks."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from enum import IntEnum

from minitasks import (
    animals,
    circus,
    energy,
    festival,
    logs,
    parade,
    patients,
    scores,
    sensors,
    transactions,
)

_UNKNOWN_TASK = "Неизвестная задача"


class Task(IntEnum):
    """Menu entries, numbered as shown to the user."""

    TRANSACTION = 1
    CIRCUS = 2
    PHYSICS = 3
    CARS = 4
    FESTIVAL = 5
    NORMALIZATION = 6
    SENSORS = 7
    LOG = 8
    ANIMALS = 9
    PATIENT = 10

    @property
    def label(self) -> str:
        return _NAMES[self]


_NAMES = {
    Task.TRANSACTION: "Обработка финансовых транзакций",
    Task.CIRCUS: "Планирование цирковых выступлений",
    Task.PHYSICS: "Анализ энергии электронов",
    Task.CARS: "Формирование колонны автомобилей для парада",
    Task.FESTIVAL: "Формирование программы музыкального фестиваля",
    Task.NORMALIZATION: "Нормализация и отчет по баллам студентов",
    Task.SENSORS: "Коррекция данных датчиков",
    Task.LOG: "Очистка журнала событий",
    Task.ANIMALS: "Выбор лучших номеров с животными",
    Task.PATIENT: "Формирование очереди пациентов на обследование",
}

_RUNNERS: dict[Task, Callable[[], None]] = {
    Task.TRANSACTION: transactions.run_demo,
    Task.CIRCUS: circus.run_demo,
    Task.PHYSICS: energy.run_demo,
    Task.CARS: parade.run_demo,
    Task.FESTIVAL: festival.run_demo,
    Task.NORMALIZATION: scores.run_demo,
    Task.SENSORS: sensors.run_demo,
    Task.LOG: logs.run_demo,
    Task.ANIMALS: animals.run_demo,
    Task.PATIENT: patients.run_demo,
}


def task_name(number: int) -> str:
    """Name of the task with this menu number, or a placeholder if none."""
    try:
        return Task(number).label
    except ValueError:
        return _UNKNOWN_TASK


def format_menu() -> str:
    """The menu text, ending with the input prompt."""
    lines = ["", "Пожалуйста, выберите задачу для запуска:"]
    lines.extend(f"{task.value}. {task.label}" for task in Task)
    lines.append("0. Выход")
    lines.append("Введите номер задачи: ")
    return "\n".join(lines)


def _run_task(number: int) -> None:
    print(f"\nЗапуск задачи: {task_name(number)}...")
    try:
        task = Task(number)
    except ValueError:
        print(f"\nНеверный ID задачи ({number}). Пожалуйста, выберите из списка.")
    else:
        _RUNNERS[task]()
    print("\nЗадача завершена.")


def _interactive() -> None:
    while True:
        print(format_menu(), end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            break
        try:
            number = int(line.strip())
        except ValueError:
            print("\nНекорректный ввод. Пожалуйста, введите число.")
        else:
            if number == 0:
                print("\nВыход из программы...")
                break
            _run_task(number)
        print("\nНажмите Enter для возврата в меню...", end="", flush=True)
        if not sys.stdin.readline():
            break


def main(argv: list[str] | None = None) -> int:
    """Run the given task numbers, or the interactive menu when none are given."""
    parser = argparse.ArgumentParser(
        prog="minitasks", description="Run demonstration tasks."
    )
    parser.add_argument(
        "tasks", nargs="*", type=int, help="task numbers to run without the menu"
    )
    args = parser.parse_args([] if argv is None else argv)
    if args.tasks:
        for number in args.tasks:
            _run_task(number)
    else:
        _interactive()
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))