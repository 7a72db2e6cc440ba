"""Picking the best-rated animal acts for a show."""

from __future__ import annotations

from dataclasses import dataclass

_RULE = "-" * 36


@dataclass
class AnimalAct:
    """A circus act with an animal, rated by the audience."""

    animal_species: str
    act_description: str
    audience_rating: int
    trainer_name: str

    def __str__(self) -> str:
        return (
            f"Вид животного: {self.animal_species:<15}"
            f" | Описание: {self.act_description:<35}"
            f" | Рейтинг: {self.audience_rating:>2}"
            f" | Дрессировщик: {self.trainer_name}"
        )


def select_top_acts(acts: list[AnimalAct], count: int) -> list[AnimalAct]:
    """Return up to ``count`` acts with the highest rating, best first."""
    if count < 0:
        raise ValueError("count must not be negative")
    if not acts or count == 0:
        return []
    return sorted(acts, key=lambda act: act.audience_rating, reverse=True)[:count]


def format_selection(title: str, acts: list[AnimalAct], count: int) -> str:
    """Render the first ``count`` acts as a numbered list under ``title``."""
    lines = [f"--- {title} ---"]
    if not acts:
        lines.append("(Список номеров пуст)")
    else:
        if count == 0:
            lines.append("(Не указано количество номеров для вывода)")
        lines.extend(f"{number}. {act}" for number, act in enumerate(acts[:count], start=1))
    lines.append(_RULE)
    return "\n".join(lines)


def run_demo() -> None:
    """Select top acts from built-in lists and print them."""
    all_acts = [
        AnimalAct("Лев", "Прыжки через огненное кольцо", 9, "Иван Смирнов"),
        AnimalAct("Собака", "Акробатические трюки и фрисби", 8, "Анна Попова"),
        AnimalAct("Попугай", "Разговорное шоу и имитация", 7, "Петр Кузнецов"),
        AnimalAct("Слон", "Игра на музыкальных инструментах", 10, "Мария Иванова"),
        AnimalAct("Лошадь", "Высшая школа верховой езды", 9, "Сергей Васильев"),
        AnimalAct("Тигр", "Хождение по канату", 8, "Елена Михайлова"),
        AnimalAct("Обезьяна", "Комические сценки", 7, "Алексей Новиков"),
    ]
    print("--- Все цирковые номера ---")
    for act in all_acts:
        print(act)
    print(_RULE + "\n")

    top_count = 3
    print(f"Отбираем топ-{top_count} номера для благотворительного вечера...\n")
    top = select_top_acts(all_acts, top_count)
    print(format_selection("Лучшие номера для программы", top, top_count))

    few_acts = [
        AnimalAct("Дельфин", "Синхронное плавание", 10, "Ольга Белова"),
        AnimalAct("Морской котик", "Жонглирование мячами", 9, "Дмитрий Козлов"),
    ]
    print()
    print(format_selection("Исходный короткий список", few_acts, len(few_acts)))

    more_count = 5
    print(f"Отбираем топ-{more_count} (больше чем доступно)...\n")
    chosen = select_top_acts(few_acts, more_count)
    print(format_selection("Результат отбора из короткого списка", chosen, more_count))