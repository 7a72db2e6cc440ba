import pytest

from minitasks.animals import AnimalAct, format_selection, run_demo, select_top_acts


@pytest.fixture
def acts():
    return [
        AnimalAct("Лев", "Прыжки через огненное кольцо", 9, "Иван Смирнов"),
        AnimalAct("Собака", "Акробатические трюки и фрисби", 8, "Анна Попова"),
        AnimalAct("Попугай", "Разговорное шоу и имитация", 7, "Петр Кузнецов"),
        AnimalAct("Слон", "Игра на музыкальных инструментах", 10, "Мария Иванова"),
        AnimalAct("Тигр", "Хождение по канату", 8, "Елена Михайлова"),
    ]


def test_top_acts_are_best_first(acts):
    top = select_top_acts(acts, 3)
    ratings = [act.audience_rating for act in top]
    assert ratings == sorted(ratings, reverse=True)
    assert ratings == sorted((a.audience_rating for a in acts), reverse=True)[:3]
    assert top[0].animal_species == "Слон"


def test_top_acts_does_not_mutate_input(acts):
    original = list(acts)
    select_top_acts(acts, 2)
    assert acts == original


def test_count_larger_than_list_returns_all(acts):
    top = select_top_acts(acts, 10)
    assert len(top) == len(acts)
    assert sorted(top, key=lambda a: a.animal_species) == sorted(
        acts, key=lambda a: a.animal_species
    )


def test_zero_count_and_empty_list():
    assert select_top_acts([], 3) == []
    assert select_top_acts([AnimalAct("a", "b", 1, "c")], 0) == []


def test_negative_count_raises(acts):
    with pytest.raises(ValueError):
        select_top_acts(acts, -1)


def test_act_text():
    text = str(AnimalAct("Лев", "Прыжки", 9, "Иван Смирнов"))
    assert text.startswith("Вид животного: Лев ")
    assert " | Рейтинг:  9 | " in text
    assert text.endswith(" | Дрессировщик: Иван Смирнов")


def test_format_selection_numbers_acts(acts):
    lines = format_selection("Лучшие", acts, 2).splitlines()
    assert lines[0] == "--- Лучшие ---"
    assert lines[1] == f"1. {acts[0]}"
    assert lines[2] == f"2. {acts[1]}"
    assert len(lines) == 4


def test_format_selection_empty_list():
    lines = format_selection("T", [], 3).splitlines()
    assert lines[1] == "(Список номеров пуст)"


def test_format_selection_zero_count(acts):
    lines = format_selection("T", acts, 0).splitlines()
    assert lines[1] == "(Не указано количество номеров для вывода)"
    assert len(lines) == 3


def test_run_demo_prints_selection(capsys):
    run_demo()
    out = capsys.readouterr().out
    assert out.startswith("--- Все цирковые номера ---")
    assert "--- Результат отбора из короткого списка ---" in out
    assert "1. Вид животного: Слон" in out