import io

import pytest

from minitasks.cli import Task, format_menu, main, task_name


def _run_with_input(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return main([])


def test_task_name_known():
    assert task_name(1) == "Обработка финансовых транзакций"
    assert task_name(Task.PATIENT) == "Формирование очереди пациентов на обследование"


@pytest.mark.parametrize("number", [0, 11, -3, 42])
def test_task_name_unknown(number):
    assert task_name(number) == "Неизвестная задача"


def test_format_menu_lists_every_task():
    menu = format_menu()
    for task in Task:
        assert f"{task.value}. {task_name(task.value)}" in menu
    assert "0. Выход" in menu
    assert menu.endswith("Введите номер задачи: ")


def test_exit_immediately(monkeypatch, capsys):
    assert _run_with_input(monkeypatch, "0\n") == 0
    out = capsys.readouterr().out
    assert "Выход из программы..." in out


def test_end_of_input_stops(monkeypatch, capsys):
    assert _run_with_input(monkeypatch, "") == 0
    assert "Выход из программы..." not in capsys.readouterr().out


def test_invalid_input(monkeypatch, capsys):
    _run_with_input(monkeypatch, "abc\n\n0\n")
    out = capsys.readouterr().out
    assert "Некорректный ввод. Пожалуйста, введите число." in out
    assert "Запуск задачи" not in out


def test_unknown_task_number(monkeypatch, capsys):
    _run_with_input(monkeypatch, "99\n\n0\n")
    out = capsys.readouterr().out
    assert "Неверный ID задачи (99)" in out
    assert "Задача завершена." in out


def test_runs_selected_task(monkeypatch, capsys):
    _run_with_input(monkeypatch, "4\n\n0\n")
    out = capsys.readouterr().out
    assert "Запуск задачи: Формирование колонны автомобилей для парада..." in out
    assert "Порядок автомобилей для парада:" in out
    assert out.index("Задача завершена.") < out.index("Выход из программы...")


def test_tasks_from_arguments(capsys):
    assert main(["8", "10"]) == 0
    out = capsys.readouterr().out
    assert "--- Журнал после очистки ---" in out
    assert out.index("Журнал после очистки") < out.index("Сформированная очередь")
    assert out.count("Задача завершена.") == 2


def test_non_numeric_argument_rejected():
    with pytest.raises(SystemExit):
        main(["abc"])