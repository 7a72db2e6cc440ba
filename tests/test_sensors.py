import math

from minitasks.sensors import CorrectionParams, correct_readings, format_readings, run_demo

DATA = [25.5, 26.1, -2.0, 27.0, 150.5, 24.8, math.nan, 25.9, -5.7, 101.0]


def test_scenario_one_replaces_out_of_range_and_keeps_nan():
    readings = list(DATA)
    count = correct_readings(readings, CorrectionParams(0.0, 100.0, -1.0, False))
    assert count == 4
    assert math.isnan(readings[6])
    for before, after in zip(DATA, readings):
        if math.isnan(before):
            continue
        if 0.0 <= before <= 100.0:
            assert after == before
        else:
            assert after == -1.0


def test_scenario_two_treats_nan_as_outlier():
    readings = list(DATA)
    params = CorrectionParams(10.0, 50.0, math.nan, True)
    count = correct_readings(readings, params)
    assert count == sum(1 for value in readings if math.isnan(value))
    assert all(10.0 <= value <= 50.0 for value in readings if not math.isnan(value))
    assert len(readings) == len(DATA)


def test_nan_left_alone_by_default():
    readings = [math.nan]
    assert correct_readings(readings, CorrectionParams(0.0, 1.0, 5.0)) == 0
    assert math.isnan(readings[0])


def test_bounds_are_inclusive():
    readings = [0.0, 100.0]
    assert correct_readings(readings, CorrectionParams(0.0, 100.0, -1.0)) == 0
    assert readings == [0.0, 100.0]


def test_empty_readings():
    readings: list[float] = []
    assert correct_readings(readings, CorrectionParams(0.0, 100.0, -1.0)) == 0
    assert readings == []


def test_format_readings():
    assert format_readings("T", [1.0, math.nan]) == "T: [1.00, NaN]"
    assert format_readings("Empty", []) == "Empty: []"


def test_run_demo_prints_counts(capsys):
    run_demo()
    out = capsys.readouterr().out
    assert "Количество замен (Сценарий 1): 4" in out
    assert "Количество замен (Сценарий 3): 0" in out
    assert "Исходные показания датчика: [25.50, 26.10, -2.00" in out