from minitasks.festival import (
    ClassicalEra,
    FestivalArtist,
    Genre,
    run_demo,
    schedule_artists,
)


def _applications():
    specs = [
        ("The Rolling Stones", Genre.ROCK, None, 95, 60),
        ("Ludwig van Beethoven Tribute", Genre.CLASSICAL, ClassicalEra.CLASSICISM, 90, 45),
        ("Celtic Rovers", Genre.FOLK, None, 80, 40),
        ("Miles Davis Quartet", Genre.JAZZ, None, 88, 50),
        ("Bach Ensemble", Genre.CLASSICAL, ClassicalEra.BAROQUE, 85, 30),
        ("Queen Revival", Genre.ROCK, None, 92, 55),
        ("Mountain Balladeers", Genre.FOLK, None, 80, 35),
        ("Modern Composers Showcase", Genre.CLASSICAL, ClassicalEra.MODERN, 70, 60),
        ("Smooth Jazz Collective", Genre.JAZZ, None, 88, 45),
        ("Romantic Era Pianist", Genre.CLASSICAL, ClassicalEra.ROMANTICISM, 90, 50),
        ("Vivaldi Strings", Genre.CLASSICAL, ClassicalEra.BAROQUE, 88, 30),
        ("Indie Rock Newcomers", Genre.ROCK, None, 75, 40),
        ("Another Folk Group", Genre.FOLK, None, 70, 30),
    ]
    return [FestivalArtist(n, g, e, p, d, i) for i, (n, g, e, p, d) in enumerate(specs)]


def test_genres_in_priority_order():
    artists = _applications()
    schedule_artists(artists)
    priorities = [a.genre.priority for a in artists]
    assert priorities == sorted(priorities)


def test_classical_sorted_by_era_then_popularity():
    artists = _applications()
    schedule_artists(artists)
    classical = [a.name for a in artists if a.genre is Genre.CLASSICAL]
    assert classical == [
        "Vivaldi Strings",
        "Bach Ensemble",
        "Ludwig van Beethoven Tribute",
        "Romantic Era Pianist",
        "Modern Composers Showcase",
    ]


def test_popularity_descending_within_non_classical_genres():
    artists = _applications()
    schedule_artists(artists)
    for genre in (Genre.FOLK, Genre.JAZZ, Genre.ROCK):
        scores = [a.popularity_score for a in artists if a.genre is genre]
        assert scores == sorted(scores, reverse=True)


def test_ties_keep_application_order():
    artists = _applications()
    schedule_artists(artists)
    folk_80 = [a.application_order_index for a in artists
               if a.genre is Genre.FOLK and a.popularity_score == 80]
    assert folk_80 == sorted(folk_80)
    jazz = [a.application_order_index for a in artists if a.genre is Genre.JAZZ]
    assert jazz == sorted(jazz)


def test_classical_without_era_goes_last():
    artists = [
        FestivalArtist("NoEra", Genre.CLASSICAL, None, 99, 10, 0),
        FestivalArtist("Modern", Genre.CLASSICAL, ClassicalEra.MODERN, 1, 10, 1),
    ]
    schedule_artists(artists)
    assert [a.name for a in artists] == ["Modern", "NoEra"]


def test_str_classical_with_era():
    text = str(FestivalArtist("Bach Ensemble", Genre.CLASSICAL, ClassicalEra.BAROQUE, 85, 30, 4))
    assert text.startswith("Имя: Bach Ensemble ")
    assert "| Жанр: Классика" in text
    assert "(Барокко" in text
    assert text.endswith("мин. (Заявка #5)")


def test_str_columns_have_same_width_with_or_without_era():
    with_era = FestivalArtist("Same", Genre.CLASSICAL, ClassicalEra.BAROQUE, 50, 30, 0)
    without = FestivalArtist("Same", Genre.ROCK, None, 50, 30, 0)
    assert len(str(with_era)) == len(str(without))
    assert "Барокко" not in str(FestivalArtist("Same", Genre.ROCK, ClassicalEra.BAROQUE, 50, 30, 0))


def test_run_demo_output(capsys):
    run_demo()
    out = capsys.readouterr().out
    assert "--- Исходный список заявок артистов ---" in out
    program = out.split("--- Сформированная программа фестиваля ---\n", 1)[1]
    assert program.splitlines()[0].startswith("Имя: Celtic Rovers")