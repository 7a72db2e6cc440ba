"""Building a music festival programme from artists' applications."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Genre(Enum):
    """Festival genres, in the order they appear in the programme."""

    FOLK = "Фолк"
    CLASSICAL = "Классика"
    JAZZ = "Джаз"
    ROCK = "Рок"

    @property
    def label(self) -> str:
        return self.value

    @property
    def priority(self) -> int:
        return list(Genre).index(self)


class ClassicalEra(Enum):
    """Eras of classical music, oldest first."""

    BAROQUE = "Барокко"
    CLASSICISM = "Классицизм"
    ROMANTICISM = "Романтизм"
    MODERN = "Современная"

    @property
    def label(self) -> str:
        return self.value

    @property
    def priority(self) -> int:
        return list(ClassicalEra).index(self)


@dataclass
class FestivalArtist:
    """An application to perform; the era matters only for classical music."""

    name: str
    genre: Genre
    era: ClassicalEra | None
    popularity_score: int
    performance_duration_minutes: int
    application_order_index: int

    def __str__(self) -> str:
        text = f"Имя: {self.name:<25} | Жанр: {self.genre.label:<10}"
        if self.genre is Genre.CLASSICAL and self.era is not None:
            text += f" ({self.era.label:<12})"
        else:
            text += " " * 15
        return text + (
            f" | Популярность: {self.popularity_score:>3}"
            f" | Длительность: {self.performance_duration_minutes:>3} мин."
            f" (Заявка #{self.application_order_index + 1})"
        )


def _schedule_key(artist: FestivalArtist) -> tuple:
    era_key = (0, 0)
    if artist.genre is Genre.CLASSICAL:
        era_key = (0, artist.era.priority) if artist.era is not None else (1, 0)
    return (artist.genre.priority, era_key, -artist.popularity_score)


def schedule_artists(artists: list[FestivalArtist]) -> None:
    """Sort the applications in place into programme order.

    Genres in their fixed order; classical artists by era, those without an
    era last; then by popularity, most popular first. Ties keep the order
    of application.
    """
    artists.sort(key=_schedule_key)


def run_demo() -> None:
    """Schedule a built-in set of applications and print them."""
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
    artists = [
        FestivalArtist(name, genre, era, popularity, duration, index)
        for index, (name, genre, era, popularity, duration) in enumerate(specs)
    ]

    print("--- Исходный список заявок артистов ---")
    for artist in artists:
        print(artist)
    print("\n" + "-" * 80 + "\n")
    schedule_artists(artists)
    print("--- Сформированная программа фестиваля ---")
    for artist in artists:
        print(artist)
    print("\n" + "-" * 80)