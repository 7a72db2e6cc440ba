"""Assigning circus artists to the acts of an evening show."""

from __future__ import annotations

from dataclasses import dataclass, field

_PENDING = "Ожидает"
_STAFFED = "Укомплектован"
_UNSTAFFABLE = "Невозможно укомплектовать"


@dataclass
class Artist:
    """A performer with skills, stamina and a per-show act limit."""

    id: str
    name: str
    skills: list[str]
    current_stamina: int
    max_stamina: int
    acts_performed_today: int
    max_acts_per_show: int


@dataclass
class ShowAct:
    """An act of the programme and the artists assigned to it."""

    id: str
    description: str
    required_skills: list[str]
    performers_needed: int
    difficulty: int
    stamina_cost: int
    assigned_artist_ids: list[str] = field(default_factory=list)
    status: str = _PENDING


def has_required_skills(artist: Artist, act: ShowAct) -> bool:
    """True when the artist has every skill the act requires."""
    return all(skill in artist.skills for skill in act.required_skills)


def _can_perform(artist: Artist, act: ShowAct) -> bool:
    return (
        has_required_skills(artist, act)
        and artist.current_stamina >= act.stamina_cost
        and artist.acts_performed_today < artist.max_acts_per_show
    )


def form_cast(artists: list[Artist], program: list[ShowAct]) -> None:
    """Staff each act in order, updating acts and artists in place.

    An act is staffed only when exactly the needed number of eligible
    artists is found; otherwise nobody is assigned to it.
    """
    for act in program:
        act.status = _PENDING
        act.assigned_artist_ids.clear()

        chosen: list[str] = []
        for artist in artists:
            if len(chosen) == act.performers_needed:
                break
            if artist.id in chosen:
                continue
            if _can_perform(artist, act):
                chosen.append(artist.id)

        if len(chosen) != act.performers_needed:
            act.status = _UNSTAFFABLE
            continue

        act.status = _STAFFED
        for artist_id in chosen:
            act.assigned_artist_ids.append(artist_id)
            artist = next(a for a in artists if a.id == artist_id)
            artist.current_stamina -= act.stamina_cost
            artist.acts_performed_today += 1


def format_artists(artists: list[Artist]) -> str:
    """Render the artists' status table."""
    lines = [
        "--- Статус артистов ---",
        f"{'ID':<5}{'Имя':<15}{'Выносливость':<15}{'Номера (тек/макс)':<20}Навыки",
        "-" * 75,
    ]
    for artist in artists:
        lines.append(
            f"{artist.id:<5}{artist.name:<15}"
            f"{artist.current_stamina:<3}/{artist.max_stamina:<11}"
            f"{artist.acts_performed_today:<3}/{artist.max_acts_per_show:<16}"
            + ", ".join(artist.skills)
        )
    return "\n".join(lines)


def format_program(program: list[ShowAct]) -> str:
    """Render the show programme status table."""
    lines = [
        "--- Статус программы шоу ---",
        f"{'НомерID':<8}{'Описание':<25}{'Требуется':<12}{'Статус':<30}"
        "Назначенные артисты (ID)",
        "-" * 100,
    ]
    for act in program:
        assigned = ", ".join(act.assigned_artist_ids) or "Нет"
        lines.append(
            f"{act.id:<8}{act.description:<25}{act.performers_needed:<12}"
            f"{act.status:<30}{assigned}"
        )
    return "\n".join(lines)


def run_demo() -> None:
    """Staff a built-in programme and print the tables before and after."""
    artists = [
        Artist("A01", "Иван", ["акробатика", "жонглирование"], 100, 100, 0, 3),
        Artist("A02", "Мария", ["воздушная гимнастика", "акробатика"], 90, 90, 0, 2),
        Artist("A03", "Петр", ["клоунада", "жонглирование"], 120, 120, 0, 4),
        Artist("A04", "Анна", ["акробатика"], 80, 80, 0, 3),
        Artist("A05", "Сергей", ["воздушная гимнастика"], 110, 110, 0, 2),
    ]
    program = [
        ShowAct("S01", "Открытие: Акробаты", ["акробатика"], 2, 1, 30),
        ShowAct("S02", "Воздушный полет", ["воздушная гимнастика"], 1, 2, 40),
        ShowAct("S03", "Веселые жонглеры", ["жонглирование"], 2, 1, 25),
        ShowAct("S04", "Соло акробат", ["акробатика"], 1, 3, 35),
        ShowAct(
            "S05",
            "Финал: Все звезды",
            ["акробатика", "жонглирование", "воздушная гимнастика"],
            3,
            2,
            20,
        ),
    ]

    print("--- Исходное состояние артистов ---")
    print("\n" + format_artists(artists))
    print("\n--- Исходная программа шоу ---")
    print("\n" + format_program(program))
    print("\n--- Формирование состава... ---")
    form_cast(artists, program)
    print("\n" + format_artists(artists))
    print("\n" + format_program(program))