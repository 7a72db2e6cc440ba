"""Counting electrons by energy relative to band edges or an energy window."""

from __future__ import annotations

from collections.abc import Iterable

_RULE = "-" * 60


def count_below(energies: Iterable[float], level: float) -> int:
    """Number of energies strictly below ``level``."""
    return sum(1 for energy in energies if energy < level)


def count_above(energies: Iterable[float], level: float) -> int:
    """Number of energies strictly above ``level``."""
    return sum(1 for energy in energies if energy > level)


def count_in_range(energies: Iterable[float], e_min: float, e_max: float) -> int:
    """Number of energies within ``[e_min, e_max]``; zero if the range is inverted."""
    if e_min > e_max:
        return 0
    return sum(1 for energy in energies if e_min <= energy <= e_max)


def format_energies(energies: Iterable[float], label: str) -> str:
    """Render the energies as ``label: [a, b, ...]`` with two decimals."""
    return f"{label}: [" + ", ".join(f"{energy:.2f}" for energy in energies) + "]"


def run_demo() -> None:
    """Count electrons of a built-in energy list in several scenarios."""
    energies = [
        -13.60, -3.40, -1.51, -0.85, 0.00, 0.50,
        1.00, 1.15, 1.70, 2.50, 3.00, 5.50, 7.00,
    ]
    print(format_energies(energies, "Initial Electron Energies (eV)"))
    print(_RULE)

    ev, ec = 0.0, 1.1
    print(f"Scenario 1: Semiconductor Analysis (Ev = {ev:.2f} eV, Ec = {ec:.2f} eV)")
    print(f"Electrons in Valence Band (E < {ev:.2f} eV): {count_below(energies, ev)}")
    print(f"Electrons in Conduction Band (E > {ec:.2f} eV): {count_above(energies, ec)}")
    print(
        f"Electrons in Forbidden Gap ({ev:.2f} eV <= E <= {ec:.2f} eV): "
        f"{count_in_range(energies, ev, ec)}"
    )
    print(_RULE)

    low, high = -2.00, 0.75
    print("Scenario 2: Custom Energy Window Search")
    print(f"Counting electrons in range [{low:.2f} eV, {high:.2f} eV]")
    print(f"Electrons found in custom range: {count_in_range(energies, low, high)}")
    print(_RULE)

    fermi = -0.50
    print(f"Scenario 3: Analysis Relative to Fermi Level (Ef = {fermi:.2f} eV)")
    print(
        f"Electrons with energy E < {fermi:.2f} eV (below Fermi level): "
        f"{count_below(energies, fermi)}"
    )
    print(
        f"Electrons with energy E > {fermi:.2f} eV (above Fermi level): "
        f"{count_above(energies, fermi)}"
    )
    print(_RULE)

    empty: list[float] = []
    print("Edge Case: Empty Electron Energy List")
    print(format_energies(empty, "Empty electron energies list"))
    print(f"Electrons below 0.0 eV in empty list: {count_below(empty, 0.0)}")
    print(f"Electrons in range [-1.0, 1.0] eV in empty list: {count_in_range(empty, -1.0, 1.0)}")
    print(_RULE)

    print("Edge Case: Invalid Range for count_electrons_in_range")
    bad_min, bad_max = 1.0, 0.0
    print(
        f"Electrons in range [{bad_min:.2f} eV, {bad_max:.2f} eV]: "
        f"{count_in_range(energies, bad_min, bad_max)}"
    )
    print(_RULE)