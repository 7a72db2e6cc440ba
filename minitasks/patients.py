"""Ordering patients into an examination queue by procedure type."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ProcedureType(Enum):
    """Examination procedures, in the order the queue serves them."""

    BLOOD_TESTS = "Анализы крови"
    MRI = "МРТ"
    ULTRASOUND = "УЗИ"
    XRAY = "Рентген"
    UNKNOWN = "Неизвестно"

    @property
    def label(self) -> str:
        return self.value

    @property
    def priority(self) -> int:
        return list(ProcedureType).index(self)


def procedure_from_label(text: str) -> ProcedureType:
    """Map a procedure name to its type; unrecognised names give UNKNOWN."""
    for procedure in ProcedureType:
        if procedure is not ProcedureType.UNKNOWN and procedure.label == text:
            return procedure
    return ProcedureType.UNKNOWN


@dataclass
class Patient:
    """A patient waiting for a procedure; only MRI keeps an appointment date."""

    medical_card_id: str
    procedure_label: str
    mri_appointment_date: str | None = None
    original_index: int = 0
    procedure_type: ProcedureType = field(init=False)

    def __post_init__(self) -> None:
        self.procedure_type = procedure_from_label(self.procedure_label)
        if self.procedure_type is not ProcedureType.MRI:
            self.mri_appointment_date = None

    def __str__(self) -> str:
        text = (
            f"Карта: {self.medical_card_id:<8}"
            f"| Тип: {self.procedure_type.label:<15}"
        )
        if self.procedure_type is ProcedureType.MRI and self.mri_appointment_date is not None:
            text += f"| Дата МРТ: {self.mri_appointment_date:<12}"
        else:
            text += "| " + " " * 23
        return text + f"| (Исходный №: {self.original_index + 1})"


def _queue_key(patient: Patient) -> tuple:
    if patient.procedure_type is ProcedureType.MRI and patient.mri_appointment_date is not None:
        detail = (0, patient.mri_appointment_date)
    else:
        detail = (1, "")
    return (patient.procedure_type.priority, detail)


def form_queue(patients: list[Patient]) -> None:
    """Sort the patients in place, keeping the original order among equals.

    Procedures in their fixed order; MRI patients with an appointment come
    first, earliest date first.
    """
    patients.sort(key=_queue_key)


def format_queue(title: str, patients: list[Patient]) -> str:
    """Render the queue under ``title``."""
    lines = [f"--- {title} ---"]
    if patients:
        lines.extend(str(patient) for patient in patients)
    else:
        lines.append("(Очередь пуста)")
    lines.append("-" * (len(title) + 6))
    return "\n".join(lines)


def run_demo() -> None:
    """Form a queue from a built-in list of patients and print it."""
    specs = [
        ("P005", "УЗИ", None),
        ("P001", "МРТ", "2025-06-15"),
        ("P002", "Анализы крови", None),
        ("P003", "Рентген", None),
        ("P004", "МРТ", "2025-06-10"),
        ("P006", "Анализы крови", None),
        ("P007", "УЗИ", None),
        ("P008", "МРТ", "2025-06-15"),
        ("P009", "Неизвестная процедура", None),
    ]
    patients = [
        Patient(card_id, label, date, index)
        for index, (card_id, label, date) in enumerate(specs)
    ]
    print(format_queue("Исходная очередь пациентов", patients))
    print()
    form_queue(patients)
    print(format_queue("Сформированная очередь на обследование", patients))