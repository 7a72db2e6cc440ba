"""A menu of small scheduling, sorting and data-cleaning tasks, one module per task."""

__version__ = "0.1.0"