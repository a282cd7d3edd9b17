"""I/O utilities for CSV import/export."""

from .export_csv import export_schedule_csv, write_schedule_csv
from .import_csv import read_employees_csv, read_events_csv, read_forecasts_csv

__all__ = [
    "read_employees_csv",
    "read_forecasts_csv",
    "read_events_csv",
    "export_schedule_csv",
    "write_schedule_csv",
]
