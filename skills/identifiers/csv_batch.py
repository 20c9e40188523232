"""Bulk validation of bank identifiers stored in a CSV column."""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from utils.identifier_validator import VALIDATORS
from utils.logger import logger


@dataclass
class RowResult:
    row_num: int
    masked: str
    valid: bool
    error: str = ""
    normalized: str = ""


@dataclass
class BatchResult:
    rows: List[RowResult] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def valid_count(self) -> int:
        return sum(1 for r in self.rows if r.valid)

    @property
    def invalid_count(self) -> int:
        return len(self.rows) - self.valid_count


def _read_text(path: Path) -> str:
    raw = path.read_bytes()
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        # latin-1 maps every byte, it cannot fail
        return raw.decode("latin-1")


def validate_csv(path: Union[str, Path], column: str, kind: str = "iban") -> BatchResult:
    """
    Validate every value of ``column`` in a CSV file.

    Expected format (UTF-8 or latin-1, comma, semicolon or tab separated):
        name;iban
        Max Mustermann;DE89 3704 0044 0532 0130 00

    Args:
        path:   CSV file with a header row.
        column: header of the column holding the identifiers (case-insensitive).
        kind:   "iban", "bic" or "creditor_id".
    """
    result = BatchResult()
    validator = VALIDATORS.get(kind)
    if validator is None:
        result.errors.append(f"Unbekannter Typ: {kind}. Erwartet: {', '.join(sorted(VALIDATORS))}.")
        return result

    path = Path(path)
    if not path.exists():
        result.errors.append(f"CSV-Datei nicht gefunden: {path}")
        return result

    text = _read_text(path)
    try:
        dialect = csv.Sniffer().sniff(text[:2048], delimiters=",;\t")
    except csv.Error:
        dialect = csv.excel

    reader = csv.DictReader(io.StringIO(text), dialect=dialect)
    if reader.fieldnames is None:
        result.errors.append("CSV hat keine Kopfzeile.")
        return result

    fieldnames_lower = {f.strip().lower(): f for f in reader.fieldnames}
    col = fieldnames_lower.get(column.strip().lower())
    if col is None:
        result.errors.append(
            f"CSV fehlt Spalte '{column}'. Vorhanden: {', '.join(sorted(fieldnames_lower))}."
        )
        return result

    for row_num, row in enumerate(reader, start=2):
        value = (row.get(col) or "").strip()
        if not value:
            result.rows.append(RowResult(row_num, "", False, "Kein Wert angegeben."))
            continue
        check = validator(value)
        result.rows.append(
            RowResult(
                row_num=row_num,
                masked=check.masked,
                valid=check.valid,
                error=check.error,
                normalized=str(check.identifier) if check.identifier is not None else "",
            )
        )

    logger.info(
        "CSV validiert: %s | %d gueltig | %d ungueltig",
        path.name,
        result.valid_count,
        result.invalid_count,
    )
    return result
