"""Spreadsheet import and export for contact lists (.xlsx)."""

import io
from collections.abc import Iterable
from typing import Any, BinaryIO
from zipfile import BadZipFile

import structlog
from openpyxl import Workbook, load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from contact_analyzer.models import Contact

logger = structlog.get_logger()


XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

EXPORT_SHEET = "Sheet1"
EXPORT_COLUMNS = (
    # (header, width); labels match the customer template, spaces included
    ("Clave cliente", 15),
    ("   Nombre Contacto ", 35),
    ("Correo ", 40),
    ("Teléfono Contacto  ", 18),
)

MIN_CELLS = 4
PHONE_STRIP = str.maketrans("", "", " -()")


class SpreadsheetError(ValueError):
    """Raised when an uploaded spreadsheet cannot be read."""


def read_contacts(source: BinaryIO | bytes, max_rows: int = 50) -> list[Contact]:
    """Read contacts from the first worksheet of an .xlsx file.

    The first row is a header. Each following row maps its first four
    cells to client key, name, email and phone; rows with fewer cells
    are skipped and extra columns are ignored. At most ``max_rows``
    data rows are scanned.

    Args:
        source: File object or raw bytes of the workbook
        max_rows: Data rows to scan before stopping

    Returns:
        Unsaved contacts, in sheet order

    Raises:
        SpreadsheetError: If the file is not a readable workbook or has no data rows
    """
    data = source if isinstance(source, bytes) else source.read()

    try:
        workbook = load_workbook(io.BytesIO(data), read_only=True, data_only=True)
    except (InvalidFileException, BadZipFile, KeyError, OSError) as e:
        raise SpreadsheetError("Could not open the spreadsheet file") from e

    # Read-only workbooks parse sheet XML lazily, so broken sheets fail here
    try:
        contacts, scanned = _scan_rows(workbook, max_rows)
    except SpreadsheetError:
        raise
    except (SyntaxError, ValueError, KeyError, TypeError) as e:
        raise SpreadsheetError("Could not read the spreadsheet rows") from e
    finally:
        workbook.close()

    logger.info("spreadsheet_read", rows_scanned=scanned, contacts=len(contacts))
    return contacts


def _scan_rows(workbook, max_rows: int) -> tuple[list[Contact], int]:
    if not workbook.worksheets:
        raise SpreadsheetError("The spreadsheet has no worksheets")

    rows = workbook.worksheets[0].iter_rows(values_only=True)
    if next(rows, None) is None:
        raise SpreadsheetError("The spreadsheet must contain a header and at least one row")

    contacts = []
    scanned = 0
    for row in rows:
        if scanned >= max_rows:
            break
        scanned += 1

        cells = _trim_trailing_empty(row)
        if len(cells) < MIN_CELLS:
            continue
        contacts.append(_row_to_contact(cells))

    if scanned == 0:
        raise SpreadsheetError("The spreadsheet must contain a header and at least one row")

    return contacts, scanned


def write_contacts(contacts: Iterable[Contact]) -> bytes:
    """Render contacts into an .xlsx workbook.

    Returns:
        The workbook file contents
    """
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = EXPORT_SHEET

    sheet.append([header for header, _ in EXPORT_COLUMNS])
    count = 0
    for contact in contacts:
        sheet.append([contact.client_key, contact.name, contact.email, contact.phone])
        count += 1

    for column, (_, width) in zip("ABCD", EXPORT_COLUMNS):
        sheet.column_dimensions[column].width = width

    buffer = io.BytesIO()
    workbook.save(buffer)

    logger.info("spreadsheet_written", contacts=count, size=buffer.tell())
    return buffer.getvalue()


def clean_phone(phone: str) -> str:
    """Drop spaces, hyphens and parentheses from a phone number."""
    return phone.translate(PHONE_STRIP)


def _row_to_contact(cells: list[Any]) -> Contact:
    client_key, name, email, phone = (_cell_text(value) for value in cells[:MIN_CELLS])
    return Contact(
        client_key=client_key,
        name=name,
        email=email,
        phone=clean_phone(phone),
    )


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    # Numeric cells come back as floats for whole numbers too
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def _trim_trailing_empty(row: tuple) -> list[Any]:
    cells = list(row)
    while cells and (cells[-1] is None or cells[-1] == ""):
        cells.pop()
    return cells
