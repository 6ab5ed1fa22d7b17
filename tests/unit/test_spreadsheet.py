"""Unit tests for spreadsheet import and export."""

import io

import pytest
from openpyxl import load_workbook

from contact_analyzer.models import Contact
from contact_analyzer.spreadsheet import (
    SpreadsheetError,
    clean_phone,
    read_contacts,
    write_contacts,
)


class TestReadContacts:
    """Tests for reading uploaded workbooks."""

    def test_maps_columns_in_order(self, make_xlsx):
        data = make_xlsx([["1001", "Ana Pérez", "ana@gmail.com", "9611234567"]])

        [contact] = read_contacts(data)

        assert contact.client_key == "1001"
        assert contact.name == "Ana Pérez"
        assert contact.email == "ana@gmail.com"
        assert contact.phone == "9611234567"
        assert contact.id == 0

    def test_accepts_file_objects(self, make_xlsx):
        data = make_xlsx([["1", "Ana", "a@gmail.com", "9611234567"]])
        assert len(read_contacts(io.BytesIO(data))) == 1

    def test_trims_values_and_cleans_phone(self, make_xlsx):
        data = make_xlsx([["  1001 ", " Ana ", " ana@gmail.com", " (961) 123-4567 "]])

        [contact] = read_contacts(data)

        assert contact.client_key == "1001"
        assert contact.name == "Ana"
        assert contact.email == "ana@gmail.com"
        assert contact.phone == "9611234567"

    def test_numeric_cells_have_no_decimal_suffix(self, make_xlsx):
        data = make_xlsx([[1001, "Ana", "a@gmail.com", 9611234567.0]])

        [contact] = read_contacts(data)

        assert contact.client_key == "1001"
        assert contact.phone == "9611234567"

    def test_extra_columns_ignored(self, make_xlsx):
        data = make_xlsx([["1", "Ana", "a@gmail.com", "9611234567", "extra", "more"]])
        [contact] = read_contacts(data)
        assert contact.phone == "9611234567"

    def test_short_rows_skipped(self, make_xlsx):
        data = make_xlsx([
            ["1", "Ana", "a@gmail.com"],
            ["2", "Luis", "l@gmail.com", "9621234567"],
            ["3", "Eva", "e@gmail.com", None],
        ])

        contacts = read_contacts(data)

        assert [c.client_key for c in contacts] == ["2"]

    def test_empty_middle_cells_kept_as_empty_strings(self, make_xlsx):
        data = make_xlsx([["1", None, "", "9611234567"]])

        [contact] = read_contacts(data)

        assert contact.name == ""
        assert contact.email == ""

    def test_row_limit_counts_scanned_rows(self, make_xlsx):
        rows = [[str(n), "Ana", "a@gmail.com", "9611234567"] for n in range(10)]
        rows.insert(1, ["short"])
        data = make_xlsx(rows)

        contacts = read_contacts(data, max_rows=5)

        assert [c.client_key for c in contacts] == ["0", "1", "2", "3"]

    def test_header_only_rejected(self, make_xlsx):
        with pytest.raises(SpreadsheetError):
            read_contacts(make_xlsx([]))

    def test_empty_sheet_rejected(self, make_xlsx):
        with pytest.raises(SpreadsheetError):
            read_contacts(make_xlsx([], header=None))

    @pytest.mark.parametrize("data", [b"", b"not a spreadsheet", b"PK\x03\x04garbage"])
    def test_unreadable_file_rejected(self, data):
        with pytest.raises(SpreadsheetError):
            read_contacts(data)

    def test_zip_that_is_not_a_workbook_rejected(self):
        import zipfile

        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w") as archive:
            archive.writestr("hello.txt", "hi")

        with pytest.raises(SpreadsheetError):
            read_contacts(buffer.getvalue())

    def test_corrupt_sheet_xml_rejected(self, corrupt_sheet_xlsx):
        with pytest.raises(SpreadsheetError, match="rows"):
            read_contacts(corrupt_sheet_xlsx)


class TestWriteContacts:
    """Tests for exporting workbooks."""

    def test_layout(self):
        contacts = [
            Contact(id=1, client_key="1001", name="Ana Pérez", email="a@gmail.com", phone="9611234567"),
            Contact(id=2, client_key="1002", name="Luis", email="l@yahoo.com", phone="9621234567"),
        ]

        workbook = load_workbook(io.BytesIO(write_contacts(contacts)))
        sheet = workbook.active

        assert sheet.title == "Sheet1"
        rows = [list(r) for r in sheet.iter_rows(values_only=True)]
        assert rows == [
            ["Clave cliente", "   Nombre Contacto ", "Correo ", "Teléfono Contacto  "],
            ["1001", "Ana Pérez", "a@gmail.com", "9611234567"],
            ["1002", "Luis", "l@yahoo.com", "9621234567"],
        ]
        assert sheet.column_dimensions["A"].width == 15
        assert sheet.column_dimensions["B"].width == 35
        assert sheet.column_dimensions["C"].width == 40
        assert sheet.column_dimensions["D"].width == 18

    def test_export_reads_back(self):
        contacts = [Contact(client_key="7", name="Eva", email="e@gmail.com", phone="9941234567")]

        [contact] = read_contacts(write_contacts(contacts))

        assert (contact.client_key, contact.name, contact.email, contact.phone) == (
            "7", "Eva", "e@gmail.com", "9941234567",
        )


def test_clean_phone():
    assert clean_phone("(961) 123-45 67") == "9611234567"
    assert clean_phone("961.123.4567") == "961.123.4567"
