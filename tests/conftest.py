"""Pytest fixtures and configuration."""

import io
import zipfile

import pytest
from flask import Flask
from flask.testing import FlaskClient
from openpyxl import Workbook

from contact_analyzer.app import create_app
from contact_analyzer.models import Contact
from contact_analyzer.services import ContactService
from contact_analyzer.store import InMemoryContactStore


HEADER = ["Clave cliente", "   Nombre Contacto ", "Correo ", "Teléfono Contacto  "]


@pytest.fixture
def store() -> InMemoryContactStore:
    """Fresh, empty in-memory store."""
    return InMemoryContactStore()


@pytest.fixture
def service(store) -> ContactService:
    """Contact service over the fresh store."""
    return ContactService(store)


@pytest.fixture
def app(store) -> Flask:
    """Create application for testing, serving the fresh store."""
    return create_app(
        {
            "TESTING": True,
            "SECRET_KEY": "test-secret-key",
        },
        store=store,
    )


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Test client fixture."""
    return app.test_client()


@pytest.fixture
def valid_contact(store) -> Contact:
    """Store a contact that passes every rule."""
    return store.insert(Contact(
        client_key="1001",
        name="Ana Pérez",
        email="ana.perez@gmail.com",
        phone="9611234567",
    ))


@pytest.fixture
def invalid_contact(store) -> Contact:
    """Store a contact that breaks a rule on every field."""
    return store.insert(Contact(
        client_key="10a",
        name="J0hn",
        email="john@unknown.org",
        phone="5512345678",
    ))


@pytest.fixture
def make_xlsx():
    """Build .xlsx bytes from a list of rows (header added unless given)."""

    def _make(rows: list[list], header: list | None = HEADER) -> bytes:
        workbook = Workbook()
        sheet = workbook.active
        if header is not None:
            sheet.append(header)
        for row in rows:
            sheet.append(row)
        buffer = io.BytesIO()
        workbook.save(buffer)
        return buffer.getvalue()

    return _make


@pytest.fixture
def corrupt_sheet_xlsx(make_xlsx) -> bytes:
    """A valid workbook archive whose first sheet holds truncated XML."""
    source = zipfile.ZipFile(io.BytesIO(make_xlsx([["1", "Ana", "a@gmail.com", "9611234567"]])))
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as target:
        for item in source.infolist():
            data = source.read(item.filename)
            if item.filename == "xl/worksheets/sheet1.xml":
                data = b"<worksheet><sheetData><row><c"
            target.writestr(item, data)
    return buffer.getvalue()
