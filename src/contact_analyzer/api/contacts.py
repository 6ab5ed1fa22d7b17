"""Contacts API endpoints."""

import io

import structlog
from flask import Blueprint, current_app, jsonify, request, send_file
from pydantic import ValidationError

from contact_analyzer.models import Contact
from contact_analyzer.schemas import (
    ContactPage,
    ContactResponse,
    ContactUpdate,
    ContactValidationResponse,
    PageParams,
    SearchParams,
    UploadResponse,
    ValidationPage,
)
from contact_analyzer.services import ContactService
from contact_analyzer.spreadsheet import (
    XLSX_MIMETYPE,
    SpreadsheetError,
    read_contacts,
    write_contacts,
)
from contact_analyzer.store import ContactNotFoundError

logger = structlog.get_logger()


contacts_bp = Blueprint("contacts", __name__)


def get_contact_service() -> ContactService:
    """Return the service owned by the running application."""
    return current_app.extensions["contact_service"]


def _parse_contact_id(raw: str) -> int | None:
    """Return the id for a path segment of plain ASCII digits, else None."""
    if raw.isascii() and raw.isdigit():
        return int(raw)
    return None


def _invalid(message: str, error: ValidationError):
    return jsonify({"error": message, "details": error.errors(include_url=False)}), 400


def _contact_page(contacts: list[Contact], params: PageParams) -> dict:
    page = ContactPage(
        data=[ContactResponse.model_validate(c) for c in params.slice(contacts)],
        **params.meta(len(contacts)),
    )
    return page.model_dump(mode="json")


@contacts_bp.post("/upload")
def upload_contacts():
    """Import contacts from an uploaded .xlsx file (form field ``file``)."""
    service = get_contact_service()

    upload = request.files.get("file")
    if upload is None:
        return jsonify({"error": "Could not read the uploaded file"}), 400

    try:
        contacts = read_contacts(
            upload.stream,
            max_rows=current_app.config["MAX_UPLOAD_ROWS"],
        )
    except SpreadsheetError as e:
        logger.warning("spreadsheet_rejected", filename=upload.filename, reason=str(e))
        return jsonify({"error": str(e)}), 400

    saved = service.save_batch(contacts)
    logger.info("contacts_imported", filename=upload.filename, count=len(saved))

    response = UploadResponse(message="File uploaded successfully", count=len(saved))
    return jsonify(response.model_dump())


@contacts_bp.get("/", strict_slashes=False)
def list_contacts():
    """List contacts, one page at a time.

    Query params:
        page: 1-based page number (default 1)
        page_size: Items per page, 1-100 (default 50)
    """
    service = get_contact_service()

    try:
        params = PageParams.model_validate(request.args.to_dict())
    except ValidationError as e:
        return _invalid("Invalid pagination parameters", e)

    return jsonify(_contact_page(service.get_all(), params))


@contacts_bp.get("/search")
def search_contacts():
    """Search contacts by one field.

    Query params:
        field: client_key, name, email or phone
        value: Text to look for (case-insensitive, substring)
        page, page_size: Pagination
    """
    service = get_contact_service()
    args = request.args.to_dict()

    try:
        query = SearchParams.model_validate(
            {"field": args.pop("field", ""), "value": args.pop("value", "")}
        )
    except ValidationError as e:
        return _invalid("Query parameters 'field' and 'value' are required", e)

    try:
        params = PageParams.model_validate(args)
    except ValidationError as e:
        return _invalid("Invalid pagination parameters", e)

    contacts = service.search(query.field, query.value)
    return jsonify(_contact_page(contacts, params))


@contacts_bp.get("/validate")
def validate_contacts():
    """Validate every contact and return the errors found.

    ``valid`` and ``invalid`` count all contacts, not just this page.
    """
    service = get_contact_service()

    try:
        params = PageParams.model_validate(request.args.to_dict())
    except ValidationError as e:
        return _invalid("Invalid pagination parameters", e)

    results = service.validate_all()
    valid = sum(1 for r in results if r.is_valid)

    response = ValidationPage(
        data=[ContactValidationResponse.from_result(r) for r in params.slice(results)],
        valid=valid,
        invalid=len(results) - valid,
        **params.meta(len(results)),
    )
    return jsonify(response.model_dump(mode="json"))


@contacts_bp.get("/download")
def download_contacts():
    """Download every contact as an .xlsx file."""
    service = get_contact_service()

    contacts = service.get_all()
    if not contacts:
        return jsonify({"error": "There are no contacts to download"}), 400

    data = write_contacts(contacts)
    logger.info("contacts_exported", count=len(contacts), size=len(data))

    return send_file(
        io.BytesIO(data),
        mimetype=XLSX_MIMETYPE,
        as_attachment=True,
        download_name=current_app.config["EXPORT_FILENAME"],
    )


@contacts_bp.get("/<contact_id>")
def get_contact(contact_id: str):
    """Get a specific contact by id."""
    service = get_contact_service()

    contact_id = _parse_contact_id(contact_id)
    if contact_id is None:
        return jsonify({"error": "Invalid contact id"}), 400

    try:
        contact = service.get(contact_id)
    except ContactNotFoundError as e:
        return jsonify({"error": str(e)}), 404

    response = ContactResponse.model_validate(contact)
    return jsonify(response.model_dump(mode="json"))


@contacts_bp.put("/<contact_id>")
def update_contact(contact_id: str):
    """Replace every field of an existing contact."""
    service = get_contact_service()

    contact_id = _parse_contact_id(contact_id)
    if contact_id is None:
        return jsonify({"error": "Invalid contact id"}), 400

    try:
        data = ContactUpdate.model_validate(request.get_json(silent=True))
    except ValidationError as e:
        return _invalid("Invalid contact data", e)

    try:
        contact = service.update(Contact(id=contact_id, **data.model_dump()))
    except ContactNotFoundError as e:
        logger.warning("contact_not_found", contact_id=contact_id)
        return jsonify({"error": str(e)}), 404

    logger.info("contact_updated", contact_id=contact.id)

    response = ContactResponse.model_validate(contact)
    return jsonify(response.model_dump(mode="json"))
