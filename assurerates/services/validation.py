"""
Field Validator - checks a submission against its product descriptor
"""

import logging
from typing import Any, Dict

from assurerates.models.schemas import FieldKind, FieldSpec, ProductSchema, ValidationResult
from assurerates.services.exceptions import UserInputError

logger = logging.getLogger(__name__)

ADDRESS_ZIP_FIELD = 'addressZip'
ADDRESS_ZIP_LENGTH = 5
ADDRESS_ZIP_MESSAGE = (
    'Address zip code is required. Please provide zip_code in URL '
    'or addressZip in request body.'
)


def is_present(value: Any, kind: FieldKind) -> bool:
    """
    Numeric answers only need to be supplied (0 and "" both count); string
    answers must be non-blank scalars
    """
    if value is None or isinstance(value, (dict, list)):
        return False
    if kind == FieldKind.NUMERIC:
        return True
    return bool(str(value).strip())


def field_is_missing(spec: FieldSpec, submission: Dict) -> bool:
    value = submission.get(spec.name)
    if not is_present(value, spec.kind):
        return True
    if spec.exact_length is not None and len(str(value).strip()) != spec.exact_length:
        return True
    return False


def validate_address_zip(address_zip: str) -> None:
    """The current-address zip is checked before anything else"""
    if not address_zip or len(address_zip) != ADDRESS_ZIP_LENGTH:
        raise UserInputError([ADDRESS_ZIP_FIELD], message=ADDRESS_ZIP_MESSAGE)


def validate_submission(schema: ProductSchema, submission: Dict) -> ValidationResult:
    """Collect every missing required field, in descriptor order"""
    missing = [
        spec.name
        for spec in schema.fields
        if spec.applies_to(submission) and field_is_missing(spec, submission)
    ]

    if missing:
        logger.info(f"{schema.product} submission missing fields: {missing}")

    return ValidationResult(missing_fields=missing)
