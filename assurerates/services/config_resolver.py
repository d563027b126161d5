"""
Configuration Resolver - partner credentials from the environment
"""

import os
from typing import Dict, List, Mapping, Optional, Tuple

from assurerates.models.schemas import ExternalCredentials, ProductSchema
from assurerates.services.exceptions import ConfigurationError

API_URL_VARIABLE = 'LEADPROSPER_API_URL'

# (credential attribute, variable suffix); suffixed names are tried against
# each of the product's credential prefixes in order
PREFIXED_CREDENTIALS = (
    ('campaign_id', 'LEADPROSPER_CAMPAIGN_ID'),
    ('supplier_id', 'LEADPROSPER_SUPPLIER_ID'),
    ('api_key', 'LEADPROSPER_API_KEY'),
)


def candidate_variables(schema: ProductSchema) -> List[Tuple[str, List[str]]]:
    """Ordered environment variable candidates for each credential"""
    candidates = [
        (attribute, [f"{prefix}_{suffix}" for prefix in schema.credential_prefixes])
        for attribute, suffix in PREFIXED_CREDENTIALS
    ]
    candidates.append(('api_url', [API_URL_VARIABLE]))
    return candidates


def _first_set(environ: Mapping[str, str], names: List[str]) -> Optional[str]:
    for name in names:
        value = environ.get(name)
        if value:
            return value
    return None


def _lookup(schema: ProductSchema, environ: Optional[Mapping[str, str]]):
    environ = os.environ if environ is None else environ
    values: Dict[str, str] = {}
    missing: List[str] = []

    for attribute, names in candidate_variables(schema):
        value = _first_set(environ, names)
        if value is None:
            missing.append(' or '.join(names))
        else:
            values[attribute] = value

    return values, missing


def missing_credential_names(schema: ProductSchema, environ: Optional[Mapping[str, str]] = None) -> List[str]:
    _, missing = _lookup(schema, environ)
    return missing


def resolve_credentials(schema: ProductSchema, environ: Optional[Mapping[str, str]] = None) -> ExternalCredentials:
    """Resolve the four partner credentials or fail naming every gap"""
    values, missing = _lookup(schema, environ)
    if missing:
        raise ConfigurationError(missing)
    return ExternalCredentials(**values)
