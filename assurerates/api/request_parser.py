"""
Request Parser - turns a Flask request into pipeline inputs
"""

from typing import Any, Dict, Optional

from assurerates.models.schemas import ClientContext


def parse_submission_body(request) -> Dict[str, Any]:
    """
    Decode the JSON body. Malformed JSON raises; a well-formed body that is
    not an object carries no fields, so validation reports all of them
    """
    body = request.get_json(force=True)
    if not isinstance(body, dict):
        return {}
    return body


def resolve_address_zip(url_zip: Optional[str], body: Dict[str, Any]) -> str:
    """URL zip_code wins over the body's addressZip; empty values count as absent"""
    address_zip = url_zip or body.get('addressZip') or ''
    # Not stripped: " 78701 " is seven characters and fails the length check
    return str(address_zip)


def client_ip(headers) -> str:
    forwarded = headers.get('X-Forwarded-For')
    if forwarded:
        return forwarded.split(',')[0].strip()
    return headers.get('X-Real-IP') or 'unknown'


def client_context_from_request(request) -> ClientContext:
    return ClientContext(
        ip_address=client_ip(request.headers),
        user_agent=request.headers.get('User-Agent', ''),
        landing_page_url=request.headers.get('Referer', '')
    )
