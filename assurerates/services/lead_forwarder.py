"""
Submission Forwarder - sends one lead to the LeadProsper API
"""

import json
import logging
import time
from enum import Enum
from typing import Dict

import requests
from prometheus_client import Histogram

from assurerates.models.schemas import ACCEPTED, PartnerResponse
from assurerates.services.exceptions import PartnerDecodeError

logger = logging.getLogger(__name__)

partner_request_duration = Histogram(
    'partner_request_duration_seconds',
    'Time spent waiting on the lead partner API'
)

DEFAULT_TIMEOUT_SECONDS = 10


class DecodeFailurePolicy(Enum):
    # A non-JSON partner body is read as an acceptance
    TREAT_AS_ACCEPTED = 'treat_as_accepted'
    RAISE = 'raise'


class LeadProsperClient:
    def __init__(self, timeout: float = DEFAULT_TIMEOUT_SECONDS,
                 on_decode_failure: DecodeFailurePolicy = DecodeFailurePolicy.TREAT_AS_ACCEPTED,
                 verbose: bool = False):
        self.timeout = timeout
        self.on_decode_failure = on_decode_failure
        self.verbose = verbose

    def submit_lead(self, api_url: str, payload: Dict[str, str]) -> PartnerResponse:
        """POST the payload once; no retries"""
        start_time = time.time()
        with partner_request_duration.time():
            response = requests.post(
                api_url,
                json=payload,
                headers={
                    'Content-Type': 'application/json',
                    'Accept': 'application/json'
                },
                timeout=self.timeout
            )

        raw_response = response.text
        elapsed_ms = (time.time() - start_time) * 1000
        logger.info(f"Lead partner answered HTTP {response.status_code} in {elapsed_ms:.0f}ms")

        partner_response = self.interpret(raw_response, response.status_code)

        if self.verbose:
            logger.info(f"LeadProsper response: {partner_response.body}")
        else:
            logger.debug(f"LeadProsper response: {partner_response.body}")

        return partner_response

    def interpret(self, raw_response: str, http_status: int) -> PartnerResponse:
        """Decode the partner body; the HTTP status code is not consulted"""
        try:
            body = json.loads(raw_response)
        except ValueError:
            if self.on_decode_failure == DecodeFailurePolicy.RAISE:
                raise PartnerDecodeError(f"Partner returned non-JSON body (HTTP {http_status})")
            logger.warning(f"Partner returned non-JSON body (HTTP {http_status}); treating as {ACCEPTED}")
            return PartnerResponse(
                status=ACCEPTED,
                body={'status': ACCEPTED},
                http_status=http_status,
                decoded=False
            )

        status = body.get('status') if isinstance(body, dict) else None
        if not isinstance(status, str):
            status = None
        return PartnerResponse(status=status, body=body, http_status=http_status)
