"""
Lead Submission Service - validates, forwards and classifies one lead
"""

import logging
import os
from enum import Enum
from typing import Dict, Mapping, Optional

from assurerates.models.schemas import (
    RECORDED_STATUSES,
    ClientContext,
    LeadOutcome,
    ProductSchema,
)
from assurerates.services.access_grant import AccessGrantIssuer
from assurerates.services.config_resolver import resolve_credentials
from assurerates.services.event_publisher import EventPublisher
from assurerates.services.exceptions import PartnerRejection, UserInputError
from assurerates.services.lead_forwarder import LeadProsperClient
from assurerates.services.payload_mapper import build_partner_payload
from assurerates.services.validation import validate_address_zip, validate_submission

logger = logging.getLogger(__name__)


class OutcomeState(Enum):
    PENDING = 'pending'
    GRANTED = 'granted'
    REJECTED = 'rejected'


def classify_outcome(status: Optional[str]) -> OutcomeState:
    """GRANTED iff the partner recorded the lead"""
    if isinstance(status, str) and status in RECORDED_STATUSES:
        return OutcomeState.GRANTED
    return OutcomeState.REJECTED


class LeadSubmissionService:
    def __init__(self, forwarder: LeadProsperClient, grant_issuer: AccessGrantIssuer,
                 event_publisher: Optional[EventPublisher] = None,
                 environ: Optional[Mapping[str, str]] = None):
        self.forwarder = forwarder
        self.grant_issuer = grant_issuer
        self.event_publisher = event_publisher
        self.environ = environ

    def submit(self, schema: ProductSchema, submission: Dict, address_zip: str,
               client: ClientContext) -> LeadOutcome:
        """
        Run one submission through the pipeline.

        Raises UserInputError, ConfigurationError or PartnerRejection for the
        expected failures; anything else propagates to the caller.
        """
        validate_address_zip(address_zip)

        validation = validate_submission(schema, submission)
        if not validation.is_complete:
            raise UserInputError(validation.missing_fields)

        environ = os.environ if self.environ is None else self.environ
        credentials = resolve_credentials(schema, environ)

        payload = build_partner_payload(schema, submission, address_zip, credentials, client)

        logger.info(f"Forwarding {schema.product} lead to partner")
        partner_response = self.forwarder.submit_lead(credentials.api_url, payload)

        state = classify_outcome(partner_response.status)
        self.announce(schema, partner_response.status, state)

        if state is OutcomeState.REJECTED:
            logger.warning(f"Partner rejected {schema.product} lead with status {partner_response.status!r}")
            raise PartnerRejection(partner_response.status)

        logger.info(f"{schema.product} lead recorded with status {partner_response.status}")
        return LeadOutcome(
            product=schema.product,
            lead_prosper_status=partner_response.status,
            grant=self.grant_issuer.issue()
        )

    def announce(self, schema: ProductSchema, status: Optional[str], state: OutcomeState):
        """Best-effort outcome event; never affects the response"""
        if self.event_publisher is None:
            return
        try:
            self.event_publisher.publish_lead_outcome(schema.product, status, state.value)
        except Exception as e:
            logger.error(f"Lead outcome event not published: {e}")
