"""
Services package initialization
"""

from .access_grant import AccessGrantIssuer
from .event_publisher import EventPublisher
from .lead_forwarder import DecodeFailurePolicy, LeadProsperClient
from .lead_pipeline import LeadSubmissionService, OutcomeState, classify_outcome

__all__ = [
    'AccessGrantIssuer',
    'DecodeFailurePolicy',
    'EventPublisher',
    'LeadProsperClient',
    'LeadSubmissionService',
    'OutcomeState',
    'classify_outcome'
]
