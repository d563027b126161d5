from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

# Partner status tokens
ACCEPTED = 'ACCEPTED'
DUPLICATED = 'DUPLICATED'
ERROR = 'ERROR'

# The partner records an attempt for all three, ERROR included
RECORDED_STATUSES = frozenset({ACCEPTED, DUPLICATED, ERROR})


class FieldKind(str, Enum):
    STRING = 'string'
    NUMERIC = 'numeric'


@dataclass(frozen=True)
class FieldSpec:
    name: str
    external_key: str
    kind: FieldKind = FieldKind.STRING
    exact_length: Optional[int] = None
    required_when: Optional[Tuple[str, str]] = None

    def applies_to(self, submission: Dict) -> bool:
        """Whether the field is in play for this submission"""
        if self.required_when is None:
            return True
        trigger_field, trigger_value = self.required_when
        return submission.get(trigger_field) == trigger_value


@dataclass(frozen=True)
class ProductSchema:
    product: str
    endpoint: str
    fields: Tuple[FieldSpec, ...]
    address_zip_key: str
    credential_prefixes: Tuple[str, ...]


@dataclass
class ValidationResult:
    missing_fields: List[str] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields


@dataclass(frozen=True)
class ExternalCredentials:
    campaign_id: str
    supplier_id: str
    api_key: str
    api_url: str


@dataclass(frozen=True)
class ClientContext:
    ip_address: str = 'unknown'
    user_agent: str = ''
    landing_page_url: str = ''


@dataclass(frozen=True)
class PartnerResponse:
    status: Optional[str]
    body: object
    http_status: int
    decoded: bool = True


@dataclass(frozen=True)
class AccessGrant:
    token: str
    expires_at: int  # epoch milliseconds
    max_age: int = 600


@dataclass
class LeadOutcome:
    product: str
    lead_prosper_status: Optional[str]
    grant: AccessGrant
    redirect_url: str = '/thankyou'

    def to_response(self) -> Dict:
        return {
            'success': True,
            'message': 'Form submitted successfully',
            'redirectUrl': self.redirect_url,
            'leadProsperStatus': self.lead_prosper_status,
            'accessToken': self.grant.token,
            'expiresAt': self.grant.expires_at,
        }
