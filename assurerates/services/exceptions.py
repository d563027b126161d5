"""
Error taxonomy for the lead-submission pipeline.

Every expected failure maps to one of these; anything else is reported to
the client as a generic internal error by the API layer.
"""

from typing import Dict, List, Optional


class LeadSubmissionError(Exception):
    status_code = 500
    outcome = 'error'

    def to_response(self) -> Dict:
        return {'error': 'Internal server error'}


class UserInputError(LeadSubmissionError):
    """Missing or malformed applicant fields"""

    status_code = 400
    outcome = 'invalid'

    def __init__(self, missing_fields: List[str], message: str = 'All fields are required'):
        super().__init__(message)
        self.message = message
        self.missing_fields = list(missing_fields)

    def to_response(self) -> Dict:
        return {
            'error': self.message,
            'missingFields': self.missing_fields,
        }


class ConfigurationError(LeadSubmissionError):
    """Partner credentials are not configured on the server"""

    status_code = 500
    outcome = 'misconfigured'

    def __init__(self, missing_variables: List[str]):
        self.missing_variables = list(missing_variables)
        self.details = f"Missing: {', '.join(self.missing_variables)}"
        super().__init__(self.details)

    def to_response(self) -> Dict:
        return {
            'error': 'Server configuration error. Please contact support.',
            'details': self.details,
        }


class PartnerRejection(LeadSubmissionError):
    """The partner answered with a status outside the recorded set"""

    status_code = 400
    outcome = 'rejected'

    def __init__(self, status: Optional[str]):
        super().__init__(f"Partner rejected lead with status {status!r}")
        self.status = status

    def to_response(self) -> Dict:
        return {
            'success': False,
            'error': 'Lead submission failed',
            'leadProsperStatus': self.status,
        }


class PartnerDecodeError(Exception):
    """Raised when the partner body is not JSON and the policy says so"""
