"""
Payload Mapper - re-keys a submission into the LeadProsper schema
"""

from typing import Any, Dict

from assurerates.models.schemas import ClientContext, ExternalCredentials, ProductSchema

# Compliance text: must stay byte-for-byte identical to the approved disclosure
DEFAULT_TCPA_TEXT = "By clicking Submit Details, you agree to: (1) our TERMS OF USE, which include a Class Waiver and Mandatory Arbitration Agreement, (2) our PRIVACY POLICY, and (3) receive notices and other COMMUNICATIONS ELECTRONICALLY. By clicking Submit Details, you: (a) provide your express written consent and binding signature under the ESIGN Act for Leadpoint, Inc. dba SecureRights, a Delaware corporation, to share your information with up to four (4) of its PREMIER PARTNERS and/or third parties acting on their behalf to contact you via telephone, mobile device (including SMS and MMS) and/or email, including but not limited to texts or calls made using an automated telephone dialing system, AI-generated voice and text messages, or pre-recorded or artificial voice messages, regarding financial services or other offers related to homeownership; (b) understand that your consent is valid even if your telephone number is currently listed on any state, federal, local or corporate Do Not Call list; (c) represent that you are the wireless subscriber or customary user of the wireless number(s) provided with authority to consent; (d) understand your consent is not required in order to obtain any good or service; (e) represent that you have received and reviewed the MORTGAGE BROKER DISCLOSURES for your state; and (f) provide your consent under the Fair Credit Reporting Act for SecureRights and/or its PREMIER PARTNERS to obtain information from your personal credit profile to prequalify you for credit options and connect you with an appropriate partner. You may choose to speak with an individual service provider by dialing (844) 326-3442. Leadpoint, Inc. NMLS 3175."


def stringify(value: Any) -> str:
    """Partner expects strings; integral floats lose their trailing .0"""
    if value is None or isinstance(value, (dict, list)):
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def consent_text(submission: Dict) -> str:
    supplied = stringify(submission.get('tcpaText'))
    return supplied or DEFAULT_TCPA_TEXT


def build_partner_payload(
    schema: ProductSchema,
    submission: Dict,
    address_zip: str,
    credentials: ExternalCredentials,
    client: ClientContext,
) -> Dict[str, str]:
    """Build the partner request body; every key is always present"""
    payload = {
        'lp_campaign_id': credentials.campaign_id,
        'lp_supplier_id': credentials.supplier_id,
        'lp_key': credentials.api_key,
        'lp_subid1': '',
        'lp_subid2': '',
    }

    for spec in schema.fields:
        if spec.applies_to(submission):
            payload[spec.external_key] = stringify(submission.get(spec.name))
        else:
            payload[spec.external_key] = ''

    payload[schema.address_zip_key] = stringify(address_zip)
    payload['ip_address'] = client.ip_address
    payload['user_agent'] = client.user_agent
    payload['landing_page_url'] = client.landing_page_url
    payload['trustedform_cert_url'] = stringify(submission.get('trustedformCertUrl'))
    payload['tcpa_text'] = consent_text(submission)

    return payload
