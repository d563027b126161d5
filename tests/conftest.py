"""
Shared fixtures: sample submissions, partner credentials and a mocked partner
"""

import json

import pytest

from assurerates.api.lead_api import app as lead_app

PARTNER_URL = 'https://api.leadprosper.test/ingest'

CREDENTIAL_VARIABLES = [
    'REFINANCE_LEADPROSPER_CAMPAIGN_ID',
    'REFINANCE_LEADPROSPER_SUPPLIER_ID',
    'REFINANCE_LEADPROSPER_API_KEY',
    'BUY_HOME_LEADPROSPER_CAMPAIGN_ID',
    'BUY_HOME_LEADPROSPER_SUPPLIER_ID',
    'BUY_HOME_LEADPROSPER_API_KEY',
    'LEADPROSPER_API_URL',
]

CONTACT = {
    'email': 'jane.doe@example.com',
    'firstName': ' Jane ',
    'lastName': 'Doe',
    'address': '123 Main St',
    'city': 'Austin',
    'addressState': 'TX',
    'phoneNumber': '5125550100',
    'addressZip': '78701',
}


@pytest.fixture
def refinance_submission():
    return {
        'productType': 'REFINANCE',
        'zipCode': '78702',
        'propertyType': 'single_family',
        'propertyPurpose': 'primary',
        'creditGrade': 'good',
        'estimatedHomeValue': 450000,
        'mortgageBalance': 280000,
        'firstMortgageInterest': 6.5,
        'secondMortgage': 'no',
        'additionalCash': 0,
        'loanType': 'fixed',
        'bankruptcyOrForeclosure': 'no',
        'currentlyEmployed': 'yes',
        'lateMortgagePayments': 'none',
        'veteranStatus': 'no',
        **CONTACT,
    }


@pytest.fixture
def buy_home_submission():
    return {
        'productType': 'PURCHASE',
        'state': 'TX',
        'propertyZipCode': '78703',
        'propertyType': 'condo',
        'creditGrade': 'excellent',
        'foundHome': 'yes',
        'timelineToBuy': '3_months',
        'estimatedHomeValue': 380000,
        'downPayment': 40000,
        'loanType': 'fha',
        'bankruptcyOrForeclosure': 'no',
        'currentlyEmployed': 'yes',
        'lateMortgagePayments': 'none',
        'veteranStatus': 'no',
        **CONTACT,
    }


@pytest.fixture
def clean_env(monkeypatch):
    for name in CREDENTIAL_VARIABLES + ['APP_ENV', 'LEAD_EVENT_BUS_NAME', 'ACCESS_TOKEN_SECRET']:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def partner_env(clean_env):
    clean_env.setenv('REFINANCE_LEADPROSPER_CAMPAIGN_ID', 'refi-campaign')
    clean_env.setenv('REFINANCE_LEADPROSPER_SUPPLIER_ID', 'refi-supplier')
    clean_env.setenv('REFINANCE_LEADPROSPER_API_KEY', 'refi-key')
    clean_env.setenv('BUY_HOME_LEADPROSPER_CAMPAIGN_ID', 'buy-campaign')
    clean_env.setenv('BUY_HOME_LEADPROSPER_SUPPLIER_ID', 'buy-supplier')
    clean_env.setenv('BUY_HOME_LEADPROSPER_API_KEY', 'buy-key')
    clean_env.setenv('LEADPROSPER_API_URL', PARTNER_URL)
    return clean_env


@pytest.fixture
def client(clean_env):
    lead_app.config['TESTING'] = True
    lead_app.config['ACCESS_TOKEN_SECRET'] = 'test-signing-key'
    lead_app.extensions.pop('lead_service', None)
    with lead_app.test_client() as client:
        yield client
    lead_app.extensions.pop('lead_service', None)
    lead_app.config.pop('APP_ENV', None)


@pytest.fixture
def partner(mocker):
    """Patch the outbound call; call the fixture to set the partner's answer"""
    def respond(body=None, text=None, status_code=200):
        response = mocker.Mock()
        response.text = text if text is not None else json.dumps(body)
        response.status_code = status_code
        return mocker.patch('assurerates.services.lead_forwarder.requests.post', return_value=response)

    return respond
