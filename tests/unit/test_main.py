import pytest
from flask import Flask

import main


@pytest.fixture
def health_client(clean_env):
    health_app = Flask(__name__)
    main.setup_health_checks(health_app)
    return health_app.test_client()


def test_health(health_client):
    response = health_client.get('/health')
    assert response.status_code == 200
    assert response.get_json()['status'] == 'healthy'


def test_ready_reports_unconfigured_products(health_client):
    data = health_client.get('/ready').get_json()
    assert data['status'] == 'degraded'
    assert sorted(data['unconfigured_products']) == ['buy_home', 'refinance']


def test_ready_when_configured(partner_env, health_client):
    data = health_client.get('/ready').get_json()
    assert data == {'status': 'ready', 'unconfigured_products': []}


def test_validate_environment_rejects_unknown_env(clean_env):
    clean_env.setenv('APP_ENV', 'staging')
    with pytest.raises(SystemExit):
        main.validate_environment()


def test_validate_environment_rejects_bad_port(clean_env):
    clean_env.setenv('PORT', 'eighty')
    with pytest.raises(SystemExit):
        main.validate_environment()


def test_validate_environment_warns_on_missing_credentials(clean_env, caplog):
    clean_env.setenv('PORT', '5000')
    main.validate_environment()
    assert 'LEADPROSPER_API_URL' in caplog.text
