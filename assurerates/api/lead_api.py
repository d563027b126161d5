"""
Lead Capture Service - refinance and home-purchase form submissions
"""

from flask import Flask, request, jsonify, Response
from prometheus_client import Counter, generate_latest, CONTENT_TYPE_LATEST
import os
import logging

from assurerates.api.request_parser import (
    client_context_from_request,
    parse_submission_body,
    resolve_address_zip,
)
from assurerates.models.products import BUY_HOME, REFINANCE
from assurerates.services.access_grant import ACCESS_COOKIE_NAME, AccessGrantIssuer, resolve_secret
from assurerates.services.event_publisher import EventPublisher
from assurerates.services.exceptions import LeadSubmissionError
from assurerates.services.lead_forwarder import DEFAULT_TIMEOUT_SECONDS, LeadProsperClient
from assurerates.services.lead_pipeline import LeadSubmissionService

app = Flask(__name__)
logger = logging.getLogger(__name__)

# Prometheus metrics
lead_submissions = Counter(
    'lead_submissions_total',
    'Lead submissions by product and outcome',
    ['product', 'outcome']
)


def config_value(key, default=None):
    """app.config first, then the environment"""
    value = app.config.get(key)
    if value is None:
        value = os.getenv(key, default)
    return value


def is_production():
    return config_value('APP_ENV', 'development') == 'production'


def get_lead_service():
    """Build the pipeline once per app; credentials are still read per request"""
    service = app.extensions.get('lead_service')
    if service is None:
        event_bus_name = config_value('LEAD_EVENT_BUS_NAME')
        publisher = None
        if event_bus_name:
            publisher = EventPublisher(event_bus_name, region_name=config_value('AWS_REGION'))

        service = LeadSubmissionService(
            forwarder=LeadProsperClient(
                timeout=float(config_value('PARTNER_TIMEOUT_SECONDS', DEFAULT_TIMEOUT_SECONDS)),
                verbose=config_value('APP_ENV', 'development') == 'development'
            ),
            grant_issuer=AccessGrantIssuer(resolve_secret(config_value('ACCESS_TOKEN_SECRET'))),
            event_publisher=publisher
        )
        app.extensions['lead_service'] = service
    return service


def handle_submission(schema):
    """Shared request handling for every product endpoint"""
    try:
        submission = parse_submission_body(request)
        address_zip = resolve_address_zip(request.args.get('zip_code'), submission)
        client = client_context_from_request(request)

        outcome = get_lead_service().submit(schema, submission, address_zip, client)

    except LeadSubmissionError as e:
        lead_submissions.labels(schema.product, e.outcome).inc()
        if e.status_code >= 500:
            logger.error(f"Configuration error in {schema.endpoint}: {e}")
        return jsonify(e.to_response()), e.status_code

    except Exception as e:
        lead_submissions.labels(schema.product, 'error').inc()
        logger.error(f"Error in {schema.endpoint}: {str(e)}", exc_info=True)
        return jsonify({'error': 'Internal server error'}), 500

    lead_submissions.labels(schema.product, 'granted').inc()

    response = jsonify(outcome.to_response())
    response.set_cookie(
        ACCESS_COOKIE_NAME,
        outcome.grant.token,
        max_age=outcome.grant.max_age,
        httponly=True,
        secure=is_production(),
        samesite='Strict'
    )
    return response, 200


@app.route(REFINANCE.endpoint, methods=['POST'])
def submit_refinance():
    """Refinance lead form"""
    return handle_submission(REFINANCE)


@app.route(BUY_HOME.endpoint, methods=['POST'])
def submit_buy_home():
    """Home-purchase lead form"""
    return handle_submission(BUY_HOME)


@app.route('/api/thankyou-access', methods=['GET'])
def verify_thankyou_access():
    """Gate for the confirmation page: cookie and carried token must agree"""
    valid, reason, expires_at = get_lead_service().grant_issuer.verify(
        request.cookies.get(ACCESS_COOKIE_NAME),
        request.args.get('token'),
        request.args.get('expiresAt')
    )

    if not valid:
        logger.info(f"Confirmation access denied: {reason}")
        return jsonify({'valid': False, 'reason': reason}), 403

    return jsonify({'valid': True, 'expiresAt': expires_at})


@app.route('/metrics', methods=['GET'])
def metrics():
    return Response(generate_latest(), content_type=CONTENT_TYPE_LATEST)


if __name__ == '__main__':
    app.run(debug=True, port=5000)
