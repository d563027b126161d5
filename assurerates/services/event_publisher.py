"""
Event Publisher Service - Handles EventBridge integration
Announces lead submission outcomes; carries no applicant PII
"""

import boto3
from botocore.config import Config
import json
from datetime import datetime
from typing import Dict, Any, Optional
import logging

logger = logging.getLogger(__name__)

LEAD_EVENT_SOURCE = 'assurerates.leads'
LEAD_OUTCOME_EVENT = 'LeadSubmissionOutcome'

# Publishing runs inside the request; one short attempt, no retries
EVENT_CLIENT_CONFIG = Config(
    retries={'total_max_attempts': 1, 'mode': 'standard'},
    connect_timeout=2,
    read_timeout=2
)


class EventPublisher:
    def __init__(self, event_bus_name: str, region_name: Optional[str] = None):
        self.eventbridge = boto3.client('events', region_name=region_name, config=EVENT_CLIENT_CONFIG)
        self.event_bus_name = event_bus_name

    def publish_event(self, event_type: str, detail: Dict[Any, Any], source: str = LEAD_EVENT_SOURCE):
        """Publish event to EventBridge"""
        try:
            event_detail = {
                **detail,
                'timestamp': datetime.now().isoformat(),
                'event_id': f"{event_type}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
            }

            response = self.eventbridge.put_events(
                Entries=[
                    {
                        'Source': source,
                        'DetailType': event_type,
                        'Detail': json.dumps(event_detail),
                        'EventBusName': self.event_bus_name
                    }
                ]
            )

            logger.info(f"Published event {event_type} to {self.event_bus_name}")
            return response

        except Exception as e:
            logger.error(f"Failed to publish event {event_type}: {e}")
            raise

    def publish_lead_outcome(self, product: str, lead_prosper_status: Optional[str], outcome: str):
        return self.publish_event(
            LEAD_OUTCOME_EVENT,
            {
                'product': product,
                'leadProsperStatus': lead_prosper_status,
                'outcome': outcome
            }
        )
