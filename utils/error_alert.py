"""
UTIL: Error Alert Notifier
PURPOSE: Sends failure alerts to an admin Discord webhook for monitoring.
         Disabled when no alert webhook is configured.
"""

import requests
from utils.logger import log_error, log_debug

PROJECT_NAME = "Daily Horoscope"


def send_error(alert_webhook_url: str, error_message: str, node_name: str = "Unknown") -> None:
    """Send error notification to the admin webhook. Never raises."""
    if not alert_webhook_url:
        log_debug("Alert webhook not set, skipping error alert")
        return

    text = (
        f"🚨 **{PROJECT_NAME}**\n"
        f"📍 Node: `{node_name}`\n"
        f"❌ Error: {error_message[:500]}"
    )

    try:
        resp = requests.post(
            alert_webhook_url,
            json={"content": text},
            timeout=10,
        )
        resp.raise_for_status()
    except Exception as e:
        log_error(f"Failed to send error alert: {e}")
