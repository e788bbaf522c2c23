import json
import logging
from typing import Dict

import requests

from .errors import WebhookRejectedError, WebhookTransportError

logger = logging.getLogger(__name__)


def send_discord_payload(webhook_url: str, payload: Dict) -> requests.Response:
    """Envia um único POST ao webhook do Discord.

    Sem retry: qualquer falha de transporte ou resposta fora de 2xx é
    convertida em DeliveryError para quem chama decidir o que fazer.
    """
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Sending discord payload to webhook: {json.dumps(payload, ensure_ascii=False)}")

    try:
        resp = requests.post(webhook_url, json=payload)
    except requests.RequestException as exc:
        logger.error(f"Could not send to Discord: {exc}")
        raise WebhookTransportError(str(exc)) from exc

    logger.debug(f"Discord response: {resp.status_code}")
    if not 200 <= resp.status_code < 300:
        logger.error(f"Discord API returned error: {resp.status_code} {resp.text[:500]}")
        raise WebhookRejectedError(resp.status_code, resp.text)
    return resp


def check_webhook(webhook_url: str) -> bool:
    """GET no webhook; só conta como disponível se a resposta for exatamente 200."""
    try:
        resp = requests.get(webhook_url)
    except requests.RequestException as exc:
        logger.warning(f"Webhook do Discord inacessível: {exc}")
        return False

    if resp.status_code != 200:
        logger.warning(f"Webhook do Discord respondeu {resp.status_code} na checagem de prontidão")
        return False
    return True
