import logging

from flask import Flask, request
from pydantic import ValidationError

from .config import Settings
from .constants import DISCORD_CHECK_NAME, SERVICE_NAME
from .errors import DeliveryError
from .formatters import build_discord_message
from .grouping import group_alerts
from .health import ReadinessCheck, render_readiness, run_checks
from .models import AlertBatch
from .services import check_webhook, send_discord_payload

logger = logging.getLogger(__name__)


def create_app(settings: Settings, readiness_checks=None):
    app = Flask(__name__)
    webhook = settings.discord_webhook

    if readiness_checks is None:
        readiness_checks = [ReadinessCheck(DISCORD_CHECK_NAME, lambda: check_webhook(webhook))]

    @app.after_request
    def access_log(response):
        logger.info(f'{request.remote_addr} "{request.method} {request.full_path.rstrip("?")}" {response.status_code}')
        return response

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': SERVICE_NAME}, 200

    @app.route('/readyz', methods=['GET'])
    def readyz():
        # '?verbose' basta, o valor é ignorado
        verbose = 'verbose' in request.args
        body, status = render_readiness(run_checks(readiness_checks), verbose=verbose)
        return body, status, {'Content-Type': 'text/plain; charset=utf-8'}

    @app.route('/', methods=['POST'])
    def index():
        data = request.get_json(force=True, silent=True)
        if data is None:
            logger.warning("Payload recebido não é JSON válido")
            return 'Invalid JSON payload', 400
        try:
            batch = AlertBatch.model_validate(data)
        except ValidationError as exc:
            logger.warning(f"Payload do Alertmanager inválido: {exc.error_count()} erro(s)")
            logger.debug(f"Detalhes da validação: {exc}")
            return f'Invalid Alertmanager payload: {exc.error_count()} validation error(s)', 400

        logger.debug(f"Received {len(batch.alerts)} alert(s) for group {batch.groupKey!r} (status={batch.status})")

        try:
            sent = dispatch_batch(batch)
        except DeliveryError as exc:
            return exc.public_message, 500

        if sent:
            logger.info("Dispatched alerts to Discord")
        else:
            logger.debug("No alerts to send, skipping!")
        return '', 200

    def dispatch_batch(batch: AlertBatch) -> int:
        """Envia uma mensagem por grupo de status; para no primeiro erro."""
        sent = 0
        for status, alerts_by_severity in group_alerts(batch.alerts).items():
            message = build_discord_message(
                status,
                alerts_by_severity,
                batch.commonLabels,
                batch.externalURL,
                settings.colors,
            )
            if message is None:
                logger.debug(f"Grupo '{status}' sem embeds, nada a enviar")
                continue
            send_discord_payload(webhook, message)
            sent += 1
        return sent

    return app
