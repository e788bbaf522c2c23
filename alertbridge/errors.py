class BridgeError(Exception):
    """Erro base do bridge."""


class ConfigError(BridgeError):
    """Configuração ausente ou inválida; fatal na inicialização."""


class DeliveryError(BridgeError):
    """Falha ao entregar uma mensagem ao webhook do Discord."""

    # Texto curto devolvido ao Alertmanager junto com o 500
    public_message = "Could not send to Discord"


class WebhookTransportError(DeliveryError):
    """Webhook inacessível (conexão recusada, DNS, timeout)."""


class WebhookRejectedError(DeliveryError):
    """Webhook respondeu com status fora da faixa 2xx."""

    public_message = "Discord API rejected payload"

    def __init__(self, status_code: int, body: str = ""):
        super().__init__(f"Discord respondeu {status_code}: {body[:200]}")
        self.status_code = status_code
        self.body = body
