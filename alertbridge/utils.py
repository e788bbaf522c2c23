import logging
import re
import sys
from typing import Mapping, Optional, Tuple


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_SLASH_RUN = re.compile(r"/{3,}")


def first_present(mapping: Mapping[str, str], *keys: str, default: str = "") -> str:
    """Retorna o valor da primeira chave presente no mapa (mesmo que vazio)."""
    for key in keys:
        value = mapping.get(key)
        if value is not None:
            return value
    return default


def normalize_external_url(url: Optional[str]) -> str:
    # O Alertmanager às vezes gera 'http:///host'; sequências de 3+ barras viram '//'
    if not url:
        return ""
    return _SLASH_RUN.sub("//", url)


def parse_listen_address(address: str) -> Tuple[str, int]:
    """Quebra 'host:port' em (host, port). Levanta ValueError se inválido."""
    host, sep, port = (address or "").strip().rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"endereço inválido: {address!r} (esperado host:port)")
    port_number = int(port)
    if not 0 < port_number < 65536:
        raise ValueError(f"porta fora da faixa: {port_number}")
    # IPv6 entre colchetes, ex: [::1]:9094
    host = host.strip("[]") or "0.0.0.0"
    return host, port_number


def configure_logging(level: str = "INFO", debug_mode: bool = False) -> None:
    resolved = logging.DEBUG if debug_mode else getattr(logging, str(level).upper(), logging.INFO)
    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
    # requests/urllib3 são muito verbosos em DEBUG
    logging.getLogger("urllib3").setLevel(max(resolved, logging.INFO))
    # A linha de acesso vem do after_request do controller
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
