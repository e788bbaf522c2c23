from typing import Dict, List, Mapping, Optional, Sequence

from .constants import (
    SEVERITY_STYLES,
    STATUS_BANNERS,
    UNKNOWN_STATUS_BANNER,
    UNNAMED_ALERT,
)
from .models import AlertRecord
from .utils import first_present, normalize_external_url


def ascii_upper(value: str) -> str:
    # str.upper() também converte caracteres não ASCII (ex: 'ß' -> 'SS')
    return "".join(chr(ord(c) - 32) if "a" <= c <= "z" else c for c in value)


def get_severity_style(severity: str, colors: Optional[Mapping[str, int]] = None) -> Dict:
    key = severity if severity in SEVERITY_STYLES else "default"
    style = dict(SEVERITY_STYLES[key])
    if colors and key in colors:
        style["color"] = colors[key]
    return style


def build_status_banner(status: str) -> str:
    banner = STATUS_BANNERS.get(status)
    if banner is None:
        return UNKNOWN_STATUS_BANNER.format(status=status)
    return banner


def build_field(alert: AlertRecord) -> Dict[str, str]:
    return {
        "name": alert.labels.get("alertname", UNNAMED_ALERT),
        "value": first_present(alert.annotations, "description", "message"),
    }


def build_author(common_labels: Mapping[str, str], external_url: Optional[str]) -> Dict[str, str]:
    return {
        "name": common_labels.get("prometheus", ""),
        "url": normalize_external_url(external_url),
    }


def build_embed(
    severity: str,
    alerts: Sequence[AlertRecord],
    author: Dict[str, str],
    colors: Optional[Mapping[str, int]] = None,
) -> Dict:
    style = get_severity_style(severity, colors)
    return {
        "title": ascii_upper(severity),
        "description": style["description"],
        "color": style["color"],
        "fields": [build_field(alert) for alert in alerts],
        "author": dict(author),
    }


def build_discord_message(
    status: str,
    alerts_by_severity: Mapping[str, Sequence[AlertRecord]],
    common_labels: Mapping[str, str],
    external_url: Optional[str],
    colors: Optional[Mapping[str, int]] = None,
) -> Optional[Dict]:
    """Monta o payload do Discord para um grupo de status.

    Cada severidade vira um embed com um field por alerta. Retorna None quando
    não há nenhum embed a enviar; quem chama deve pular a entrega.
    """
    author = build_author(common_labels, external_url)
    embeds: List[Dict] = [
        build_embed(severity, alerts, author, colors)
        for severity, alerts in alerts_by_severity.items()
        if alerts
    ]
    if not embeds:
        return None

    return {
        "content": build_status_banner(status),
        "embeds": embeds,
    }
