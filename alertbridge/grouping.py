import logging
from typing import Dict, Iterable, List

from .constants import SEVERITY_NONE
from .models import AlertRecord

logger = logging.getLogger(__name__)

# status -> severidade -> alertas (na ordem de chegada)
GroupedAlerts = Dict[str, Dict[str, List[AlertRecord]]]


def alert_severity(alert: AlertRecord) -> str:
    return alert.labels.get("severity", SEVERITY_NONE)


def group_alerts(alerts: Iterable[AlertRecord]) -> GroupedAlerts:
    """Agrupa os alertas por status e depois por severidade.

    Alertas sem severidade (ou com severidade 'none') são descartados e não
    criam nenhum grupo. A ordem de inserção é mantida dentro de cada grupo.
    """
    grouped: GroupedAlerts = {}
    dropped = 0
    for alert in alerts:
        severity = alert_severity(alert)
        if severity == SEVERITY_NONE:
            dropped += 1
            continue
        grouped.setdefault(alert.status, {}).setdefault(severity, []).append(alert)

    if dropped:
        logger.debug(f"{dropped} alerta(s) com severidade '{SEVERITY_NONE}' ignorado(s)")
    return grouped
