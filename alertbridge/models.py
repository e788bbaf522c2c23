from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class AlertRecord(BaseModel):
    """Um alerta individual dentro do payload do Alertmanager."""

    model_config = ConfigDict(frozen=True)

    status: str
    labels: Dict[str, str] = {}
    annotations: Dict[str, str] = {}
    # Timestamps ficam como string: só são repassados, nunca interpretados
    startsAt: Optional[str] = None
    endsAt: Optional[str] = None
    generatorURL: Optional[str] = None
    fingerprint: Optional[str] = None


class AlertBatch(BaseModel):
    """Notificação de grupo enviada pelo webhook_config do Alertmanager."""

    model_config = ConfigDict(frozen=True)

    version: Optional[str] = None
    groupKey: Optional[str] = None
    truncatedAlerts: Optional[int] = None
    status: str
    receiver: Optional[str] = None
    groupLabels: Dict[str, str] = {}
    commonLabels: Dict[str, str] = {}
    commonAnnotations: Dict[str, str] = {}
    externalURL: str = ""
    alerts: List[AlertRecord]
