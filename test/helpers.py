"""Fábricas de payloads do Alertmanager usadas nos testes."""


def make_alert(status="firing", severity="critical", alertname=None, annotations=None, **labels):
    if severity is not None:
        labels["severity"] = severity
    if alertname is not None:
        labels["alertname"] = alertname
    return {
        "status": status,
        "labels": labels,
        "annotations": annotations or {},
        "startsAt": "2024-05-01T10:00:00Z",
        "endsAt": "0001-01-01T00:00:00Z",
        "generatorURL": "http://prometheus:9090/graph?g0.expr=up",
    }


def make_batch(alerts, status="firing", common_labels=None, external_url="http://alertmanager:9093"):
    return {
        "version": "4",
        "groupKey": "{}:{alertname=\"HighCPU\"}",
        "status": status,
        "receiver": "discord",
        "groupLabels": {},
        "commonLabels": common_labels if common_labels is not None else {"prometheus": "monitoring/k8s"},
        "commonAnnotations": {},
        "externalURL": external_url,
        "alerts": alerts,
    }
