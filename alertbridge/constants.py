SERVICE_NAME = "alertmanager-discord-bridge"

DEFAULT_LISTEN_ADDRESS = "127.0.0.1:9094"

# Severidade assumida quando o alerta não traz o label 'severity'.
# Alertas com essa severidade nunca são enviados.
SEVERITY_NONE = "none"

STATUS_FIRING = "firing"
STATUS_RESOLVED = "resolved"

UNNAMED_ALERT = "No-name alert"

# Cores padrão no formato inteiro usado pelos embeds do Discord
COLOR_RED = 15145498
COLOR_YELLOW = 15646767
COLOR_BLUE = 7782616
COLOR_GRAY = 9807270

# Variáveis de ambiente que sobrescrevem a cor de cada severidade
COLOR_ENV_VARS = {
    "critical": "CRITICAL_COLOR",
    "warning": "WARNING_COLOR",
    "info": "INFO_COLOR",
    "default": "DEFAULT_COLOR",
}

SEVERITY_STYLES = {
    "critical": {
        "description": "You should take a look at these, like, right now.",
        "color": COLOR_RED,
    },
    "warning": {
        "description": "These are probably issues.",
        "color": COLOR_YELLOW,
    },
    "info": {
        "description": "These are not bad, but maybe you should take a look?",
        "color": COLOR_BLUE,
    },
    "default": {
        "description": "Unknown severity. Take a look at these",
        "color": COLOR_GRAY,
    },
}

STATUS_BANNERS = {
    STATUS_FIRING: "🚨 Your infrastructure would like to inform you about some stuff! 🚨",
    STATUS_RESOLVED: "🎉 These issues have been resolved! 🎉",
}
UNKNOWN_STATUS_BANNER = "Unknown status {status}, please advise!"

# Nome do componente exibido no /readyz?verbose
DISCORD_CHECK_NAME = "Discord"
