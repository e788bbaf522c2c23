import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from .constants import COLOR_ENV_VARS, DEFAULT_LISTEN_ADDRESS
from .errors import ConfigError
from .utils import parse_listen_address


def _env_flag(value: Optional[str], default: str = "false") -> bool:
    return (value or default).strip().lower() == "true"


def _env_colors(env: Mapping[str, str]) -> Dict[str, int]:
    colors = {}
    for severity, var in COLOR_ENV_VARS.items():
        raw = (env.get(var) or "").strip()
        if not raw:
            continue
        try:
            colors[severity] = int(raw)
        except ValueError as exc:
            raise ConfigError(f"{var} inválido: {raw!r} (esperado inteiro)") from exc
    return colors


@dataclass(frozen=True)
class Settings:
    """Configuração do processo, lida uma única vez na inicialização.

    Compartilhada (somente leitura) por todos os handlers via create_app().
    """

    discord_webhook: str
    host: str = "127.0.0.1"
    port: int = 9094
    log_level: str = "INFO"
    debug_mode: bool = False
    # severidade -> cor, só com as cores sobrescritas via ambiente
    colors: Mapping[str, int] = field(default_factory=dict)

    @property
    def listen_address(self) -> str:
        return f"{self.host}:{self.port}"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        webhook = (env.get("DISCORD_WEBHOOK") or "").strip()
        if not webhook:
            raise ConfigError("Must set DISCORD_WEBHOOK environment variable")

        listen_address = env.get("LISTEN_ADDRESS") or DEFAULT_LISTEN_ADDRESS
        try:
            host, port = parse_listen_address(listen_address)
        except ValueError as exc:
            raise ConfigError(f"LISTEN_ADDRESS inválido: {exc}") from exc

        return cls(
            discord_webhook=webhook,
            host=host,
            port=port,
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
            debug_mode=_env_flag(env.get("DEBUG_MODE")),
            colors=_env_colors(env),
        )
