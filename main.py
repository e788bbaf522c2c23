import logging
import sys

from alertbridge.config import Settings
from alertbridge.controller import create_app
from alertbridge.errors import ConfigError
from alertbridge.utils import configure_logging

logger = logging.getLogger("alertbridge")


def main():
    try:
        settings = Settings.from_env()
    except ConfigError as exc:
        configure_logging()
        logger.error(str(exc))
        sys.exit(1)

    configure_logging(settings.log_level, settings.debug_mode)
    app = create_app(settings)
    logger.info(f"Escutando em {settings.listen_address}")
    # threaded: cada request (relay ou /readyz) é atendida de forma independente
    app.run(host=settings.host, port=settings.port, debug=False, threaded=True, use_reloader=False)


if __name__ == '__main__':
    main()
