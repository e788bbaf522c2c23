#!/usr/bin/env python3
"""Testes da inicialização do processo (main.py) e da configuração de logs."""
import json
import logging
import unittest
from unittest.mock import Mock, patch

import main
from alertbridge.services import send_discord_payload
from alertbridge.utils import configure_logging

WEBHOOK = "https://discord.example/api/webhooks/1/token"


class TestStartup(unittest.TestCase):
    def assert_exits_before_binding(self, env):
        with patch.dict("os.environ", env, clear=True), \
                patch("main.create_app") as mock_create_app, \
                self.assertLogs("alertbridge", "ERROR"):
            with self.assertRaises(SystemExit) as ctx:
                main.main()
        self.assertEqual(ctx.exception.code, 1)
        mock_create_app.assert_not_called()

    def test_missing_webhook_exits(self):
        self.assert_exits_before_binding({})

    def test_empty_webhook_exits(self):
        self.assert_exits_before_binding({"DISCORD_WEBHOOK": ""})

    def test_malformed_listen_address_exits(self):
        self.assert_exits_before_binding({"DISCORD_WEBHOOK": WEBHOOK, "LISTEN_ADDRESS": "localhost"})

    def test_invalid_color_exits(self):
        self.assert_exits_before_binding({"DISCORD_WEBHOOK": WEBHOOK, "CRITICAL_COLOR": "red"})

    @patch("main.configure_logging")
    @patch("main.create_app")
    def test_valid_config_runs_server(self, mock_create_app, mock_configure_logging):
        env = {"DISCORD_WEBHOOK": WEBHOOK, "LISTEN_ADDRESS": "0.0.0.0:9000"}
        with patch.dict("os.environ", env, clear=True):
            main.main()

        settings = mock_create_app.call_args.args[0]
        self.assertEqual(settings.discord_webhook, WEBHOOK)
        run = mock_create_app.return_value.run
        run.assert_called_once()
        self.assertEqual((run.call_args.kwargs["host"], run.call_args.kwargs["port"]), ("0.0.0.0", 9000))


class TestLogging(unittest.TestCase):
    @patch("alertbridge.services.requests.post")
    def test_payload_logged_at_debug(self, mock_post):
        mock_post.return_value = Mock(status_code=204, text="")
        payload = {"content": "🚨 alerta", "embeds": [{"title": "CRITICAL"}]}

        with self.assertLogs("alertbridge.services", "DEBUG") as logs:
            send_discord_payload(WEBHOOK, payload)

        self.assertTrue(
            any(json.dumps(payload, ensure_ascii=False) in line for line in logs.output),
            logs.output,
        )

    @patch("alertbridge.services.requests.post")
    def test_payload_not_logged_at_info(self, mock_post):
        mock_post.return_value = Mock(status_code=204, text="")
        with patch("alertbridge.services.logger.isEnabledFor", return_value=False), \
                patch("alertbridge.services.json.dumps") as mock_dumps:
            send_discord_payload(WEBHOOK, {"content": "x", "embeds": []})
        mock_dumps.assert_not_called()

    def test_werkzeug_request_log_is_silenced(self):
        werkzeug_logger = logging.getLogger("werkzeug")
        previous = werkzeug_logger.level
        self.addCleanup(werkzeug_logger.setLevel, previous)

        configure_logging("DEBUG")

        self.assertEqual(werkzeug_logger.level, logging.WARNING)


if __name__ == '__main__':
    unittest.main()
