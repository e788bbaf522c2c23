#!/usr/bin/env python3
import unittest

from alertbridge.health import CheckResult, ReadinessCheck, render_readiness, run_checks


class TestReadiness(unittest.TestCase):
    def test_run_checks_keeps_order_and_names(self):
        checks = [ReadinessCheck("Discord", lambda: True), ReadinessCheck("Outro", lambda: False)]
        self.assertEqual(run_checks(checks), [CheckResult("Discord", True), CheckResult("Outro", False)])

    def test_probe_exception_counts_as_down(self):
        def boom():
            raise RuntimeError("falhou")

        self.assertEqual(run_checks([ReadinessCheck("Discord", boom)]), [CheckResult("Discord", False)])

    def test_non_verbose(self):
        self.assertEqual(render_readiness([CheckResult("Discord", True)]), ("", 204))
        self.assertEqual(render_readiness([CheckResult("Discord", False)]), ("", 503))

    def test_verbose(self):
        body, status = render_readiness(
            [CheckResult("Discord", True), CheckResult("Outro", False)], verbose=True
        )
        self.assertEqual(status, 503)
        self.assertEqual(body.splitlines(), ["[+] Discord", "[-] Outro"])

        body, status = render_readiness([CheckResult("Discord", True)], verbose=True)
        self.assertEqual((body, status), ("[+] Discord\n", 200))


if __name__ == '__main__':
    unittest.main()
