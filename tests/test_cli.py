"""Tests for wifi_assoc.cli — argument handling, dispatch and exit codes."""

import contextlib
import io
import json
import os
import tempfile
import unittest
import unittest.mock

from tests.test_actions import FakeInterface, _scenario_networks


class FakeClient:
    instances = []

    def __init__(self, timeout=None, interface=None):
        self.timeout = timeout
        self.iface = interface or FakeInterface(_scenario_networks())
        self.requested = []
        FakeClient.instances.append(self)

    def interface_names(self):
        return [self.iface.name]

    def interface(self, name=None):
        self.requested.append(name)
        if name is not None and name != self.iface.name:
            from wifi_assoc.errors import InterfaceNotFound
            raise InterfaceNotFound(f"No wireless interface named {name!r}")
        return self.iface


class CliTestCase(unittest.TestCase):
    def setUp(self):
        FakeClient.instances = []

    def run_main(self, argv, client_factory=FakeClient):
        from wifi_assoc.cli import main
        out, err = io.StringIO(), io.StringIO()
        with unittest.mock.patch("wifi_assoc.cli.WirelessClient", client_factory), \
                contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()


class TestHelp(CliTestCase):
    def test_help_flags(self):
        for flag in ("-h", "-help", "--help"):
            code, out, err = self.run_main([flag])
            self.assertEqual(code, 0, flag)
            self.assertIn("Usage:", err)
            self.assertEqual(out, "")

    def test_help_wins_over_other_flags(self):
        code, _, err = self.run_main(["-action", "frobnicate", "-bogus", "-h"])
        self.assertEqual(code, 0)
        self.assertIn("Usage:", err)
        self.assertEqual(FakeClient.instances, [])


class TestUsageErrors(CliTestCase):
    def test_unknown_action(self):
        code, _, err = self.run_main(["-action", "frobnicate"])
        self.assertEqual(code, 1)
        self.assertIn("Unrecognized action: frobnicate", err)
        self.assertIn("Usage:", err)
        self.assertEqual(FakeClient.instances, [])

    def test_associate_requires_bssid(self):
        code, _, err = self.run_main(["-action", "associate"])
        self.assertEqual(code, 1)
        self.assertIn("requires supplying a -bssid value", err)
        self.assertIn("Usage:", err)
        self.assertEqual(FakeClient.instances, [])

    def test_unknown_flag(self):
        code, _, err = self.run_main(["-frequency", "2412"])
        self.assertEqual(code, 1)
        self.assertIn("Usage:", err)

    def test_flag_without_value(self):
        code, _, err = self.run_main(["-action", "associate", "-bssid"])
        self.assertEqual(code, 1)
        self.assertIn("Usage:", err)

    def test_bad_log_level(self):
        code, _, err = self.run_main(["-log-level", "chatty"])
        self.assertEqual(code, 1)
        self.assertIn("Unknown log level", err)

    def test_empty_action(self):
        code, _, err = self.run_main(["-action", ""])
        self.assertEqual(code, 1)
        self.assertIn("Unrecognized action", err)
        self.assertIn("Usage:", err)
        self.assertEqual(FakeClient.instances, [])


class TestScanAction(CliTestCase):
    def test_scan_is_default(self):
        code, out, err = self.run_main([])
        self.assertEqual(code, 0)
        self.assertEqual(len(out.splitlines()), 3)
        self.assertIn("Available interfaces:", err)

    def test_explicit_scan_with_interface_and_ssid(self):
        code, _, _ = self.run_main(["-action", "scan", "-interface", "wlan0",
                                    "-ssid", "Home"])
        self.assertEqual(code, 0)
        client = FakeClient.instances[0]
        self.assertEqual(client.requested, ["wlan0"])
        self.assertEqual(client.iface.scan_calls, ["Home"])

    def test_unknown_interface(self):
        code, out, err = self.run_main(["-interface", "wlan9"])
        self.assertEqual(code, 1)
        self.assertIn("Error: No wireless interface named 'wlan9'", err)
        self.assertEqual(out, "")

    def test_scan_failure_is_clean_exit_1(self):
        from wifi_assoc.errors import ScanFailed

        def factory(timeout=None):
            return FakeClient(timeout, FakeInterface(
                scan_error=ScanFailed("command failed: Operation not permitted (-1)")))

        code, out, err = self.run_main(["-action", "scan"], factory)
        self.assertEqual(code, 1)
        self.assertIn("Error: command failed: Operation not permitted (-1)", err)
        self.assertEqual(out, "")


class TestAssociateAction(CliTestCase):
    def test_found_with_password(self):
        code, out, err = self.run_main(
            ["-action", "associate", "-bssid", "aa:bb", "secret"])
        self.assertEqual(code, 0)
        calls = FakeClient.instances[0].iface.associate_calls
        self.assertEqual(len(calls), 1)
        self.assertEqual(calls[0][0].ssid, "Home")
        self.assertEqual(calls[0][0].bssid, "aa:bb")
        self.assertEqual(calls[0][1], "secret")
        self.assertEqual(out, "")

    def test_password_before_flags(self):
        code, _, _ = self.run_main(["secret", "-action", "associate", "-bssid", "aa:bb"])
        self.assertEqual(code, 0)
        self.assertEqual(FakeClient.instances[0].iface.associate_calls[0][1], "secret")

    def test_open_network(self):
        code, _, _ = self.run_main(["-action", "associate", "-bssid", "cc:dd"])
        self.assertEqual(code, 0)
        self.assertIsNone(FakeClient.instances[0].iface.associate_calls[0][1])

    def test_not_found_is_clean_exit(self):
        code, _, err = self.run_main(
            ["-action", "associate", "-bssid", "ee:ff", "secret"])
        self.assertEqual(code, 0)
        self.assertEqual(FakeClient.instances[0].iface.associate_calls, [])
        self.assertIn("No network matching bssid found!", err)

    def test_empty_bssid_is_searched_not_rejected(self):
        code, _, err = self.run_main(["-action", "associate", "-bssid", ""])
        self.assertEqual(code, 0)
        self.assertEqual(FakeClient.instances[0].iface.associate_calls, [])
        self.assertIn("No network matching bssid found!", err)
        self.assertNotIn("Usage:", err)

    def test_association_failure_is_clean_exit_1(self):
        from wifi_assoc.errors import AssociationFailed

        def factory(timeout=None):
            return FakeClient(timeout, FakeInterface(
                _scenario_networks(),
                associate_error=AssociationFailed("Secrets were required")))

        code, _, err = self.run_main(
            ["-action", "associate", "-bssid", "aa:bb", "wrong"], factory)
        self.assertEqual(code, 1)
        self.assertIn("Error: Secrets were required", err)


class TestConfigFile(CliTestCase):
    def _write(self, cfg):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
            json.dump(cfg, f)
        self.addCleanup(os.unlink, f.name)
        return f.name

    def test_config_fills_interface_and_timeout(self):
        path = self._write({"interface": "wlan0", "timeout": 30})
        code, _, _ = self.run_main(["-config", path])
        self.assertEqual(code, 0)
        client = FakeClient.instances[0]
        self.assertEqual(client.requested, ["wlan0"])
        self.assertEqual(client.timeout, 30)

    def test_cli_overrides_config(self):
        path = self._write({"interface": "wlan7"})
        code, _, _ = self.run_main(["-config", path, "-interface", "wlan0"])
        self.assertEqual(code, 0)
        self.assertEqual(FakeClient.instances[0].requested, ["wlan0"])

    def test_non_string_log_level_is_usage_error(self):
        path = self._write({"log_level": 10})
        code, _, err = self.run_main(["-config", path])
        self.assertEqual(code, 1)
        self.assertIn("Invalid log_level value: 10", err)
        self.assertIn("Usage:", err)
        self.assertEqual(FakeClient.instances, [])

    def test_non_numeric_timeout_is_usage_error(self):
        path = self._write({"timeout": "abc"})
        code, _, err = self.run_main(["-config", path])
        self.assertEqual(code, 1)
        self.assertIn("Invalid timeout value: 'abc'", err)
        self.assertEqual(FakeClient.instances, [])

    def test_boolean_timeout_is_usage_error(self):
        path = self._write({"timeout": True})
        code, _, err = self.run_main(["-config", path])
        self.assertEqual(code, 1)
        self.assertIn("Invalid timeout value: True", err)

    def test_non_string_interface_is_usage_error(self):
        path = self._write({"interface": ["wlan0"]})
        code, _, err = self.run_main(["-config", path])
        self.assertEqual(code, 1)
        self.assertIn("Invalid interface value", err)

    def test_float_timeout_accepted(self):
        path = self._write({"timeout": 2.5})
        code, _, _ = self.run_main(["-config", path])
        self.assertEqual(code, 0)
        self.assertEqual(FakeClient.instances[0].timeout, 2.5)


class TestRun(unittest.TestCase):
    def test_run_exits_with_main_status(self):
        from wifi_assoc import cli
        with unittest.mock.patch.object(cli, "main", return_value=1):
            with self.assertRaises(SystemExit) as ctx:
                cli.run()
        self.assertEqual(ctx.exception.code, 1)


if __name__ == "__main__":
    unittest.main()
