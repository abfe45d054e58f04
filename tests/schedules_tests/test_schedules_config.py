"""Tests for schedules/config.py credential resolution."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from core.cli_errors import ConfigError, ExitCode
from core.constants import ENV_API_VERSION, ENV_PUBLIC_KEY, ENV_SECRET_KEY
from schedules.config import _read_ini, resolve_credentials

_INI = """\
[omise]
secret_key = skey_ini_default
public_key = pkey_ini_default

[omise.staging]
secret_key = skey_ini_staging
api_version = 2019-05-29
"""

_CLEAN_ENV = {ENV_SECRET_KEY: "", ENV_PUBLIC_KEY: "", ENV_API_VERSION: ""}


class TestResolveCredentials(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.ini = Path(self._tmp.name) / "credentials.ini"
        self.ini.write_text(_INI, encoding="utf-8")
        self.paths = [str(self.ini)]

    def tearDown(self):
        self._tmp.cleanup()

    @patch.dict(os.environ, _CLEAN_ENV)
    def test_default_profile_from_ini(self):
        creds = resolve_credentials(ini_paths=self.paths)
        self.assertEqual(creds.secret_key, "skey_ini_default")
        self.assertEqual(creds.public_key, "pkey_ini_default")
        self.assertIsNone(creds.api_version)

    @patch.dict(os.environ, _CLEAN_ENV)
    def test_named_profile(self):
        creds = resolve_credentials(profile="staging", ini_paths=self.paths)
        self.assertEqual(creds.secret_key, "skey_ini_staging")
        self.assertEqual(creds.api_version, "2019-05-29")
        self.assertIsNone(creds.public_key)

    @patch.dict(os.environ, _CLEAN_ENV)
    def test_unknown_profile(self):
        with self.assertRaises(ConfigError) as ctx:
            resolve_credentials(profile="prod", ini_paths=self.paths)
        self.assertIn("[omise.prod]", ctx.exception.hint)

    @patch.dict(os.environ, dict(_CLEAN_ENV, **{ENV_SECRET_KEY: "skey_env", ENV_API_VERSION: "2017-11-02"}))
    def test_env_beats_ini(self):
        creds = resolve_credentials(ini_paths=self.paths)
        self.assertEqual(creds.secret_key, "skey_env")
        self.assertEqual(creds.api_version, "2017-11-02")
        self.assertEqual(creds.public_key, "pkey_ini_default")

    @patch.dict(os.environ, dict(_CLEAN_ENV, **{ENV_SECRET_KEY: "skey_env"}))
    def test_argument_beats_env(self):
        creds = resolve_credentials(secret_key="skey_arg", ini_paths=self.paths)
        self.assertEqual(creds.secret_key, "skey_arg")

    @patch.dict(os.environ, _CLEAN_ENV)
    def test_missing_secret_key(self):
        with self.assertRaises(ConfigError) as ctx:
            resolve_credentials(ini_paths=[str(Path(self._tmp.name) / "absent.ini")])
        self.assertEqual(ctx.exception.code, ExitCode.CONFIG_ERROR)
        self.assertIn(ENV_SECRET_KEY, ctx.exception.hint)
        self.assertNotIn("--secret-key", ctx.exception.hint)


class TestReadIni(unittest.TestCase):

    def test_earlier_files_win(self):
        with tempfile.TemporaryDirectory() as td:
            first = Path(td) / "a.ini"
            second = Path(td) / "b.ini"
            first.write_text("[omise]\nsecret_key = skey_first\n", encoding="utf-8")
            second.write_text("[omise]\nsecret_key = skey_second\npublic_key = pkey_second\n", encoding="utf-8")
            merged = _read_ini([str(first), str(second)])
        self.assertEqual(merged["omise"], {"secret_key": "skey_first", "public_key": "pkey_second"})

    def test_malformed_file(self):
        with tempfile.TemporaryDirectory() as td:
            bad = Path(td) / "bad.ini"
            bad.write_text("secret_key = no_section\n", encoding="utf-8")
            with self.assertRaises(ConfigError):
                _read_ini([str(bad)])

    def test_missing_files_are_skipped(self):
        self.assertEqual(_read_ini(["/nonexistent/credentials.ini"]), {})


if __name__ == "__main__":
    unittest.main()
