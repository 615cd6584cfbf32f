import os
import unittest
from unittest.mock import patch

from gdrivefs.config import DEFAULT_SCOPES, FSConfig
from gdrivefs.errors import InvalidArgumentError


class TestFSConfig(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = FSConfig()
        self.assertEqual(cfg.lookup_ttl_seconds, 60.0)
        self.assertTrue(cfg.supports_all_drives)
        self.assertEqual(cfg.scopes, DEFAULT_SCOPES)

    def test_negative_ttl_rejected(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            FSConfig(lookup_ttl_seconds=-1)

    def test_from_env(self) -> None:
        env = {
            "GDRIVEFS_LOOKUP_TTL": "5",
            "GDRIVEFS_SUPPORTS_ALL_DRIVES": "false",
            "GDRIVEFS_SCOPES": "s1, s2",
        }
        with patch.dict(os.environ, env, clear=True):
            cfg = FSConfig.from_env()
        self.assertEqual(cfg.lookup_ttl_seconds, 5.0)
        self.assertFalse(cfg.supports_all_drives)
        self.assertEqual(cfg.scopes, ("s1", "s2"))

    def test_from_env_explicit_overrides_win(self) -> None:
        with patch.dict(os.environ, {"GDRIVEFS_LOOKUP_TTL": "5"}, clear=True):
            cfg = FSConfig.from_env(lookup_ttl_seconds=1.5)
        self.assertEqual(cfg.lookup_ttl_seconds, 1.5)
        self.assertEqual(cfg.scopes, DEFAULT_SCOPES)

    def test_from_env_invalid_values(self) -> None:
        for env in ({"GDRIVEFS_LOOKUP_TTL": "soon"}, {"GDRIVEFS_SUPPORTS_ALL_DRIVES": "maybe"}):
            with self.subTest(env=env):
                with patch.dict(os.environ, env, clear=True):
                    with self.assertRaises(InvalidArgumentError):
                        FSConfig.from_env()


if __name__ == "__main__":
    unittest.main()
