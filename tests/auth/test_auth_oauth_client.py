import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from gdrivefs.auth import AuthInfo, OAuthClient
from gdrivefs.errors import AuthError, InvalidArgumentError

SCOPES = ["https://www.googleapis.com/auth/drive"]


class TestOAuthClient(unittest.TestCase):
    def test_get_credentials_loads_token_file_without_refresh(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            tmp_path = Path(tmp)
            token_file = tmp_path / "token.json"

            token_payload = {
                "token": "fake-token",
                "refresh_token": "fake-refresh-token",
                "token_uri": "https://oauth2.googleapis.com/token",
                "client_id": "fake-client-id",
                "client_secret": "fake-client-secret",
                "scopes": SCOPES,
                "type": "authorized_user",
            }
            token_file.write_text(json.dumps(token_payload), encoding="utf-8")

            info = AuthInfo(
                kind="oauth",
                data={
                    "client_id": "fake-client-id",
                    "client_secret": "fake-client-secret",
                    "token_file": str(token_file),
                },
            )
            creds = OAuthClient(info).get_credentials(scopes=SCOPES, ensure_valid=False)

            self.assertEqual(creds.refresh_token, "fake-refresh-token")

    def test_invalid_scopes(self) -> None:
        info = AuthInfo(
            kind="oauth",
            data={"client_secrets_file": "/tmp/cs.json", "token_file": "/tmp/t.json"},
        )
        with self.assertRaises(InvalidArgumentError):
            OAuthClient(info).get_credentials(scopes=[])

    def test_inline_client_runs_flow_from_client_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            token_file = Path(tmp) / "sub" / "token.json"
            info = AuthInfo(
                kind="oauth",
                data={
                    "client_id": "cid",
                    "client_secret": "csecret",
                    "token_file": str(token_file),
                },
            )

            with patch(
                "google_auth_oauthlib.flow.InstalledAppFlow.from_client_config"
            ) as from_config:
                flow = from_config.return_value
                flow.run_local_server.return_value.to_json.return_value = '{"token": "t"}'

                creds = OAuthClient(info).get_credentials(scopes=SCOPES)

            self.assertIs(creds, flow.run_local_server.return_value)
            self.assertEqual(from_config.call_args.args[0], info.client_config())
            self.assertEqual(token_file.read_text(encoding="utf-8"), '{"token": "t"}')

    def test_flow_failure_is_auth_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            info = AuthInfo(
                kind="oauth",
                data={
                    "client_secrets_file": str(Path(tmp) / "missing.json"),
                    "token_file": str(Path(tmp) / "token.json"),
                },
            )
            with self.assertRaises(AuthError):
                OAuthClient(info).get_credentials(scopes=SCOPES)


if __name__ == "__main__":
    unittest.main()
