"""Unit tests for the maib-checkout command line."""

import json

import pytest

from maib_checkout import cli, compute_callback_signature


pytestmark = pytest.mark.unit

BODY = b'{"checkoutId":"c-1","paymentStatus":"Executed"}'
TIMESTAMP = "1761032516817"


@pytest.fixture
def patched_session(monkeypatch, session):
    monkeypatch.setattr(cli.requests, "Session", lambda: session)
    return session


def _base_args(tmp_path, *pairs):
    args = ["--env-file", str(tmp_path / "absent.env")]
    for pair in pairs:
        args += ["--set", pair]
    return args


class TestParser:
    """Tests for argument parsing."""

    def test_override_requires_key_value(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["--set", "novalue", "token"])

    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])


class TestVerifyCallbackCommand:
    """Tests for the verify-callback command."""

    def _run(self, tmp_path, signature, key="test-signature-key"):
        body_file = tmp_path / "callback.json"
        body_file.write_bytes(BODY)
        return cli.run_cli(
            _base_args(tmp_path, f"MAIB_CHECKOUT_SIGNATURE_KEY={key}")
            + [
                "verify-callback",
                "--body-file", str(body_file),
                "--signature", signature,
                "--timestamp", TIMESTAMP,
            ]
        )

    def test_valid_signature(self, tmp_path, signature_key):
        signature = compute_callback_signature(BODY, TIMESTAMP, signature_key)
        assert self._run(tmp_path, f"sha256={signature}", signature_key) == 0

    def test_invalid_signature(self, tmp_path, signature_key):
        signature = compute_callback_signature(BODY, TIMESTAMP, "other-key")
        assert self._run(tmp_path, f"sha256={signature}", signature_key) == 1

    def test_malformed_header(self, tmp_path):
        assert self._run(tmp_path, "not-a-signature") == 1

    def test_missing_body_file(self, tmp_path):
        code = cli.run_cli(
            _base_args(tmp_path, "MAIB_CHECKOUT_SIGNATURE_KEY=k")
            + ["verify-callback", "--body-file", str(tmp_path / "nope"), "--signature", "sha256=x", "--timestamp", "1"]
        )
        assert code == 1


class TestApiCommands:
    """Tests for commands that call the API."""

    def test_token(self, tmp_path, patched_session, responses, capsys):
        patched_session.request.return_value = responses.ok({"accessToken": "t-1"})

        code = cli.run_cli(
            _base_args(tmp_path, "MAIB_CHECKOUT_CLIENT_ID=id", "MAIB_CHECKOUT_CLIENT_SECRET=secret")
            + ["token"]
        )

        assert code == 0
        assert json.loads(capsys.readouterr().out) == {"accessToken": "t-1"}

    def test_checkout_details_with_explicit_token(self, tmp_path, patched_session, responses, capsys):
        patched_session.request.return_value = responses.ok({"checkoutId": "c-1"})

        code = cli.run_cli(_base_args(tmp_path) + ["checkout-details", "c-1", "--token", "t-1"])

        assert code == 0
        assert patched_session.request.call_count == 1
        assert patched_session.request.call_args.args[1].endswith("/checkouts/c-1")
        assert json.loads(capsys.readouterr().out) == {"checkoutId": "c-1"}

    def test_payment_details_obtains_token(self, tmp_path, patched_session, responses):
        patched_session.request.side_effect = [
            responses.ok({"accessToken": "t-1"}),
            responses.ok({"paymentId": "p-1"}),
        ]

        code = cli.run_cli(
            _base_args(tmp_path, "MAIB_CHECKOUT_CLIENT_ID=id", "MAIB_CHECKOUT_CLIENT_SECRET=secret")
            + ["payment-details", "p-1"]
        )

        assert code == 0
        headers = patched_session.request.call_args.kwargs["headers"]
        assert headers["Authorization"] == "Bearer t-1"

    def test_api_error_exit_code(self, tmp_path, patched_session, responses):
        patched_session.request.return_value = responses.failed(("E1", "bad"))
        code = cli.run_cli(_base_args(tmp_path) + ["checkout-details", "c-1", "--token", "t-1"])
        assert code == 1

    def test_invalid_configuration(self, tmp_path):
        code = cli.run_cli(_base_args(tmp_path, "MAIB_CHECKOUT_TIMEOUT_SECONDS=-1") + ["token"])
        assert code == 1
