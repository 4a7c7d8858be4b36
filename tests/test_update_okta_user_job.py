"""Tests for the update-okta-user CLI job."""

import json
from unittest.mock import MagicMock, patch

import pytest
import httpx
from click.testing import CliRunner

from app.actions.update_user_by_id import UpdateUserByIdAction
from common.config.base_settings import BaseAppSettings
from jobs.update_okta_user import build_params, main


@pytest.fixture
def job_env(monkeypatch, tmp_path):
    """Environment with a bearer token and no .env file in reach."""
    monkeypatch.chdir(tmp_path)
    for name in BaseAppSettings.SECRET_FIELDS + BaseAppSettings.ENVIRONMENT_FIELDS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("ADDRESS", "https://example.okta.com")
    monkeypatch.setenv("BEARER_AUTH_TOKEN", "job-token")
    return monkeypatch


@pytest.fixture
def patched_action(okta_client):
    with patch(
        "jobs.update_okta_user.UpdateUserByIdAction",
        new=lambda: UpdateUserByIdAction(client=okta_client),
    ):
        yield


class TestBuildParams:

    def test_drops_unset_options(self):
        params = build_params("u1", "Jane", None, None, None, None, None, None, None)
        assert params == {"userId": "u1", "firstName": "Jane"}


class TestUpdateOktaUserJob:

    def test_text_output(self, job_env, patched_action, captured):
        result = CliRunner().invoke(main, ["--user-id", "user123", "--first-name", "Jane"])

        assert result.exit_code == 0, result.output
        assert "=== Okta User Update Results ===" in result.output
        assert "User ID: user123" in result.output
        assert "  firstName: Jane" in result.output

        request = captured[0]
        assert str(request.url) == "https://example.okta.com/api/v1/users/user123"
        assert request.headers["Authorization"] == "SSWS job-token"
        assert json.loads(request.content) == {"profile": {"firstName": "Jane"}}

    def test_json_output(self, job_env, patched_action):
        result = CliRunner().invoke(
            main, ["--user-id", "user123", "--department", "Research", "--json"]
        )

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["success"] is True
        assert payload["message"] == "User updated"
        assert payload["data"]["id"] == "user123"

    def test_address_option_overrides_env(self, job_env, patched_action, captured):
        result = CliRunner().invoke(
            main,
            ["--user-id", "user123", "--email", "j@example.com", "--address", "https://other.okta.com/"],
        )

        assert result.exit_code == 0, result.output
        assert str(captured[0].url) == "https://other.okta.com/api/v1/users/user123"

    def test_validation_error_exits_non_zero(self, job_env, patched_action, captured):
        result = CliRunner().invoke(main, ["--user-id", "user123"])

        assert result.exit_code == 1
        assert "At least one profile field must be provided to update" in result.output
        assert captured == []

    def test_remote_error_as_json(self, job_env, make_client):
        client = make_client(lambda request: httpx.Response(
            429, json={"errorCode": "E0000047", "errorSummary": "API call exceeded rate limit due to too many requests."}
        ))

        with patch(
            "jobs.update_okta_user.UpdateUserByIdAction",
            new=lambda: UpdateUserByIdAction(client=client),
        ):
            result = CliRunner().invoke(main, ["--user-id", "user123", "--first-name", "Jane", "--json"])

        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["error"]["statusCode"] == 429
        assert payload["error"]["retryable"] is True

    def test_missing_credentials(self, job_env, patched_action, captured):
        job_env.delenv("BEARER_AUTH_TOKEN")

        result = CliRunner().invoke(main, ["--user-id", "user123", "--first-name", "Jane"])

        assert result.exit_code == 1
        assert "Error: Configuration errors:" in result.output
        assert "One of BEARER_AUTH_TOKEN" in result.output
        assert captured == []

    def test_incomplete_client_credentials_as_json(self, job_env, patched_action, captured):
        job_env.delenv("BEARER_AUTH_TOKEN")
        job_env.setenv("OAUTH2_CLIENT_CREDENTIALS_CLIENT_SECRET", "secret")

        result = CliRunner().invoke(
            main, ["--user-id", "user123", "--first-name", "Jane", "--json"]
        )

        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["success"] is False
        assert payload["error"]["code"] == "CONFIGURATION_ERROR"
        assert "OAUTH2_CLIENT_CREDENTIALS_TOKEN_URL" in payload["error"]["message"]
        assert captured == []

    def test_interrupt_runs_halt(self, job_env, patched_action):
        with patch("jobs.update_okta_user.run_job", new=MagicMock(side_effect=KeyboardInterrupt)):
            result = CliRunner().invoke(main, ["--user-id", "user123", "--first-name", "Jane"])

        assert result.exit_code == 130
        ack = json.loads(result.output)
        assert ack["userId"] == "user123"
        assert ack["reason"] == "interrupted"
        assert ack["cleanupCompleted"] is True
