"""Unit tests for profile building and the Okta Users API client."""

import pytest
import httpx

from app.schemas.user import UpdateUserParams
from app.services.okta_user_service import OktaUserService, build_profile
from common.utils.exceptions import RemoteAPIException, ValidationException


# ─────────────────────────────────────────────────────────────────
# build_profile
# ─────────────────────────────────────────────────────────────────


class TestBuildProfile:

    def test_trims_and_keeps_field_order(self):
        params = UpdateUserParams(
            userId="u1",
            employeeNumber=" E1 ",
            firstName=" Jane ",
            login="jane@example.com",
        )

        profile = build_profile(params)

        assert list(profile) == ["firstName", "login", "employeeNumber"]
        assert profile == {"firstName": "Jane", "login": "jane@example.com", "employeeNumber": "E1"}

    def test_additional_attributes_override_standard_fields(self):
        params = UpdateUserParams(
            userId="u1",
            firstName="Jane",
            department="Engineering",
            additionalProfileAttributes='{"department": "Research", "costCenter": 42}',
        )

        profile = build_profile(params)

        assert profile == {"firstName": "Jane", "department": "Research", "costCenter": 42}

    def test_additional_attribute_values_are_kept_as_parsed(self):
        params = UpdateUserParams(
            userId="u1",
            additionalProfileAttributes='{"nickName": "  JJ  ", "manager": null}',
        )

        assert build_profile(params) == {"nickName": "  JJ  ", "manager": None}

    def test_invalid_json_wraps_parser_message(self):
        params = UpdateUserParams(userId="u1", additionalProfileAttributes="{not json")

        with pytest.raises(ValidationException) as exc_info:
            build_profile(params)

        assert exc_info.value.message.startswith("Invalid additionalProfileAttributes JSON: ")
        assert len(exc_info.value.message) > len("Invalid additionalProfileAttributes JSON: ")

    @pytest.mark.parametrize("raw", ['"a string"', "42", "true", "null"])
    def test_non_object_json_adds_nothing(self, raw):
        params = UpdateUserParams(userId="u1", firstName="Jane", additionalProfileAttributes=raw)

        assert build_profile(params) == {"firstName": "Jane"}

    def test_null_alone_is_an_empty_profile(self):
        params = UpdateUserParams(userId="u1", additionalProfileAttributes="null")

        with pytest.raises(ValidationException, match="At least one profile field"):
            build_profile(params)

    def test_array_is_rejected(self):
        params = UpdateUserParams(userId="u1", firstName="Jane", additionalProfileAttributes="[1, 2]")

        with pytest.raises(ValidationException) as exc_info:
            build_profile(params)

        assert exc_info.value.message == "additionalProfileAttributes must be a JSON object, not an array"

    def test_empty_profile(self):
        with pytest.raises(ValidationException) as exc_info:
            build_profile(UpdateUserParams(userId="u1", firstName=" "))

        assert exc_info.value.code == "VALIDATION_ERROR"

    def test_unknown_params_are_ignored(self):
        params = UpdateUserParams.model_validate(
            {"userId": "u1", "firstName": "Jane", "jobId": "job-7"}
        )

        assert build_profile(params) == {"firstName": "Jane"}


# ─────────────────────────────────────────────────────────────────
# OktaUserService
# ─────────────────────────────────────────────────────────────────


class TestOktaUserService:

    def test_user_url(self):
        service = OktaUserService("https://example.okta.com", "SSWS tok")
        assert service.user_url("00u1") == "https://example.okta.com/api/v1/users/00u1"

    @pytest.mark.asyncio
    async def test_update_user_returns_selected_fields(self, okta_client, user_record, captured):
        service = OktaUserService("https://example.okta.com", "SSWS tok", client=okta_client)

        result = await service.update_user("user123", {"firstName": "Jane"})

        assert "_links" not in result
        assert result["profile"] == user_record["profile"]
        assert captured[0].headers["Authorization"] == "SSWS tok"

    @pytest.mark.asyncio
    async def test_json_list_error_body_falls_back_to_status(self, make_client):
        client = make_client(lambda request: httpx.Response(422, json=["unexpected"]))
        service = OktaUserService("https://example.okta.com", "SSWS tok", client=client)

        with pytest.raises(RemoteAPIException) as exc_info:
            await service.update_user("user123", {"firstName": "Jane"})

        assert exc_info.value.message == "Failed to update user: HTTP 422"
        assert exc_info.value.status_code == 422

    @pytest.mark.asyncio
    async def test_unparsable_error_is_logged(self, make_client, caplog):
        client = make_client(lambda request: httpx.Response(502, text="Bad Gateway"))
        service = OktaUserService("https://example.okta.com", "SSWS tok", client=client)

        with pytest.raises(RemoteAPIException):
            await service.update_user("user123", {"firstName": "Jane"})

        assert "Failed to parse error response" in caplog.text
