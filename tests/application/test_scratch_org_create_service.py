from datetime import timedelta
from unittest.mock import AsyncMock, Mock

import pytest

from scratch_org_factory.application.scratch_org.service import ScratchOrgCreateService
from scratch_org_factory.domain.scratch_org.exceptions import (
    InvalidJsonCasingError,
    ProjectParseError,
    ScratchOrgInfoRequestError,
    SourceStatusResetFailureError,
)
from scratch_org_factory.domain.scratch_org.ports import ProjectResolverPort
from scratch_org_factory.domain.scratch_org.value_objects import ScratchOrgInfoRequestResult


@pytest.fixture
def make_service(scratch_org_info_api, org_connector, missing_project_resolver):
    def factory(options, project_resolver=missing_project_resolver):
        return ScratchOrgCreateService(
            options,
            scratch_org_info_api=scratch_org_info_api,
            org_connector=org_connector,
            project_resolver=project_resolver,
        )

    return factory


@pytest.mark.asyncio
async def test_create_runs_full_sequence(make_service, make_options, scratch_org_info_api, org_connector, hub_org, scratch_org_ids):
    options = make_options(
        org_config={"edition": "Developer", "settings": {"mobileSettings": {"enableS1EncryptedStoragePref2": False}}},
        wait=timedelta(minutes=10),
        setalias="my-scratch",
        setdefaultusername=True,
        client_secret="shh",
        retry=2,
    )
    service = make_service(options)

    response = await service.create()

    request_args = scratch_org_info_api.request_scratch_org_creation.await_args.args
    assert request_args[0] is hub_org
    assert request_args[1]["edition"] == "Developer"
    assert request_args[2].has_settings()

    scratch_org_info_api.poll_for_scratch_org_info.assert_awaited_once_with(
        hub_org, scratch_org_ids.scratch_org_info_id, timedelta(minutes=10)
    )

    authorize_kwargs = scratch_org_info_api.authorize_scratch_org.await_args.kwargs
    assert authorize_kwargs["hub_org"] is hub_org
    assert authorize_kwargs["client_secret"] == "shh"
    assert authorize_kwargs["set_as_default"] is True
    assert authorize_kwargs["alias"] == "my-scratch"
    assert authorize_kwargs["signup_target_login_url_config"] is None
    assert authorize_kwargs["retry"] == 2

    org_connector.connect.assert_awaited_once_with({"username": scratch_org_ids.username})

    assert service.username == scratch_org_ids.username
    assert service.auth_info == scratch_org_info_api.deploy_settings_and_resolve_url.return_value
    assert response.scratch_org_info_id == scratch_org_ids.scratch_org_info_id
    assert response.org_id == scratch_org_ids.org_id
    assert response.api_version == "61.0"
    assert response.warnings == []


@pytest.mark.asyncio
async def test_retry_defaults_to_zero(make_service, make_options, scratch_org_info_api):
    service = make_service(make_options(retry=None))

    await service.create()

    assert scratch_org_info_api.authorize_scratch_org.await_args.kwargs["retry"] == 0


@pytest.mark.asyncio
async def test_validation_failure_makes_no_remote_calls(make_service, make_options, scratch_org_info_api, org_connector):
    service = make_service(make_options(org_config={"OrgName": "Acme"}))

    with pytest.raises(InvalidJsonCasingError):
        await service.create()

    scratch_org_info_api.request_scratch_org_creation.assert_not_awaited()
    scratch_org_info_api.poll_for_scratch_org_info.assert_not_awaited()
    org_connector.connect.assert_not_awaited()


@pytest.mark.asyncio
async def test_rejected_request_stops_before_polling(make_service, make_options, scratch_org_info_api):
    scratch_org_info_api.request_scratch_org_creation.return_value = ScratchOrgInfoRequestResult(
        success=False, errors=["LIMIT_EXCEEDED"]
    )
    service = make_service(make_options())

    with pytest.raises(ScratchOrgInfoRequestError) as exc_info:
        await service.create()

    assert "LIMIT_EXCEEDED" in str(exc_info.value)
    scratch_org_info_api.poll_for_scratch_org_info.assert_not_awaited()


@pytest.mark.asyncio
async def test_poll_failure_propagates(make_service, make_options, scratch_org_info_api):
    scratch_org_info_api.poll_for_scratch_org_info.side_effect = TimeoutError("still provisioning")
    service = make_service(make_options())

    with pytest.raises(TimeoutError):
        await service.create()

    scratch_org_info_api.authorize_scratch_org.assert_not_awaited()


@pytest.mark.asyncio
async def test_project_login_url_is_forwarded(make_service, make_options, scratch_org_info_api, project_resolver_factory):
    resolver = project_resolver_factory({"signupTargetLoginUrl": "https://login.example.com"})
    service = make_service(make_options(), project_resolver=resolver)

    await service.create()

    kwargs = scratch_org_info_api.authorize_scratch_org.await_args.kwargs
    assert kwargs["signup_target_login_url_config"] == "https://login.example.com"


@pytest.mark.asyncio
async def test_missing_project_does_not_abort(make_service, make_options, scratch_org_info_api, scratch_org_ids):
    service = make_service(make_options())

    response = await service.create()

    assert response.username == scratch_org_ids.username
    assert scratch_org_info_api.authorize_scratch_org.await_args.kwargs["signup_target_login_url_config"] is None


@pytest.mark.asyncio
async def test_explicit_api_version_wins(make_service, make_options, scratch_org_info_api, config_aggregator, scratch_org_connection):
    config_aggregator.get_property_value.return_value = "58.0"
    service = make_service(make_options(apiversion="59.0"))

    await service.create()

    assert scratch_org_info_api.deploy_settings_and_resolve_url.await_args.args[1] == "59.0"
    scratch_org_connection.retrieve_max_api_version.assert_not_awaited()


@pytest.mark.asyncio
async def test_configured_api_version_beats_org_max(make_service, make_options, scratch_org_info_api, config_aggregator, scratch_org_connection):
    config_aggregator.get_property_value.return_value = "58.0"
    service = make_service(make_options())

    await service.create()

    config_aggregator.get_property_value.assert_called_with("apiVersion")
    assert scratch_org_info_api.deploy_settings_and_resolve_url.await_args.args[1] == "58.0"
    scratch_org_connection.retrieve_max_api_version.assert_not_awaited()


@pytest.mark.asyncio
async def test_org_max_api_version_is_fallback(make_service, make_options, scratch_org_info_api, scratch_org_connection):
    service = make_service(make_options())

    await service.create()

    scratch_org_connection.retrieve_max_api_version.assert_awaited_once()
    assert scratch_org_info_api.deploy_settings_and_resolve_url.await_args.args[1] == "61.0"


@pytest.mark.asyncio
async def test_revision_counters_reset(make_service, make_options, scratch_org_connection):
    service = make_service(make_options())

    await service.create()

    scratch_org_connection.tooling_find.assert_awaited_once_with(
        "SourceMember", {"RevisionCounter": {"$gt": 0}}, ["Id"]
    )
    scratch_org_connection.tooling_update.assert_awaited_once_with(
        "SourceMember",
        [
            {"Id": "0MZ000000000001", "RevisionCounter": 0},
            {"Id": "0MZ000000000002", "RevisionCounter": 0},
        ],
    )


@pytest.mark.asyncio
async def test_no_source_members_skips_update(make_service, make_options, scratch_org_connection):
    scratch_org_connection.tooling_find.return_value = []
    service = make_service(make_options())

    await service.create()

    scratch_org_connection.tooling_update.assert_not_awaited()


@pytest.mark.asyncio
async def test_revision_reset_failure_is_wrapped(make_service, make_options, scratch_org_connection, scratch_org_ids):
    remote_error = RuntimeError("INSUFFICIENT_ACCESS")
    scratch_org_connection.tooling_update = AsyncMock(side_effect=remote_error)
    service = make_service(make_options())

    with pytest.raises(SourceStatusResetFailureError) as exc_info:
        await service.create()

    error = exc_info.value
    assert error.org_id == scratch_org_ids.org_id
    assert error.username == scratch_org_ids.username
    assert scratch_org_ids.org_id in str(error)
    assert scratch_org_ids.username in str(error)
    assert "INSUFFICIENT_ACCESS" not in str(error)
    assert error.__cause__ is remote_error


@pytest.mark.asyncio
async def test_warnings_exposed_on_service(make_service, make_options):
    service = make_service(make_options(org_config={"features": ["ExpandedSourceTracking"]}))

    response = await service.create()

    assert len(service.warnings) == 1
    assert response.warnings == service.warnings


@pytest.mark.asyncio
async def test_malformed_project_does_not_abort(make_service, make_options, scratch_org_info_api, scratch_org_ids):
    resolver = Mock(spec=ProjectResolverPort)
    resolver.resolve = AsyncMock(side_effect=ProjectParseError("/work/sfdx-project.json", "bad json"))
    service = make_service(make_options(), project_resolver=resolver)

    response = await service.create()

    assert response.username == scratch_org_ids.username
    scratch_org_info_api.request_scratch_org_creation.assert_awaited_once()
    assert scratch_org_info_api.authorize_scratch_org.await_args.kwargs["signup_target_login_url_config"] is None
