import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, Mock

import pytest

from scratch_org_factory.application.scratch_org.options import ScratchOrgCreateOptions
from scratch_org_factory.domain.scratch_org.exceptions import ProjectNotFoundError
from scratch_org_factory.domain.scratch_org.ports import (
    ConfigAggregatorPort,
    HubOrgPort,
    OrgConnectorPort,
    ProjectPort,
    ProjectResolverPort,
    ScratchOrgConnectionPort,
    ScratchOrgInfoApiPort,
)
from scratch_org_factory.domain.scratch_org.value_objects import (
    ScratchOrgInfoRecord,
    ScratchOrgInfoRequestResult,
)

ORG_ID = "00D000000000001AAA"
SCRATCH_USERNAME = "test-abc123@example.com"
SCRATCH_ORG_INFO_ID = "2SR000000000001AAA"


@pytest.fixture
def scratch_org_ids():
    return SimpleNamespace(org_id=ORG_ID, username=SCRATCH_USERNAME, scratch_org_info_id=SCRATCH_ORG_INFO_ID)


@pytest.fixture
def hub_org():
    hub = Mock(spec=HubOrgPort)
    hub.get_username.return_value = "admin@devhub.org"
    hub.get_client_id.return_value = "hub-client-id"
    return hub


@pytest.fixture
def config_aggregator():
    aggregator = Mock(spec=ConfigAggregatorPort)
    aggregator.get_property_value.return_value = None
    return aggregator


@pytest.fixture
def missing_project_resolver():
    resolver = Mock(spec=ProjectResolverPort)
    resolver.resolve = AsyncMock(side_effect=ProjectNotFoundError("/tmp/no-project"))
    return resolver


@pytest.fixture
def project_resolver_factory():
    def factory(project_config):
        project = Mock(spec=ProjectPort)
        project.get_path.return_value = "/work/project"
        project.resolve_project_config = AsyncMock(return_value=project_config)
        resolver = Mock(spec=ProjectResolverPort)
        resolver.resolve = AsyncMock(return_value=project)
        return resolver

    return factory


@pytest.fixture
def completed_record():
    return ScratchOrgInfoRecord.model_validate(
        {
            "Id": SCRATCH_ORG_INFO_ID,
            "Status": "Active",
            "SignupUsername": SCRATCH_USERNAME,
            "LoginUrl": "https://test-abc123.my.salesforce.com",
            "ScratchOrg": ORG_ID[:15],
        }
    )


@pytest.fixture
def scratch_org_info_api(completed_record):
    api = Mock(spec=ScratchOrgInfoApiPort)
    api.request_scratch_org_creation = AsyncMock(
        return_value=ScratchOrgInfoRequestResult(id=SCRATCH_ORG_INFO_ID, success=True)
    )
    api.poll_for_scratch_org_info = AsyncMock(return_value=completed_record)
    api.authorize_scratch_org = AsyncMock(return_value={"username": SCRATCH_USERNAME})
    api.deploy_settings_and_resolve_url = AsyncMock(
        return_value={"username": SCRATCH_USERNAME, "instanceUrl": "https://test-abc123.my.salesforce.com"}
    )
    return api


@pytest.fixture
def scratch_org_connection():
    connection = Mock(spec=ScratchOrgConnectionPort)
    connection.get_username.return_value = SCRATCH_USERNAME
    connection.get_org_id.return_value = ORG_ID
    connection.retrieve_max_api_version = AsyncMock(return_value="61.0")
    connection.tooling_find = AsyncMock(return_value=[{"Id": "0MZ000000000001"}, {"Id": "0MZ000000000002"}])
    connection.tooling_update = AsyncMock(return_value=[{"success": True}, {"success": True}])
    return connection


@pytest.fixture
def org_connector(scratch_org_connection):
    connector = Mock(spec=OrgConnectorPort)
    connector.connect = AsyncMock(return_value=scratch_org_connection)
    return connector


@pytest.fixture
def make_options(hub_org, config_aggregator):
    def factory(**overrides):
        values = {
            "hub_org": hub_org,
            "config_aggregator": config_aggregator,
            "duration_days": 7,
        }
        values.update(overrides)
        return ScratchOrgCreateOptions(**values)

    return factory


@pytest.fixture
def definition_file(tmp_path):
    def factory(contents):
        path = tmp_path / "project-scratch-def.json"
        if isinstance(contents, str):
            path.write_text(contents, encoding="utf-8")
        else:
            path.write_text(json.dumps(contents), encoding="utf-8")
        return str(path)

    return factory
