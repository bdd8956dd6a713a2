"""Unit tests for the director lifecycle manager."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from bootloader.aws.cloudformation import StackManager
from bootloader.bosh.executor import BOSHExecutor
from bootloader.bosh.manager import Manager
from bootloader.lib.errors import InvalidIAASError
from bootloader.models.bosh import (
    AWSInterpolateInput,
    CreateEnvInput,
    CreateEnvOutput,
    DeleteEnvInput,
    GCPInterpolateInput,
    InterpolateOutput,
)
from bootloader.models.outputs import Stack, TerraformOutputs
from bootloader.models.state import AWS, BOSH, GCP, LB, KeyPair, State
from bootloader.models.state import Stack as StackState
from bootloader.storage.state import load_state, save_state
from bootloader.terraform.output_provider import TerraformOutputProvider

VARIABLES_YAML = """admin_password: some-admin-password
director_ssl:
  ca: some-ca
  certificate: some-certificate
  private_key: some-private-key
"""


@pytest.fixture
def terraform_output_provider() -> MagicMock:
    """Terraform output provider returning fixed GCP outputs."""
    provider = MagicMock(spec=TerraformOutputProvider)
    provider.get.return_value = TerraformOutputs(
        network_name="some-network",
        subnetwork_name="some-subnetwork",
        bosh_tag="some-bosh-open-tag",
        internal_tag="some-internal-tag",
        external_ip="some-external-ip",
        director_address="some-director-address",
    )
    return provider


@pytest.fixture
def stack_manager() -> MagicMock:
    """Stack manager returning fixed AWS stack outputs."""
    manager = MagicMock(spec=StackManager)
    manager.describe.return_value = Stack(
        name="some-stack",
        outputs={
            "BOSHSubnetAZ": "some-bosh-subnet-az",
            "BOSHUserAccessKey": "some-bosh-user-access-key",
            "BOSHUserSecretAccessKey": "some-bosh-user-secret-access-key",
            "BOSHSecurityGroup": "some-bosh-security-group",
            "BOSHSubnet": "some-bosh-subnet",
            "BOSHEIP": "some-bosh-elastic-ip",
            "BOSHURL": "some-bosh-url",
        },
    )
    return manager


@pytest.fixture
def executor() -> MagicMock:
    """Executor returning a rendered manifest and a new director state."""
    executor = MagicMock(spec=BOSHExecutor)
    executor.interpolate.return_value = InterpolateOutput(
        manifest="some-manifest",
        variables={
            "admin_password": "some-admin-password",
            "director_ssl": {
                "ca": "some-ca",
                "certificate": "some-certificate",
                "private_key": "some-private-key",
            },
        },
    )
    executor.create_env.return_value = CreateEnvOutput(
        state={"some-new-key": "some-new-value"}
    )
    return executor


@pytest.fixture
def manager(
    executor: MagicMock,
    terraform_output_provider: MagicMock,
    stack_manager: MagicMock,
) -> Manager:
    """Manager wired to mocked collaborators."""
    return Manager(executor, terraform_output_provider, stack_manager)


class TestManagerCreateOutputSources:
    """Tests for choosing the infrastructure output source."""

    def test_gcp_queries_terraform_output_provider(
        self,
        manager: Manager,
        gcp_state: State,
        terraform_output_provider: MagicMock,
        stack_manager: MagicMock,
    ) -> None:
        """GCP states read terraform outputs and never describe a stack."""
        manager.create(gcp_state)

        terraform_output_provider.get.assert_called_once_with("some-tf-state", "cf")
        stack_manager.describe.assert_not_called()

    def test_aws_queries_stack(
        self,
        manager: Manager,
        aws_state: State,
        terraform_output_provider: MagicMock,
        stack_manager: MagicMock,
    ) -> None:
        """AWS states describe the stack and never read terraform outputs."""
        manager.create(aws_state)

        stack_manager.describe.assert_called_once_with("some-stack")
        terraform_output_provider.get.assert_not_called()


class TestManagerCreateInterpolation:
    """Tests for the descriptor handed to the executor."""

    def test_gcp_interpolate_input(
        self, manager: Manager, gcp_state: State, executor: MagicMock
    ) -> None:
        """GCP descriptor is built from the state and terraform outputs."""
        manager.create(gcp_state)

        executor.interpolate.assert_called_once_with(
            GCPInterpolateInput(
                director_name="bosh-some-env-id",
                zone="some-zone",
                network="some-network",
                subnetwork="some-subnetwork",
                tags=["some-bosh-open-tag", "some-internal-tag"],
                project_id="some-project-id",
                external_ip="some-external-ip",
                credentials_json="some-credential-json",
                private_key="some-private-key",
                bosh_state={"some-key": "some-value"},
                variables="",
            )
        )

    def test_aws_interpolate_input(
        self, manager: Manager, aws_state: State, executor: MagicMock
    ) -> None:
        """AWS descriptor is built from the state and stack outputs."""
        manager.create(aws_state)

        executor.interpolate.assert_called_once_with(
            AWSInterpolateInput(
                director_name="bosh-some-env-id",
                az="some-bosh-subnet-az",
                access_key_id="some-bosh-user-access-key",
                secret_access_key="some-bosh-user-secret-access-key",
                region="some-region",
                default_key_name="some-keypair-name",
                default_security_groups=["some-bosh-security-group"],
                subnet_id="some-bosh-subnet",
                external_ip="some-bosh-elastic-ip",
                private_key="some-private-key",
                bosh_state={"some-key": "some-value"},
                variables="",
            )
        )

    def test_prior_variables_are_carried_into_interpolation(
        self, manager: Manager, gcp_state: State, executor: MagicMock
    ) -> None:
        """Previously stored variables are passed back for re-interpolation."""
        state = gcp_state.model_copy(
            update={"bosh": gcp_state.bosh.model_copy(update={"variables": "a: b\n"})}
        )

        manager.create(state)

        interpolate_input = executor.interpolate.call_args.args[0]
        assert interpolate_input.variables == "a: b\n"


class TestManagerCreateEnv:
    """Tests for the create-env call and the returned state."""

    def test_create_env_receives_manifest_prior_state_and_variables(
        self, manager: Manager, gcp_state: State, executor: MagicMock
    ) -> None:
        """create-env is driven by the manifest and the prior director state."""
        manager.create(gcp_state)

        executor.create_env.assert_called_once_with(
            CreateEnvInput(
                manifest="some-manifest",
                state={"some-key": "some-value"},
                variables=VARIABLES_YAML,
            )
        )

    def test_gcp_returns_state_with_director(
        self, manager: Manager, gcp_state: State
    ) -> None:
        """GCP create folds director results into a copy of the state."""
        state = manager.create(gcp_state)

        assert state == State(
            iaas="gcp",
            env_id="some-env-id",
            key_pair=KeyPair(private_key="some-private-key"),
            gcp=GCP(
                zone="some-zone",
                project_id="some-project-id",
                service_account_key="some-credential-json",
            ),
            bosh=BOSH(
                state={"some-new-key": "some-new-value"},
                variables=VARIABLES_YAML,
                manifest="some-manifest",
                director_name="bosh-some-env-id",
                director_address="some-director-address",
                director_username="admin",
                director_password="some-admin-password",
                director_ssl_ca="some-ca",
                director_ssl_certificate="some-certificate",
                director_ssl_private_key="some-private-key",
            ),
            tf_state="some-tf-state",
            lb=LB(type="cf"),
        )

    def test_aws_returns_state_with_director(
        self, manager: Manager, aws_state: State
    ) -> None:
        """AWS create uses the stack's BOSHURL as the director address."""
        state = manager.create(aws_state)

        assert state == State(
            iaas="aws",
            env_id="some-env-id",
            key_pair=KeyPair(name="some-keypair-name", private_key="some-private-key"),
            aws=AWS(region="some-region"),
            stack=StackState(name="some-stack"),
            bosh=BOSH(
                state={"some-new-key": "some-new-value"},
                variables=VARIABLES_YAML,
                manifest="some-manifest",
                director_name="bosh-some-env-id",
                director_address="some-bosh-url",
                director_username="admin",
                director_password="some-admin-password",
                director_ssl_ca="some-ca",
                director_ssl_certificate="some-certificate",
                director_ssl_private_key="some-private-key",
            ),
            lb=LB(type="cf"),
        )

    def test_input_state_is_not_modified(
        self, manager: Manager, gcp_state: State
    ) -> None:
        """The incoming state keeps its original director sub-record."""
        original = gcp_state.model_copy(deep=True)

        updated = manager.create(gcp_state)

        assert gcp_state == original
        assert updated is not gcp_state
        assert updated.model_dump(exclude={"bosh"}) == gcp_state.model_dump(
            exclude={"bosh"}
        )

    def test_missing_variables_leave_credentials_empty(
        self, manager: Manager, aws_state: State, executor: MagicMock
    ) -> None:
        """Absent admin password and SSL entries are tolerated."""
        executor.interpolate.return_value = InterpolateOutput(
            manifest="some-manifest", variables={}
        )

        state = manager.create(aws_state)

        assert state.bosh.director_username == ""
        assert state.bosh.director_password == ""
        assert state.bosh.director_ssl_ca == ""
        assert state.bosh.director_ssl_certificate == ""
        assert state.bosh.director_ssl_private_key == ""
        assert state.bosh.variables == ""
        assert state.bosh.manifest == "some-manifest"

    def test_non_string_credentials_are_stored_as_strings(
        self,
        manager: Manager,
        gcp_state: State,
        executor: MagicMock,
        tmp_path: Path,
    ) -> None:
        """A numeric admin password decoded from YAML is kept as text."""
        executor.interpolate.return_value = InterpolateOutput(
            manifest="some-manifest",
            variables={"admin_password": 123456, "director_ssl": {"ca": None}},
        )

        state = manager.create(gcp_state)

        assert state.bosh.director_password == "123456"
        assert state.bosh.director_username == "admin"
        assert state.bosh.director_ssl_ca == ""
        save_state(tmp_path, state)
        assert load_state(tmp_path).bosh.director_password == "123456"

    def test_malformed_director_ssl_is_ignored(
        self, manager: Manager, aws_state: State, executor: MagicMock
    ) -> None:
        """A director_ssl entry that is not a mapping leaves SSL fields empty."""
        executor.interpolate.return_value = InterpolateOutput(
            manifest="some-manifest",
            variables={"admin_password": "some-admin-password", "director_ssl": "x"},
        )

        state = manager.create(aws_state)

        assert state.bosh.director_password == "some-admin-password"
        assert state.bosh.director_ssl_ca == ""
        assert state.bosh.director_ssl_certificate == ""
        assert state.bosh.director_ssl_private_key == ""


class TestManagerCreateFailures:
    """Tests for error propagation during create."""

    @pytest.mark.parametrize("iaas", ["", "azure", "vsphere"])
    def test_invalid_iaas_raises_before_collaborators(
        self,
        manager: Manager,
        executor: MagicMock,
        terraform_output_provider: MagicMock,
        stack_manager: MagicMock,
        iaas: str,
    ) -> None:
        """Unsupported IAAS values fail without calling any collaborator."""
        with pytest.raises(InvalidIAASError, match="A valid IAAS was not provided"):
            manager.create(State(iaas=iaas))

        terraform_output_provider.get.assert_not_called()
        stack_manager.describe.assert_not_called()
        executor.interpolate.assert_not_called()
        executor.create_env.assert_not_called()

    def test_terraform_output_provider_error_propagates(
        self,
        manager: Manager,
        terraform_output_provider: MagicMock,
        executor: MagicMock,
    ) -> None:
        """Terraform output failures are raised unchanged."""
        error = RuntimeError("failed to output")
        terraform_output_provider.get.side_effect = error

        with pytest.raises(RuntimeError) as exc_info:
            manager.create(State(iaas="gcp"))

        assert exc_info.value is error
        executor.interpolate.assert_not_called()

    def test_stack_manager_error_propagates(
        self, manager: Manager, stack_manager: MagicMock, executor: MagicMock
    ) -> None:
        """Stack describe failures are raised unchanged."""
        stack_manager.describe.side_effect = RuntimeError("failed to get stack")

        with pytest.raises(RuntimeError, match="failed to get stack"):
            manager.create(State(iaas="aws"))

        executor.interpolate.assert_not_called()

    def test_interpolate_error_propagates(
        self, manager: Manager, executor: MagicMock
    ) -> None:
        """Interpolate failures are raised unchanged and stop create-env."""
        executor.interpolate.side_effect = RuntimeError("failed to interpolate")

        with pytest.raises(RuntimeError, match="failed to interpolate"):
            manager.create(State(iaas="gcp"))

        executor.create_env.assert_not_called()

    def test_create_env_error_propagates(
        self, manager: Manager, executor: MagicMock, aws_state: State
    ) -> None:
        """create-env failures are raised unchanged and the state is untouched."""
        original = aws_state.model_copy(deep=True)
        executor.create_env.side_effect = RuntimeError("failed to create")

        with pytest.raises(RuntimeError, match="failed to create"):
            manager.create(aws_state)

        assert aws_state == original


class TestManagerDelete:
    """Tests for deleting a director."""

    def test_delete_passes_stored_director_record(
        self, manager: Manager, executor: MagicMock
    ) -> None:
        """delete-env receives exactly the stored manifest, state and variables."""
        manager.delete(
            State(
                bosh=BOSH(
                    manifest="some-manifest",
                    state={"key": "value"},
                    variables=VARIABLES_YAML,
                )
            )
        )

        executor.delete_env.assert_called_once_with(
            DeleteEnvInput(
                manifest="some-manifest",
                state={"key": "value"},
                variables=VARIABLES_YAML,
            )
        )

    def test_delete_does_not_read_outputs(
        self,
        manager: Manager,
        aws_state: State,
        terraform_output_provider: MagicMock,
        stack_manager: MagicMock,
        executor: MagicMock,
    ) -> None:
        """Delete is driven purely by the persisted state."""
        manager.delete(aws_state)

        terraform_output_provider.get.assert_not_called()
        stack_manager.describe.assert_not_called()
        executor.interpolate.assert_not_called()

    def test_delete_env_error_propagates(
        self, manager: Manager, executor: MagicMock
    ) -> None:
        """delete-env failures are raised unchanged."""
        executor.delete_env.side_effect = RuntimeError("failed to delete")

        with pytest.raises(RuntimeError, match="failed to delete"):
            manager.delete(State())
