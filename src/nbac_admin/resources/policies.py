"""Policy operations."""

from __future__ import annotations

from ..converter import DetailedResponse
from ..models.options import (
    CreatePolicyOptions,
    DeletePolicyOptions,
    GetPolicyOptions,
    ListPoliciesOptions,
    UpdatePolicyOptions,
)
from ..models.policies import OutPolicy, PolicyPage
from ..request import add_query, set_body
from ..serialization import serialize_options
from .base import ResourceBase

POLICIES_PATH = "/v1/policies"
POLICY_PATH = "/v1/policies/{policy_id}"


class PoliciesResource(ResourceBase):
    """Create, list, read, update and delete policies."""

    def create(self, options: CreatePolicyOptions | None = None) -> DetailedResponse[OutPolicy]:
        if options is not None:
            self._check_options(options, CreatePolicyOptions, "create_policy_options")
        request = self._prepare(
            "POST", POLICIES_PATH, operation_id="createPolicy", options=options
        )
        if options is not None:
            set_body(request, serialize_options(options))
        return self._fetch(request, OutPolicy)

    def list(self, options: ListPoliciesOptions) -> DetailedResponse[PolicyPage]:
        """List policies of an account, narrowed by any filters set on ``options``."""
        options = self._check_options(options, ListPoliciesOptions, "list_policies_options")
        request = self._prepare(
            "GET", POLICIES_PATH, operation_id="listPolicies", options=options
        )
        add_query(request, options.query_values())
        return self._fetch(request, PolicyPage)

    def get(self, options: GetPolicyOptions) -> DetailedResponse[OutPolicy]:
        options = self._check_options(options, GetPolicyOptions, "get_policy_options")
        request = self._prepare(
            "GET",
            POLICY_PATH,
            operation_id="getPolicy",
            options=options,
            path_params={"policy_id": options.policy_id},
        )
        return self._fetch(request, OutPolicy)

    def update(self, options: UpdatePolicyOptions) -> DetailedResponse[OutPolicy]:
        options = self._check_options(options, UpdatePolicyOptions, "update_policy_options")
        request = self._prepare(
            "PUT",
            POLICY_PATH,
            operation_id="updatePolicy",
            options=options,
            path_params={"policy_id": options.policy_id},
            if_match=options.if_match,
        )
        set_body(request, serialize_options(options))
        return self._fetch(request, OutPolicy)

    def delete(self, options: DeletePolicyOptions) -> DetailedResponse[None]:
        options = self._check_options(options, DeletePolicyOptions, "delete_policy_options")
        request = self._prepare(
            "DELETE",
            POLICY_PATH,
            operation_id="deletePolicy",
            options=options,
            path_params={"policy_id": options.policy_id},
            expects_body=False,
        )
        return self._execute_void(request)
