"""Cloudflare Workers Secrets API client.

Thin synchronous client over the Cloudflare v4 REST API, exposing only the
two operations the Workers secrets endpoint offers: set and delete. Secret
values cannot be read back through this API.

Endpoints:
    PUT    /accounts/{account_id}/workers/scripts/{script}/secrets
    DELETE /accounts/{account_id}/workers/scripts/{script}/secrets/{name}

Every response is wrapped in Cloudflare's envelope:
    {"success": bool, "errors": [{"code": int, "message": str}], "messages": [], "result": ...}
"""

from typing import Any
from urllib.parse import quote

import httpx

from secretport.core.config import CloudflareCredentials
from secretport.core.constants import (
    CLOUDFLARE_WORKERS_SECRETS_PROVIDER,
    RESPONSE_BODY_MAX_LENGTH,
)
from secretport.core.enums import ErrorCode
from secretport.core.result import Failure, Result, Success
from secretport.domain.errors import (
    ProviderError,
    ProviderInvalidResponseError,
    SecretsValidationError,
)
from secretport.infrastructure.secrets.base_api_client import BaseSecretsAPIClient
from secretport.infrastructure.secrets.cloudflare.models import (
    WorkersPutSecretRequest,
    WorkersPutSecretResponse,
)


class CloudflareWorkersSecretsAPI(BaseSecretsAPIClient):
    """Cloudflare API client scoped to one account's Workers secrets.

    Authenticates with the global API key + account email pair
    (X-Auth-Key / X-Auth-Email headers).

    Use `create()` rather than the constructor: it validates credentials and
    reports problems as a Result.
    """

    def __init__(
        self,
        *,
        credentials: CloudflareCredentials,
        http_client: httpx.Client | None = None,
    ) -> None:
        super().__init__(
            base_url=credentials.base_url,
            provider_name=CLOUDFLARE_WORKERS_SECRETS_PROVIDER,
            timeout=credentials.timeout,
            http_client=http_client,
        )
        self._api_key = credentials.api_key
        self._api_email = credentials.api_email
        self._account_id = credentials.account_id

    @classmethod
    def create(
        cls,
        credentials: CloudflareCredentials,
        *,
        http_client: httpx.Client | None = None,
    ) -> Result["CloudflareWorkersSecretsAPI", SecretsValidationError]:
        """Build a client after checking credentials are present.

        Args:
            credentials: API key, account email and account id.
            http_client: Optional pre-built httpx client.

        Returns:
            Success(client), or Failure(SecretsValidationError) naming the
            first missing credential.
        """
        missing = [
            (attr, env)
            for attr, env in (
                ("api_key", "CLOUDFLARE_API_KEY"),
                ("api_email", "CLOUDFLARE_API_EMAIL"),
                ("account_id", "CLOUDFLARE_ACCOUNT_ID"),
            )
            if not getattr(credentials, attr)
        ]
        if missing:
            return Failure(
                error=SecretsValidationError(
                    code=ErrorCode.PROVIDER_CREDENTIAL_INVALID,
                    message=(
                        "invalid credentials: "
                        + ", ".join(env for _, env in missing)
                        + " must not be empty"
                    ),
                    provider_name=CLOUDFLARE_WORKERS_SECRETS_PROVIDER,
                    field=missing[0][0],
                )
            )
        return Success(value=cls(credentials=credentials, http_client=http_client))

    def _auth_headers(self) -> dict[str, str]:
        return {
            "X-Auth-Key": self._api_key,
            "X-Auth-Email": self._api_email,
            "Content-Type": "application/json",
        }

    def _secrets_path(self, script_name: str) -> str:
        return (
            f"/accounts/{quote(self._account_id, safe='')}"
            f"/workers/scripts/{quote(script_name, safe='')}/secrets"
        )

    def _error_details(self, response: httpx.Response) -> dict[str, Any]:
        try:
            envelope = response.json()
        except ValueError:
            return super()._error_details(response)
        if isinstance(envelope, dict) and envelope.get("errors"):
            return {"errors": envelope["errors"]}
        return super()._error_details(response)

    def _unwrap_envelope(
        self, response: httpx.Response, operation: str
    ) -> Result[Any, ProviderError]:
        parsed = self._parse_json_object(response, operation)
        if isinstance(parsed, Failure):
            return parsed

        envelope = parsed.value
        if not envelope.get("success", False):
            errors = envelope.get("errors") or []
            self._logger.warning(
                "cloudflare_api_unsuccessful",
                operation=operation,
                errors=errors,
            )
            reason = "; ".join(
                str(e.get("message", e)) if isinstance(e, dict) else str(e)
                for e in errors
            )
            return Failure(
                error=ProviderInvalidResponseError(
                    code=ErrorCode.PROVIDER_INVALID_RESPONSE,
                    message=f"Cloudflare API error: {reason or 'request unsuccessful'}",
                    provider_name=self._provider_name,
                    status_code=response.status_code,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                    details={"errors": errors},
                )
            )
        return Success(value=envelope.get("result"))

    def set_workers_secret(
        self, script_name: str, request: WorkersPutSecretRequest
    ) -> Result[WorkersPutSecretResponse, ProviderError]:
        """Create or overwrite a secret binding on a Worker script.

        Args:
            script_name: Worker script the secret belongs to.
            request: Secret name, value and binding type.

        Returns:
            Success(WorkersPutSecretResponse) on success.
            Failure(ProviderError) on any HTTP or envelope error.
        """
        result = self._execute_request(
            method="PUT",
            path=self._secrets_path(script_name),
            headers=self._auth_headers(),
            json_data=request.to_payload(),
            operation="set_workers_secret",
        )
        if isinstance(result, Failure):
            return result

        unwrapped = self._unwrap_envelope(result.value, "set_workers_secret")
        if isinstance(unwrapped, Failure):
            return unwrapped

        payload = unwrapped.value if isinstance(unwrapped.value, dict) else {}
        return Success(value=WorkersPutSecretResponse.from_result(payload))

    def delete_workers_secret(
        self, script_name: str, secret_name: str
    ) -> Result[None, ProviderError]:
        """Delete a secret binding from a Worker script.

        Deleting a secret that does not exist returns whatever Cloudflare
        returns (typically a 404 mapped to ProviderNotFoundError).
        """
        result = self._execute_request(
            method="DELETE",
            path=f"{self._secrets_path(script_name)}/{quote(secret_name, safe='')}",
            headers=self._auth_headers(),
            operation="delete_workers_secret",
        )
        if isinstance(result, Failure):
            return result

        unwrapped = self._unwrap_envelope(result.value, "delete_workers_secret")
        if isinstance(unwrapped, Failure):
            return unwrapped
        return Success(value=None)
