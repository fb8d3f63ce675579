"""Python client for the Firebase Remote Config REST API."""
from __future__ import annotations

from typing import Dict, Mapping

import requests

from fireconfig.core import config as core_config
from fireconfig.core.errors import ConfigError, ErrorCode, RemoteConfigError
from fireconfig.core.models import RemoteConfigServiceErrorResponse, RemoteConfigTemplate
from fireconfig.core.utils.logging import get_logger
from .config import SdkConfig, load_config

logger = get_logger("fireconfig.client")

FIREBASE_SCOPES = (
    "https://www.googleapis.com/auth/cloud-platform",
    "https://www.googleapis.com/auth/firebase.remoteconfig",
)

HTTP_STATUS_TO_ERROR_CODE: Mapping[int, ErrorCode] = {
    400: ErrorCode.INVALID_ARGUMENT,
    401: ErrorCode.UNAUTHENTICATED,
    403: ErrorCode.PERMISSION_DENIED,
    404: ErrorCode.NOT_FOUND,
    409: ErrorCode.CONFLICT,
    412: ErrorCode.FAILED_PRECONDITION,
    429: ErrorCode.RESOURCE_EXHAUSTED,
    500: ErrorCode.INTERNAL,
    503: ErrorCode.UNAVAILABLE,
}

MISSING_PROJECT_ID_MESSAGE = (
    "Project ID is required to access Remote Config service. Pass project_id explicitly, "
    "set it in the fireconfig config file, or set the GOOGLE_CLOUD_PROJECT environment variable."
)


def _default_session() -> requests.Session:
    import google.auth
    from google.auth.exceptions import DefaultCredentialsError
    from google.auth.transport.requests import AuthorizedSession

    try:
        credentials, _ = google.auth.default(scopes=list(FIREBASE_SCOPES))
    except DefaultCredentialsError as exc:
        raise ConfigError(f"Could not resolve Google credentials: {exc}") from exc
    return AuthorizedSession(credentials)


class RemoteConfigErrorHandler:
    """Turns failed requests into :class:`RemoteConfigError`."""

    def handle_http_error(self, response: requests.Response, cause: BaseException | None = None) -> RemoteConfigError:
        body = self._response_text(response)
        parsed = RemoteConfigServiceErrorResponse.safe_parse(body)
        code = self._platform_code(parsed.status(), response.status_code)
        message = parsed.message() or (
            f"Unexpected HTTP response with status: {response.status_code}; body: {body}"
        )
        error = RemoteConfigError(
            code=code,
            message=message,
            error_code=parsed.error_code(),
            http_response=response,
        )
        error.__cause__ = cause
        return error

    def handle_io_error(self, cause: requests.RequestException) -> RemoteConfigError:
        response = cause.response
        if response is not None:
            return self.handle_http_error(response, cause)

        if isinstance(cause, requests.Timeout):
            code = ErrorCode.DEADLINE_EXCEEDED
            message = f"Timed out while making an API call: {cause}"
        elif isinstance(cause, requests.ConnectionError):
            code = ErrorCode.UNAVAILABLE
            message = f"Failed to establish a connection: {cause}"
        else:
            code = ErrorCode.UNKNOWN
            message = f"Unknown error while making a remote service call: {cause}"
        error = RemoteConfigError(code=code, message=message)
        error.__cause__ = cause
        return error

    @staticmethod
    def _response_text(response: requests.Response | None) -> str | None:
        if response is None:
            return None
        try:
            return response.text
        except (RuntimeError, requests.RequestException):  # pragma: no cover
            return None

    @staticmethod
    def _platform_code(status: str | None, http_status: int) -> ErrorCode:
        if status:
            try:
                return ErrorCode(status)
            except ValueError:
                pass
        return HTTP_STATUS_TO_ERROR_CODE.get(http_status, ErrorCode.UNKNOWN)


class RemoteConfigClient:
    """Client for reading a project's Remote Config template.

    Only immutable configuration is stored on the instance, so one client can
    serve concurrent ``get_template`` calls from several threads. The session
    is expected to add authentication; by default an
    :class:`google.auth.transport.requests.AuthorizedSession` built from
    application default credentials is used.
    """

    def __init__(
        self,
        project_id: str | None,
        session: requests.Session | None = None,
        timeout: int = core_config.DEFAULT_TIMEOUT,
        client_header: str = core_config.CLIENT_HEADER_VALUE,
    ) -> None:
        if not project_id:
            raise ConfigError(MISSING_PROJECT_ID_MESSAGE)

        self._project_id = project_id
        self._url = core_config.RC_URL_TEMPLATE.format(project_id=project_id)
        self._headers: Dict[str, str] = {core_config.CLIENT_HEADER_NAME: client_header}
        self._timeout = timeout
        self._error_handler = RemoteConfigErrorHandler()
        self._session = session if session is not None else _default_session()

    @classmethod
    def from_config(cls, config: SdkConfig | None = None, session: requests.Session | None = None) -> "RemoteConfigClient":
        cfg = config or load_config()
        return cls(project_id=cfg.project_id, session=session, timeout=cfg.timeout)

    @property
    def project_id(self) -> str:
        return self._project_id

    @property
    def url(self) -> str:
        return self._url

    @property
    def timeout(self) -> int:
        return self._timeout

    def get_template(self) -> RemoteConfigTemplate:
        response = self._send()
        template = RemoteConfigTemplate.from_dict(response.json())
        template.etag = self._etag(response)
        return template

    # --- internal helpers ---
    def _send(self) -> requests.Response:
        logger.debug("GET %s", self._url)
        try:
            response = self._session.request(
                "GET",
                self._url,
                headers=dict(self._headers),
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.debug("Remote Config request failed: %s", exc)
            raise self._error_handler.handle_io_error(exc) from exc

        if not 200 <= response.status_code < 300:
            error = self._error_handler.handle_http_error(response)
            logger.debug(
                "Remote Config returned HTTP %s (%s): %s",
                response.status_code,
                error.code.value,
                error.message,
            )
            raise error
        return response

    @staticmethod
    def _etag(response: requests.Response) -> str:
        etag = response.headers.get("etag")
        if etag is None:
            raise RemoteConfigError(
                code=ErrorCode.UNKNOWN,
                message="Remote Config response is missing the ETag header",
                http_response=response,
            )
        return etag
