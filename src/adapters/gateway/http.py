"""
HTTP gateway adapters - Implement the upload and registration ports.

Both adapters share one httpx.AsyncClient configured with the remote
API's base URL and timeout. Transport errors and non-2xx responses are
translated into domain exceptions carrying the server's human-readable
"message" field when the body has one.
"""

import logging
from typing import Any

import httpx

from src.domain.exceptions import RegistrationRejected, UploadFailed
from src.domain.form import ProfileImage
from src.domain.ports import RegistrationPayload, RegistrationResponse

logger = logging.getLogger(__name__)

DEFAULT_REGISTER_PATH = "/api/v1/auth/register"
DEFAULT_UPLOAD_IMAGE_PATH = "/api/v1/auth/upload-image"


def _json_body(response: httpx.Response) -> dict[str, Any]:
    """Decode a JSON object body, or return {} for anything else."""
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _error_message(response: httpx.Response) -> str | None:
    message = _json_body(response).get("message")
    return message if isinstance(message, str) and message else None


class HttpRegistrationGateway:
    """
    Implements RegistrationGateway protocol via httpx.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, client: httpx.AsyncClient, path: str = DEFAULT_REGISTER_PATH) -> None:
        """
        Initialize gateway with a shared HTTP client.

        Args:
            client: AsyncClient bound to the remote API base URL
            path: Registration endpoint path
        """
        self._client = client
        self._path = path

    async def register(self, payload: RegistrationPayload) -> RegistrationResponse:
        """
        POST the registration payload as JSON.

        Raises:
            RegistrationRejected: On transport error or non-2xx status
        """
        try:
            response = await self._client.post(self._path, json=payload.to_wire())
        except httpx.HTTPError as exc:
            logger.warning("Registration request failed: %s", exc)
            raise RegistrationRejected() from exc

        if response.is_error:
            raise RegistrationRejected(_error_message(response))

        body = _json_body(response)
        user = body.get("user")
        return RegistrationResponse(
            token=body.get("token") or None,
            user=user if isinstance(user, dict) else None,
        )


class HttpImageUploadGateway:
    """
    Implements ImageUploadGateway protocol via httpx multipart upload.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, client: httpx.AsyncClient, path: str = DEFAULT_UPLOAD_IMAGE_PATH) -> None:
        self._client = client
        self._path = path

    async def upload(self, image: ProfileImage) -> str | None:
        """
        POST the image as multipart form field "image".

        Returns:
            The "imageUrl" from the response body, or None if absent

        Raises:
            UploadFailed: On transport error or non-2xx status
        """
        files = {"image": (image.filename, image.data, image.content_type)}
        try:
            response = await self._client.post(self._path, files=files)
        except httpx.HTTPError as exc:
            logger.warning("Image upload request failed: %s", exc)
            raise UploadFailed() from exc

        if response.is_error:
            raise UploadFailed(_error_message(response))

        image_url = _json_body(response).get("imageUrl")
        return image_url if isinstance(image_url, str) and image_url else None
