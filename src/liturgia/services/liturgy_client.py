"""HTTP client for the daily liturgy service."""

from datetime import date
from typing import Optional

import httpx

from liturgia.logging_config import get_logger
from liturgia.models import LiturgyDocument, MalformedLiturgyError

logger = get_logger(__name__)

DEFAULT_API_URL = "https://liturgia.up.railway.app/"


class LiturgyClientError(Exception):
    """Error fetching a liturgy from the liturgy service."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def build_params(value: date) -> dict[str, str]:
    """Build the query parameters for a liturgy request.

    The service resolves the liturgical year itself, so only the day and
    month are sent.

    Args:
        value: Calendar date

    Returns:
        Dictionary with zero-padded "dia" and "mes"
    """
    return {"dia": f"{value.day:02d}", "mes": f"{value.month:02d}"}


class LiturgyClient:
    """HTTP client for the liturgy service.

    Attributes:
        base_url: Base URL of the liturgy service
        timeout: Request timeout in seconds (None waits indefinitely)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the liturgy client.

        Args:
            base_url: Base URL of the liturgy service
            timeout: Request timeout in seconds (None disables the timeout)
            transport: Optional httpx transport, used by tests
        """
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout
        self._transport = transport

    async def fetch(self, value: date) -> LiturgyDocument:
        """Fetch the liturgy of a day.

        Args:
            value: Calendar date; it is forwarded as-is, the service
                decides what it accepts

        Returns:
            LiturgyDocument for the requested day

        Raises:
            LiturgyClientError: If the request fails, the service answers
                with an error status, or the body is not a liturgy
        """
        params = build_params(value)
        logger.info(f"Requesting liturgy: {self.base_url} {params}")

        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=self.timeout
            ) as client:
                response = await client.get(self.base_url, params=params)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Liturgy service returned error status: {e.response.status_code}")
            raise LiturgyClientError(
                f"Liturgy service error: {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.TimeoutException as e:
            logger.error("Liturgy service request timed out")
            raise LiturgyClientError("Liturgy service request timed out") from e
        except httpx.RequestError as e:
            logger.error(f"Liturgy service request failed: {e}")
            raise LiturgyClientError(f"Failed to connect to liturgy service: {e}") from e
        except ValueError as e:
            logger.error(f"Liturgy service returned a non-JSON body: {e}")
            raise LiturgyClientError(
                "Liturgy service returned an invalid response",
                status_code=response.status_code,
            ) from e

        try:
            document = LiturgyDocument.from_api(payload)
        except MalformedLiturgyError as e:
            logger.error(f"Liturgy service returned a malformed document: {e}")
            raise LiturgyClientError(
                f"Malformed liturgy document: {e}",
                status_code=response.status_code,
            ) from e

        logger.info(f"Liturgy received: {document.liturgy_name!r} ({document.liturgical_color})")
        return document
