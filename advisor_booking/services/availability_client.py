"""Client for the upstream advisor availability source."""

import logging

import httpx

from advisor_booking.core import config
from advisor_booking.models.availability import RawAvailability

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """The availability source could not be read."""

    def __init__(self, status_text: str) -> None:
        super().__init__(f'Response error {status_text}')
        self.status_text = status_text


class AvailabilityClient:
    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url or config.AVAILABILITY_URL
        self.timeout = timeout if timeout is not None else config.AVAILABILITY_TIMEOUT_SECONDS
        self._transport = transport

    async def fetch(self) -> RawAvailability:
        """Return the upstream day -> time -> advisor id mapping untouched.

        The payload shape is not checked; a malformed body flows on to the
        filter and grouper as-is.
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.get(self.url)
            except httpx.HTTPError as exc:
                logger.error('Request error %s', exc)
                raise UpstreamError(str(exc) or exc.__class__.__name__) from exc

        if not response.is_success:
            logger.error('Response error %s', response.reason_phrase)
            raise UpstreamError(response.reason_phrase)

        try:
            return response.json()
        except ValueError as exc:
            logger.error('Response error invalid JSON from %s', self.url)
            raise UpstreamError('invalid JSON') from exc
