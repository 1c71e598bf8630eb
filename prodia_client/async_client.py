"""Asynchronous Prodia client."""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

import httpx

from .config import ClientConfig, Settings
from .decoding import decode_job_response
from .encoding import build_headers, encode_job
from .models import JobOptions, JobPayload, JobResult, merge_job_options
from .retry import AttemptState, RetryCounters, retry_after_seconds, transition

logger = logging.getLogger(__name__)


class AsyncProdiaClient:
    """
    Asynchronous client for the Prodia inference API.

    Use this for concurrent submissions or in async applications. Each call
    to ``job`` keeps its own retry counters, so calls can be gathered freely.

    Example:
        >>> async with AsyncProdiaClient(token="...") as client:
        ...     result = await client.job({"type": "inference.flux.schnell.txt2img.v1", ...})
        ...     output = await result.aread()
    """

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        max_errors: Optional[int] = None,
        max_retries: Optional[int] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        """
        Initialize async Prodia client.

        Args:
            token: Prodia API token (defaults to env PRODIA_TOKEN)
            base_url: Base URL of the API
            max_errors: Non-429 failures tolerated before giving up
            max_retries: 429 responses tolerated before giving up (None = unbounded)
            timeout: Request timeout in seconds
            transport: Optional httpx async transport
            sleep: Coroutine function used to pause between attempts
        """
        settings = Settings()
        self.config = ClientConfig.from_settings(
            settings,
            token=token,
            base_url=base_url,
            max_errors=max_errors,
            max_retries=max_retries,
        )
        self.client = httpx.AsyncClient(
            timeout=timeout if timeout is not None else settings.timeout,
            transport=transport,
        )
        self._sleep = sleep

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args):
        """Async context manager exit."""
        await self.close()

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def job(
        self,
        params: JobPayload,
        options: Union[JobOptions, Mapping[str, Any], None] = None,
    ) -> JobResult:
        """Submit a job and wait for its result."""
        options = merge_job_options(options)
        files = encode_job(params, options.inputs)
        headers = build_headers(self.config.token, options.accept)
        url = f"{self.config.base_url}/job"

        counters = RetryCounters()
        attempt = 0

        while True:
            attempt += 1
            response = await self.client.post(url, headers=headers, files=files)
            logger.debug(f"POST {url} attempt {attempt}: {response.status_code}")

            state, counters = transition(
                response.status_code,
                counters,
                self.config.max_errors,
                self.config.max_retries,
            )
            if state is not AttemptState.ATTEMPTING:
                break

            delay = retry_after_seconds(response.headers)
            logger.info(
                f"Job attempt {attempt} returned {response.status_code}, "
                f"retrying in {delay}s (errors={counters.errors}, retries={counters.retries})"
            )
            await self._sleep(delay)

        return decode_job_response(response)
