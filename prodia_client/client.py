"""Synchronous Prodia client."""

import logging
import time
from typing import Any, Callable, Mapping, Optional, Union

import httpx

from .config import ClientConfig, Settings
from .decoding import decode_job_response
from .encoding import build_headers, encode_job
from .models import JobOptions, JobPayload, JobResult, merge_job_options
from .retry import AttemptState, RetryCounters, retry_after_seconds, transition

logger = logging.getLogger(__name__)


class ProdiaClient:
    """
    Synchronous client for the Prodia inference API.

    Submitting a job blocks until the service returns the finished result,
    retrying on capacity (429) and transient errors as configured.

    Example:
        >>> with ProdiaClient(token="...") as client:
        ...     result = client.job(
        ...         {"type": "inference.flux.schnell.txt2img.v1", "config": {"prompt": "a cat"}},
        ...         {"accept": "image/jpeg"},
        ...     )
        ...     Path("cat.jpg").write_bytes(result.read())
    """

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        max_errors: Optional[int] = None,
        max_retries: Optional[int] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
        sleep: Callable[[float], Any] = time.sleep,
    ):
        """
        Initialize Prodia client.

        Arguments left as None fall back to the PRODIA_* environment
        variables, then to the built-in defaults.

        Args:
            token: Prodia API token
            base_url: Base URL of the API (e.g., "https://inference.prodia.com/v2")
            max_errors: Non-429 failures tolerated before giving up
            max_retries: 429 responses tolerated before giving up (None = unbounded)
            timeout: Request timeout in seconds
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
            sleep: Function used to pause between attempts

        Raises:
            ConfigurationError: If no token is configured
        """
        settings = Settings()
        self.config = ClientConfig.from_settings(
            settings,
            token=token,
            base_url=base_url,
            max_errors=max_errors,
            max_retries=max_retries,
        )
        self.client = httpx.Client(
            timeout=timeout if timeout is not None else settings.timeout,
            transport=transport,
        )
        self._sleep = sleep

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, *args):
        """Context manager exit."""
        self.close()

    def close(self):
        """Close the HTTP client."""
        self.client.close()

    def job(
        self,
        params: JobPayload,
        options: Union[JobOptions, Mapping[str, Any], None] = None,
    ) -> JobResult:
        """
        Submit a job and wait for its result.

        Args:
            params: Job payload, passed through unmodified
            options: Optional ``accept`` type and binary ``inputs``

        Returns:
            The decoded job and its output accessor

        Raises:
            CapacityError: If the service stayed at capacity past max_retries
            UserError: If the service rejected the job itself
            BadResponseError: If the service answered with another error status
            httpx.RequestError: If the transport fails

        Example:
            >>> with open("face.jpg", "rb") as f:
            ...     result = client.job(params, {"inputs": [f]})
        """
        options = merge_job_options(options)
        files = encode_job(params, options.inputs)
        headers = build_headers(self.config.token, options.accept)
        url = f"{self.config.base_url}/job"

        counters = RetryCounters()
        attempt = 0

        while True:
            attempt += 1
            response = self.client.post(url, headers=headers, files=files)
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
            self._sleep(delay)

        return decode_job_response(response)
