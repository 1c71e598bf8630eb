"""Response decoding for job submission."""

import json
import logging
from email import policy
from email.message import Message
from email.parser import BytesParser
from typing import Dict, Optional

import httpx

from .exceptions import (
    BadResponseError,
    CapacityError,
    OutputReadError,
    ResponseDecodeError,
    UserError,
)
from .models import JobResult
from .retry import CAPACITY_STATUS, is_success

logger = logging.getLogger(__name__)

JOB_PART = "job"
OUTPUT_PART = "output"


def parse_multipart(content_type: str, body: bytes) -> Dict[str, Message]:
    """
    Split a multipart/form-data body into its named parts.

    Returns an empty dict when the body is not multipart. When a name repeats,
    the first part wins.
    """
    if not content_type.lower().startswith("multipart/"):
        return {}

    header = f"Content-Type: {content_type}\r\n\r\n".encode("latin-1")
    message = BytesParser(policy=policy.HTTP).parsebytes(header + body)
    if not message.is_multipart():
        return {}

    parts: Dict[str, Message] = {}
    for part in message.iter_parts():
        name = part.get_param("name", header="content-disposition")
        if name and name not in parts:
            parts[name] = part
    return parts


def _part_reader(part: Optional[Message]):
    def read_output() -> bytes:
        if part is None:
            raise OutputReadError("Failed to read output")
        content = part.get_payload(decode=True)
        if not isinstance(content, bytes):
            raise OutputReadError("Failed to read output")
        return content

    return read_output


def decode_job_response(response: httpx.Response) -> JobResult:
    """
    Turn the final response of a submission into a JobResult.

    Raises:
        CapacityError: If the final attempt was rejected with 429
        UserError: If the job carries an ``error`` message
        BadResponseError: If the final status is not 2xx
        ResponseDecodeError: If a 2xx response has no usable job part
    """
    status = response.status_code

    if status == CAPACITY_STATUS:
        logger.warning("Job could not be scheduled: capacity retries exhausted")
        raise CapacityError("Unable to schedule the job with current token.")

    parts = parse_multipart(response.headers.get("content-type", ""), response.content)

    job_part = parts.get(JOB_PART)
    if job_part is not None:
        job = json.loads(job_part.get_payload(decode=True))
    elif is_success(status):
        raise ResponseDecodeError(f"Response {status} did not include a job part")
    else:
        job = {}

    if isinstance(job, dict) and isinstance(job.get("error"), str):
        raise UserError(job["error"])

    if not is_success(status):
        logger.warning(f"Job submission failed: {status} {response.reason_phrase}")
        raise BadResponseError(status, response.reason_phrase)

    if not isinstance(job, dict):
        raise ResponseDecodeError(f"Expected a JSON object job, got {type(job).__name__}")

    return JobResult(job=job, read_output=_part_reader(parts.get(OUTPUT_PART)))


__all__ = [
    "parse_multipart",
    "decode_job_response",
]
