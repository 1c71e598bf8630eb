"""Request encoding for job submission."""

import json
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .models import JobPayload

INPUT_FIELD = "input"
JOB_FIELD = "job"

# The service does not accept an input content type yet, so every input is
# sent as a JPEG until it does.
DEFAULT_INPUT_FILENAME = "image.jpg"
DEFAULT_INPUT_CONTENT_TYPE = "image/jpeg"

JOB_FILENAME = "job.json"
JOB_CONTENT_TYPE = "application/json"

BASE_ACCEPT = "multipart/form-data"

FilePart = Tuple[str, Tuple[str, bytes, str]]


def _read_input(blob: Any) -> Tuple[str, bytes]:
    """Return (filename, content) for a single input blob."""
    if isinstance(blob, (bytes, bytearray, memoryview)):
        return DEFAULT_INPUT_FILENAME, bytes(blob)

    if isinstance(blob, Path):
        return blob.name, blob.read_bytes()

    if hasattr(blob, "read"):
        content = blob.read()
        if isinstance(content, str):
            raise TypeError("Input file objects must be opened in binary mode")
        name = getattr(blob, "name", None)
        filename = os.path.basename(name) if isinstance(name, str) and name else DEFAULT_INPUT_FILENAME
        return filename, bytes(content)

    raise TypeError(f"Unsupported input type: {type(blob).__name__}")


def encode_job(params: JobPayload, inputs: Optional[Iterable[Any]] = None) -> List[FilePart]:
    """
    Build the multipart parts for a job submission.

    Input parts come first, in the order given, followed by the JSON job part.
    Blobs are read into memory here so the same parts can be sent again on
    every attempt.

    Args:
        params: Job payload, serialized as-is
        inputs: Optional binary inputs (bytes, Path, or binary file objects)

    Returns:
        Parts in the ``files=`` form accepted by httpx
    """
    parts: List[FilePart] = []

    for blob in inputs or ():
        filename, content = _read_input(blob)
        parts.append((INPUT_FIELD, (filename, content, DEFAULT_INPUT_CONTENT_TYPE)))

    parts.append((
        JOB_FIELD,
        (JOB_FILENAME, json.dumps(params).encode("utf-8"), JOB_CONTENT_TYPE),
    ))
    return parts


def build_accept_header(accept: Optional[str] = None) -> str:
    """Multipart is always accepted; a requested output type is appended."""
    return "; ".join(value for value in (BASE_ACCEPT, accept) if value)


def build_headers(token: str, accept: Optional[str] = None) -> Dict[str, str]:
    return {
        "Authorization": f"Bearer {token}",
        "Accept": build_accept_header(accept),
    }


__all__ = [
    "encode_job",
    "build_accept_header",
    "build_headers",
]
