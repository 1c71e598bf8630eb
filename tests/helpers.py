import json
from typing import Any, Dict, List, Optional

import httpx

BOUNDARY = "prodia-test-boundary"

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\xff\xfe\r\nbinary-tail"


def multipart_body(parts: List[tuple]) -> bytes:
    """Build a multipart/form-data body from (name, filename, content_type, data) tuples."""
    chunks = []
    for name, filename, content_type, data in parts:
        chunks.append(
            (
                f"--{BOUNDARY}\r\n"
                f'Content-Disposition: form-data; name="{name}"; filename="{filename}"\r\n'
                f"Content-Type: {content_type}\r\n"
                "\r\n"
            ).encode("utf-8")
            + data
            + b"\r\n"
        )
    chunks.append(f"--{BOUNDARY}--\r\n".encode("utf-8"))
    return b"".join(chunks)


def job_response(
    status_code: int = 200,
    job: Optional[Dict[str, Any]] = None,
    output: Optional[bytes] = PNG_BYTES,
    headers: Optional[Dict[str, str]] = None,
) -> httpx.Response:
    """A service response carrying a job part and, optionally, an output part."""
    parts = [("job", "job.json", "application/json", json.dumps(job or {"state": {"current": "completed"}}).encode())]
    if output is not None:
        parts.append(("output", "output.png", "image/png", output))

    return httpx.Response(
        status_code,
        headers={"Content-Type": f"multipart/form-data; boundary={BOUNDARY}", **(headers or {})},
        content=multipart_body(parts),
    )


def plain_response(status_code: int, headers: Optional[Dict[str, str]] = None) -> httpx.Response:
    return httpx.Response(status_code, headers=headers, text="nope")


class FakeService:
    """Replays a scripted list of responses; the last one repeats forever."""

    def __init__(self, *responses: httpx.Response):
        self.responses = list(responses)
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        template = self.responses[min(len(self.requests), len(self.responses)) - 1]
        return httpx.Response(
            template.status_code,
            headers=template.headers,
            content=template.content,
        )

    @property
    def attempts(self) -> int:
        return len(self.requests)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


class RecordingSleep:
    def __init__(self):
        self.delays: List[float] = []

    def __call__(self, delay: float) -> None:
        self.delays.append(delay)


class AsyncRecordingSleep(RecordingSleep):
    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)
