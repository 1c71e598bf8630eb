"""Pydantic models for Prodia job requests and results."""

from typing import Any, Callable, Dict, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, PrivateAttr

JobPayload = Dict[str, Any]

AcceptType = Literal[
    "application/json",
    "image/jpeg",
    "image/png",
    "image/webp",
    "multipart/form-data",
    "video/mp4",
]

DEFAULT_JOB_OPTIONS: Dict[str, Any] = {
    "accept": None,
}


class JobOptions(BaseModel):
    """Per-call options for a job submission."""
    accept: Optional[AcceptType] = None
    inputs: Optional[List[Any]] = None


class JobResult(BaseModel):
    """
    Decoded job returned by the service.

    The binary output is read on first access and cached, so repeated calls
    to ``read()`` return the same bytes without touching the response again.

    Example:
        >>> result = client.job({"type": "inference.flux.schnell.txt2img.v1", ...})
        >>> result.job["state"]
        >>> Path("cat.jpg").write_bytes(result.read())
    """
    job: Dict[str, Any]

    _read_output: Callable[[], bytes] = PrivateAttr()
    _output: Optional[bytes] = PrivateAttr(default=None)

    def __init__(self, job: Dict[str, Any], read_output: Callable[[], bytes], **data: Any):
        super().__init__(job=job, **data)
        self._read_output = read_output

    def read(self) -> bytes:
        """Return the job output bytes."""
        if self._output is None:
            self._output = self._read_output()
        return self._output

    async def aread(self) -> bytes:
        """Return the job output bytes (async variant)."""
        return self.read()


def merge_job_options(
    options: Union[JobOptions, Mapping[str, Any], None] = None,
) -> JobOptions:
    """
    Layer caller options over the defaults.

    The override is flat: a supplied key replaces the default value outright.

    Raises:
        pydantic.ValidationError: If an option has an unsupported value
    """
    if options is None:
        overrides: Dict[str, Any] = {}
    elif isinstance(options, JobOptions):
        overrides = {name: getattr(options, name) for name in options.model_fields_set}
    else:
        overrides = dict(options)

    return JobOptions(**{**DEFAULT_JOB_OPTIONS, **overrides})
