"""
Tailoring request client.

Mediates one request/response cycle with the external tailoring backend:

    Idle/Success/Failed -> Loading -> Success | Failed

The backend base URL is injected at construction and never re-read. Every
error (blank input, non-2xx status, transport failure, unparseable body) is
caught here and turned into a Failed state; nothing propagates to callers.
"""

import logging
from typing import Callable, Optional

import httpx

from shared.schemas.tailor import (
    TailorRequest,
    TailorResult,
    InteractionState,
    Idle,
    Loading,
    Success,
    Failed,
)
from .exceptions import (
    TailorClientError,
    TailorValidationError,
    TailorTransportError,
    TailorParseError,
    ClipboardUnavailableError,
)

logger = logging.getLogger(__name__)

TAILOR_PATH = "/api/tailor"
DEFAULT_TIMEOUT = 60.0

MISSING_INPUT_MESSAGE = "Please paste both the resume and the job description."
GENERIC_ERROR_MESSAGE = "Something went wrong"

Clipboard = Callable[[str], None]


def build_tailor_request(
    resume: str,
    job_description: str,
    role_title: Optional[str] = None,
) -> TailorRequest:
    """
    Validate form input and build the request body.

    Raises:
        TailorValidationError: resume or job description is blank after trimming
    """
    if not (resume or "").strip() or not (job_description or "").strip():
        raise TailorValidationError(MISSING_INPUT_MESSAGE)
    return TailorRequest(
        resume_text=resume,
        job_description=job_description,
        role_title=role_title,
    )


class TailorClient:
    """
    Client for POST {backend_base}/api/tailor.

    Holds a single InteractionState. Submissions are not cancelled or
    de-duplicated: if two overlap, both requests go out and whichever
    response arrives last sets the final state.
    """

    def __init__(
        self,
        backend_base: str,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.backend_base = backend_base.rstrip("/")
        self._http_client = http_client
        self._timeout = timeout
        self.state: InteractionState = Idle()

    @property
    def endpoint(self) -> str:
        return f"{self.backend_base}{TAILOR_PATH}"

    async def submit(
        self,
        resume: str,
        job_description: str,
        role_title: Optional[str] = None,
    ) -> InteractionState:
        """
        Run one tailoring cycle and return the state it ended in.

        The returned state is the one produced by this call. With overlapping
        submissions self.state may already hold a later call's outcome.
        """
        # Clear any previous result or error before doing anything else
        self.state = Idle()

        try:
            request = build_tailor_request(resume, job_description, role_title)
        except TailorValidationError as e:
            logger.info("Tailor request rejected: missing resume or job description")
            final = Failed(message=str(e))
            self.state = final
            return final

        self.state = Loading()
        logger.info(
            f"Submitting tailor request to {self.endpoint} "
            f"(resume={len(request.resume_text)} chars, jd={len(request.job_description)} chars, "
            f"role_title={'set' if request.role_title else 'none'})"
        )

        try:
            result = await self._post(request)
        except TailorClientError as e:
            logger.warning(f"Tailor request failed: {type(e).__name__}: {e}")
            final = Failed(message=str(e) or GENERIC_ERROR_MESSAGE)
        else:
            logger.info(
                f"Tailor request succeeded: {len(result.matched_keywords)} matched, "
                f"{len(result.missing_but_referenced_keywords)} missing, {len(result.ats_tips)} tips"
            )
            final = Success(result=result)

        self.state = final
        return final

    async def _post(self, request: TailorRequest) -> TailorResult:
        """Issue exactly one POST. No retries."""
        if self._http_client is not None:
            return await self._send(self._http_client, request)

        async with httpx.AsyncClient(timeout=self._timeout, follow_redirects=True) as client:
            return await self._send(client, request)

    async def _send(self, client: httpx.AsyncClient, request: TailorRequest) -> TailorResult:
        try:
            response = await client.post(
                self.endpoint,
                json=request.to_payload(),
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            raise TailorTransportError(str(e)) from e

        if not response.is_success:
            # The error body is never interpreted, only the status code
            raise TailorTransportError(
                f"Request failed: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise TailorParseError(str(e)) from e

        return TailorResult.model_validate(data)


def copy_tailored_resume(state: InteractionState, clipboard: Clipboard) -> bool:
    """
    Copy the tailored resume text to the clipboard.

    No-op unless state is Success with a non-empty tailored_resume.

    Returns:
        True if the clipboard was written
    """
    if not isinstance(state, Success) or not state.result.tailored_resume:
        return False
    clipboard(state.result.tailored_resume)
    return True


def system_clipboard(text: str) -> None:
    """Write text to the OS clipboard."""
    # Lazy import: only the CLI's --copy needs it
    import pyperclip

    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardUnavailableError(str(e)) from e
