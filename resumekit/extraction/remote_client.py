import asyncio
from typing import Any

import httpx

from resumekit.extraction.base import BaseTextExtractor, ExtractionContext
from resumekit.extraction.cancellation import CancellationToken
from resumekit.extraction.exceptions import (
    AuthRequiredError,
    EmptyResultError,
    ExtractionTimeoutError,
    ServerError,
    UnreachableError,
)
from resumekit.extraction.models import UploadedDocument
from resumekit.logging.logger import Log


class RemoteExtractionClient(BaseTextExtractor):
    """Sends PDF uploads to the server-side extraction endpoint.

    The call races against a deadline timer. Both the timer and the caller
    trigger the same ``CancellationToken``; whichever fires first detaches the
    in-flight request and the call fails with ``ExtractionTimeoutError``.
    """

    UNREACHABLE_MESSAGE = (
        "Unable to reach the extraction server. "
        "Please check your connection and try again."
    )
    TIMEOUT_MESSAGE = "PDF extraction timed out. Please try again."

    def __init__(
        self,
        *,
        endpoint: str,
        api_key: str,
        timeout_seconds: float = 60,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._api_key = api_key
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    async def extract(self, document: UploadedDocument, context: ExtractionContext) -> str:
        credential = context.credential
        if credential is None or not credential.is_active():
            raise AuthRequiredError("Please sign in again to extract text from PDF files")
        token = context.cancel_token or CancellationToken()
        Log.info(f"Sending '{document.filename}' ({len(document.content)} bytes) for extraction")
        response = await self._send_with_deadline(document, credential.token, token)
        return self._parse_response(response)

    async def _send_with_deadline(
        self,
        document: UploadedDocument,
        access_token: str,
        token: CancellationToken,
    ) -> httpx.Response:
        if token.cancelled:
            raise ExtractionTimeoutError(self.TIMEOUT_MESSAGE)
        loop = asyncio.get_running_loop()
        timer = loop.call_later(self._timeout_seconds, token.cancel)
        request = asyncio.ensure_future(self._post(document, access_token))
        cancelled = asyncio.ensure_future(token.wait())
        try:
            done, _ = await asyncio.wait(
                {request, cancelled}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            timer.cancel()
            cancelled.cancel()
            if not request.done():
                request.cancel()
        if request not in done:
            await asyncio.gather(request, return_exceptions=True)
            Log.warning(f"Extraction of '{document.filename}' cancelled before completion")
            raise ExtractionTimeoutError(self.TIMEOUT_MESSAGE)
        return request.result()

    async def _post(self, document: UploadedDocument, access_token: str) -> httpx.Response:
        headers = {
            "Authorization": f"Bearer {access_token}",
            "apikey": self._api_key,
        }
        files = {
            "file": (
                document.filename or "upload.pdf",
                document.content,
                document.media_type or "application/pdf",
            )
        }
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self._timeout_seconds,
            ) as client:
                return await client.post(self._endpoint, headers=headers, files=files)
        except httpx.TimeoutException as exc:
            raise ExtractionTimeoutError(self.TIMEOUT_MESSAGE) from exc
        except httpx.NetworkError as exc:
            raise UnreachableError(self.UNREACHABLE_MESSAGE) from exc
        except httpx.HTTPError as exc:
            raise ServerError(
                "The extraction service returned an invalid response. Please try again."
            ) from exc

    def _parse_response(self, response: httpx.Response) -> str:
        payload = self._json_or_none(response)
        if not response.is_success:
            error = payload.get("error") if isinstance(payload, dict) else None
            if isinstance(error, str) and error:
                raise ServerError(error, status_code=response.status_code)
            raise ServerError(
                f"PDF extraction failed with status {response.status_code}",
                status_code=response.status_code,
            )
        text = payload.get("text") if isinstance(payload, dict) else None
        if not isinstance(text, str) or not text.strip():
            raise EmptyResultError(
                "No text could be extracted from the PDF. It may be a scanned image."
            )
        return text

    @staticmethod
    def _json_or_none(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None
