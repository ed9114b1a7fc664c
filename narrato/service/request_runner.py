import threading

from narrato.config.settings import Settings
from narrato.logging.logger import Log
from narrato.pipeline.exceptions import PipelineCancelledError
from narrato.pipeline.orchestrator import Orchestrator
from narrato.segmentation.exceptions import EmptyContentError, UnsupportedFormatError
from narrato.segmentation.segmenter import format_from_filename
from narrato.service.models import NarrationResponse
from narrato.service.serializer import error_body, report_to_body
from narrato.service.upload_store import load_document, scoped_upload

STATUS_PAYLOAD_TOO_LARGE = 413
STATUS_CLIENT_CLOSED_REQUEST = 499


class NarrationRequestRunner:
    """Run one narration request: store upload -> orchestrate -> respond.

    Caller errors map to 400, oversized uploads to 413, cancellation to 499,
    anything else to 500.
    The stored upload is deleted regardless of outcome.
    """

    def __init__(self, orchestrator: Orchestrator, settings: Settings) -> None:
        self._orchestrator = orchestrator
        self._settings = settings

    def run(
        self,
        upload_bytes: bytes | None,
        filename: str | None,
        audience: str | None,
        max_segments: int | None = None,
        cancel_event: threading.Event | None = None,
    ) -> NarrationResponse:
        if upload_bytes is None or not filename:
            return NarrationResponse(400, error_body("No file uploaded."))
        if len(upload_bytes) > self._settings.max_upload_bytes:
            limit_mb = self._settings.max_upload_bytes / (1024 * 1024)
            Log.warning(f"Rejected '{filename}': {len(upload_bytes)} bytes exceeds the upload limit")
            return NarrationResponse(
                STATUS_PAYLOAD_TOO_LARGE,
                error_body(f"File too large. Maximum size is {limit_mb:g} MB."),
            )
        if not audience or not audience.strip():
            return NarrationResponse(400, error_body("Audience is required."))

        fmt = format_from_filename(filename)
        Log.info(f"Narration request for '{filename}' ({len(upload_bytes)} bytes)")
        try:
            with scoped_upload(
                upload_bytes,
                suffix=f".{fmt}" if fmt else "",
                tmp_dir=self._settings.upload_tmp_dir,
            ) as path:
                document = load_document(path, fmt)
                report = self._orchestrator.run(
                    document,
                    audience.strip(),
                    max_segments=max_segments,
                    cancel_event=cancel_event,
                )
        except (UnsupportedFormatError, EmptyContentError) as exc:
            Log.warning(f"Rejected '{filename}': {exc}")
            return NarrationResponse(400, error_body(str(exc)))
        except PipelineCancelledError as exc:
            Log.info(f"Request for '{filename}' cancelled: {exc}")
            return NarrationResponse(STATUS_CLIENT_CLOSED_REQUEST, error_body(str(exc)))
        except Exception as exc:
            Log.error(f"Error processing file '{filename}': {exc}")
            return NarrationResponse(500, error_body(str(exc) or "Error processing file"))
        return NarrationResponse(200, report_to_body(report))

    def close(self) -> None:
        self._orchestrator.close()
