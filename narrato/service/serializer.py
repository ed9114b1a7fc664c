import base64

from narrato.pipeline.models import PipelineReport, SlideOutcome


def report_to_body(report: PipelineReport) -> dict[str, object]:
    """Convert a PipelineReport into the public response body."""
    return {
        "success": True,
        "slides": [_slide_to_dict(outcome) for outcome in report.outcomes],
        "totalSlides": len(report.outcomes),
        "totalOriginalSlides": report.total_available,
        "note": report.truncation_note,
    }


def error_body(message: str) -> dict[str, object]:
    return {"success": False, "error": message}


def _slide_to_dict(outcome: SlideOutcome) -> dict[str, object]:
    return {
        "slideNumber": outcome.slide_number,
        "originalText": outcome.original_text,
        "rewrittenText": outcome.rewritten_text,
        "audioBase64": base64.b64encode(outcome.audio.encoded_bytes).decode("ascii"),
        "audioMimeType": outcome.audio.mime_type,
        "usedFallback": outcome.used_fallback,
    }
