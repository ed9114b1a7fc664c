import argparse
import json
import sys
from pathlib import Path

from narrato import __version__
from narrato.config.settings import Settings
from narrato.logging.logger import Log
from narrato.pipeline.orchestrator import build_orchestrator
from narrato.rate_limiting.rate_limiter import FixedWindowRateLimiter
from narrato.service.models import NarrationResponse
from narrato.service.request_runner import NarrationRequestRunner


def build_runner(settings: Settings) -> NarrationRequestRunner:
    """Build a request runner around one process-wide rate limiter."""
    rate_limiter = FixedWindowRateLimiter.from_settings(settings)
    return NarrationRequestRunner(build_orchestrator(settings, rate_limiter), settings)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="narrato",
        description="Narrate a .docx, .pptx or .txt document for an audience.",
    )
    parser.add_argument("file", type=Path, help="document to narrate")
    parser.add_argument("--audience", required=True, help='e.g. "Students", "Executives"')
    parser.add_argument("--max-segments", type=int, default=None)
    parser.add_argument("--output", type=Path, default=None, help="write JSON here")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def _write_response(response: NarrationResponse, output: Path | None) -> None:
    payload = json.dumps(response.body, indent=2)
    if output is None:
        sys.stdout.write(payload + "\n")
    else:
        output.write_text(payload, encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> logging -> runner -> JSON response."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr if args.output is None else None)

    try:
        upload_bytes = args.file.read_bytes()
    except OSError as exc:
        Log.error(f"Cannot read {args.file}: {exc}")
        return 1

    runner = build_runner(settings)
    try:
        response = runner.run(
            upload_bytes,
            args.file.name,
            args.audience,
            max_segments=args.max_segments,
        )
    finally:
        runner.close()
    _write_response(response, args.output)
    return 0 if response.ok else 1


if __name__ == "__main__":
    sys.exit(main())
