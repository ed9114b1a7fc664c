from pathlib import Path

from narrato.narration.exceptions import RewriteError

_PROMPTS_DIR = Path(__file__).parent / "prompts"
_REQUIRED_FIELDS = ("{audience}", "{slide_text}")


def load_prompt_template(path: Path | None = None) -> str:
    """Read the narration prompt and check that it can be rendered.

    Args:
        path: Custom template file. Defaults to the bundled narration_prompt.txt.

    Raises:
        RewriteError: if the file cannot be read or lacks a placeholder.
    """
    source = path or _PROMPTS_DIR / "narration_prompt.txt"
    try:
        template = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise RewriteError(f"Failed to load prompt template: {exc}") from exc
    missing = [field for field in _REQUIRED_FIELDS if field not in template]
    if missing:
        raise RewriteError(f"Prompt template {source.name} is missing {', '.join(missing)}")
    return template


def render_prompt(template: str, audience: str, slide_text: str) -> str:
    return template.format(audience=audience, slide_text=slide_text)
