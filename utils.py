import json
import re
from typing import Any, Dict, List, Tuple

from errors import IncompleteResponseError, UnparsableResponseError

_FENCE_RE = re.compile(r"```json|```")


def strip_code_fences(text: str) -> str:
    """Remove ```json / ``` markers wherever they appear and trim."""
    return _FENCE_RE.sub("", text).strip()


def parse_model_json(raw: str) -> Dict[str, Any]:
    """
    Two-stage parse of the model output: canonical JSON first, then a single
    retry after stripping code fences. No further fallback.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        try:
            data = json.loads(strip_code_fences(raw))
        except json.JSONDecodeError as e:
            raise UnparsableResponseError() from e
    if not isinstance(data, dict):
        raise UnparsableResponseError()
    return data


def ensure_game_payload(data: Dict[str, Any]) -> Tuple[str, str]:
    """
    Validate the parsed JSON payload from the model and extract (reply, html).
    Both must be non-empty strings.
    """
    reply = data.get("reply")
    html = data.get("html")
    if not isinstance(reply, str) or not reply or not isinstance(html, str) or not html:
        raise IncompleteResponseError()
    return reply, html


def self_containment_issues(html: str) -> List[str]:
    """
    Heuristic checks that the document is complete and offline-capable.
    Returns human-readable problems; an empty list means nothing looked off.
    """
    issues = []
    low = html.lower()
    if "<html" not in low or "</html>" not in low:
        issues.append("not a complete <html> document")
    if "<script" not in low:
        issues.append("no <script> block")
    if re.search(r"https?://|@import|<link[^>]+rel=['\"]stylesheet", low):
        issues.append("references external resources")
    return issues
