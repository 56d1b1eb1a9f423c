"""Answer normalization for comparison."""
import re
from typing import Optional

_WHITESPACE_RE = re.compile(r"\s+")


def normalize(text: Optional[str]) -> str:
    """Lowercase, collapse runs of whitespace to one space and strip. None becomes ""."""
    return _WHITESPACE_RE.sub(" ", (text or "").lower()).strip()
