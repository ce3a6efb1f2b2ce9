import re

EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")


def extract_emails(text: str) -> list:
    """Return every non-overlapping email address in `text`, leftmost first."""
    if not text:
        return []
    return EMAIL_RE.findall(text)
