"""
Echo service behind /message.
"""
from datetime import datetime, timezone
from typing import Optional

DEFAULT_NAME = "Unknown"


def resolve_name(query_name: Optional[str], body_text: Optional[str]) -> str:
    """Pick the name to echo: query param, then body text, then "Unknown"."""
    if query_name:
        return query_name
    if body_text and body_text.strip():
        return body_text.strip()
    return DEFAULT_NAME


def build_echo(name: str, now: Optional[datetime] = None) -> dict:
    now = now or datetime.now(timezone.utc)
    return {"name": name, "timestamp": now.isoformat()}
