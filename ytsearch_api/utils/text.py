import re


def clean_text(text: str) -> str:
    cleaned = re.sub(r"\s+", " ", text).strip()
    return cleaned


def join_runs(node: dict | None) -> str:
    """Flatten a YouTube text node ({"simpleText": ...} or {"runs": [...]})."""
    if not node:
        return ""
    if "simpleText" in node:
        return clean_text(str(node["simpleText"]))
    runs = node.get("runs") or []
    return clean_text("".join(str(run.get("text", "")) for run in runs))


def parse_count(text: str) -> int:
    digits = re.sub(r"\D", "", text or "")
    return int(digits) if digits else 0
