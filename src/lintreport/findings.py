"""Load findings produced by an external lint engine from JSON."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

from lintreport.models import Finding, Status

logger = logging.getLogger(__name__)


def load_findings(path: str | Path) -> list[Finding]:
    """Load findings from a file path, or stdin when ``path`` is ``-``."""
    if str(path) == "-":
        text = sys.stdin.read()
    else:
        text = Path(path).read_text(encoding="utf-8")
    return load_findings_from_string(text)


def load_findings_from_string(text: str) -> list[Finding]:
    """Parse a JSON array of finding objects, or JSON Lines."""
    stripped = text.strip()
    if not stripped:
        return []

    if stripped.startswith("["):
        try:
            records = json.loads(stripped)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid findings JSON: {e}") from e
    else:
        records = []
        for lineno, raw in enumerate(stripped.splitlines(), 1):
            if not raw.strip():
                continue
            try:
                records.append(json.loads(raw))
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid findings JSON on line {lineno}: {e}") from e

    findings = [_parse_finding(r, i) for i, r in enumerate(records, 1)]
    logger.debug("Loaded %d findings", len(findings))
    return findings


def _parse_finding(record: object, index: int) -> Finding:
    if not isinstance(record, dict):
        raise ValueError(f"Finding #{index} must be a JSON object")

    filename = record.get("filename", record.get("file"))
    if not filename:
        raise ValueError(f"Finding #{index} has no filename")

    status = record.get("status", "error")
    return Finding(
        status=Status.parse(str(status)),
        filename=str(filename),
        line=record.get("line", 0),
        message=str(record.get("message", record.get("result", "")) or ""),
    )
