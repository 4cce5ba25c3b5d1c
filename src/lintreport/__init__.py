"""LintReport — terminal reporting for lint results."""

__version__ = "0.1.0"
