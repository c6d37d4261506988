from __future__ import annotations

from .model import BatchResult


def format_batch_error_report(result: BatchResult) -> str:
    """Operator-facing summary naming every failed unit so only those get resubmitted."""
    if result.success:
        return f"Alle {result.total_processed} Einträge erfolgreich verarbeitet."

    lines = [
        f"{result.success_count} von {result.total_processed} Einträgen erfolgreich.",
        "",
        "Fehler:",
    ]
    for failure in result.errors:
        lines.append(f"- {failure.label}: {failure.error}")
    return "\n".join(lines)
