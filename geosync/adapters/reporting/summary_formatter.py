"""Render a RunSummary as a plain-text report or a JSON-friendly dict."""

from __future__ import annotations

from dataclasses import asdict

from geosync.domain.entities.run_summary import RunSummary, ServiceOutcome

SEPARATOR = "---"


def _outcome_lines(outcome: ServiceOutcome, detail_label: str, detail: str | None) -> list[str]:
    return [
        f"Customer: {outcome.customer_name}",
        f"  Service ID: {outcome.service_id}",
        f"  Address: {outcome.address or 'N/A'}",
        f"  {detail_label}: {detail or 'N/A'}",
        SEPARATOR,
    ]


def format_summary(summary: RunSummary) -> str:
    """Human-readable report: counts, then updated and failed services."""
    if summary.aborted:
        return (
            "Failed to retrieve customer data. Please check your API Key, "
            f"Secret, and Splynx API URL.\n  Error: {summary.error}"
        )

    if summary.customers_seen == 0:
        return "No active customers found."

    title = "=== Summary (dry run) ===" if summary.dry_run else "=== Summary ==="
    lines = [
        title,
        f"Total active services processed: {summary.processed}",
        f"Services updated with coordinates: {summary.updated}",
        f"Services skipped: {summary.skipped}",
    ]

    if summary.updated_services:
        heading = (
            "=== Services That Would Be Updated ==="
            if summary.dry_run
            else "=== Services Successfully Updated ==="
        )
        lines += ["", heading]
        for outcome in summary.updated_services:
            lines += _outcome_lines(outcome, "Coordinates", outcome.coordinates)

    if summary.failed_services:
        lines += ["", "=== Services That Could Not Be Updated ==="]
        for outcome in summary.failed_services:
            lines += _outcome_lines(outcome, "Reason", outcome.reason)

    return "\n".join(lines)


def summary_to_dict(summary: RunSummary) -> dict:
    data = asdict(summary)
    data["failed"] = summary.failed
    return data
