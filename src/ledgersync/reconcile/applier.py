#!/usr/bin/env python3
"""
Applier Protocol - Standard interface for replaying an apply plan.

Backends (direct API calls, import files for the web UI) implement this
protocol so the CLI can swap them without touching reconciliation logic.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from .planner import ApplyPlan


@dataclass
class ApplyResult:
    """What a backend did with a plan."""

    updated: list[str] = field(default_factory=list)  # Transaction ids moved (or listed) for a new date
    created: list[str] = field(default_factory=list)  # Import ids created (or written for import)
    duplicates: list[str] = field(default_factory=list)  # Import ids the destination already had
    artifacts: list[Path] = field(default_factory=list)  # Files written for manual replay
    dry_run: bool = False

    def summary_text(self) -> str:
        """One-line outcome; file backends report what they wrote, not what YNAB applied."""
        if self.artifacts:
            return (
                f"{len(self.updated)} date corrections and {len(self.created)} transactions "
                f"written for import, {len(self.artifacts)} files written"
            )

        prefix = "[DRY RUN] " if self.dry_run else ""
        return (
            f"{prefix}{len(self.updated)} dates corrected, {len(self.created)} created, "
            f"{len(self.duplicates)} duplicates skipped"
        )


class Applier(Protocol):
    """
    Protocol for backends that bring the destination in line with a plan.

    Implementations must apply date corrections before creations, one
    operation at a time.
    """

    def apply(self, plan: ApplyPlan) -> ApplyResult:
        """
        Apply every operation of the plan.

        Args:
            plan: Output of planner.plan()

        Returns:
            ApplyResult describing what was done
        """
        ...
