from dataclasses import dataclass
from datetime import datetime


@dataclass
class SweepResult:
    deleted_count: int
    scanned_count: int
    skipped_count: int
    cutoff: datetime

    def to_payload(self) -> dict:
        return {
            "deletedCount": self.deleted_count,
            "scannedCount": self.scanned_count,
            "skippedCount": self.skipped_count,
            "cutoff": self.cutoff.isoformat(),
        }
