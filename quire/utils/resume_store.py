"""
Resume Record Store

Persists saved resumes as rows in a CSV file. Only the raw resume text is stored;
parsed Documents are always rebuilt from it.

Schema:
    resume_id (str): Unique identifier (PRIMARY KEY)
    title (str): User-facing resume title
    template (str): Template identifier ("classic" or "modern")
    content (str): Raw resume body text
    created_at (str): ISO 8601 timestamp of creation
    updated_at (str): ISO 8601 timestamp of last modification

Usage:
    from quire.utils.resume_store import ResumeStore

    store = ResumeStore()
    record = store.save("Jane Doe - Backend", content, template="modern")
    store.update(record.resume_id, content=new_content)
"""

import csv
import os
import shutil
import tempfile
import uuid
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv
from loguru import logger

from quire.contexts.templating.style import Template, coerce_enum
from quire.utils.timestamp import now_exact

load_dotenv()
RESUME_STORE = Path(os.getenv("RESUME_STORE", "outs/resume_store.csv"))
STORE_COLUMNS = ["resume_id", "title", "template", "content", "created_at", "updated_at"]


@dataclass
class ResumeRecord:
    """One saved resume."""

    resume_id: str
    title: str
    template: str
    content: str
    created_at: str
    updated_at: str


class ResumeStore:
    """CSV-backed store of saved resumes."""

    def __init__(self, path: Path = None):
        """
        Args:
            path: CSV file location (default: RESUME_STORE env variable)
        """
        self.path = Path(path) if path is not None else RESUME_STORE
        self._ensure_exists()

    def _ensure_exists(self) -> None:
        """Create store file with header if it doesn't exist."""
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", newline="", encoding="utf-8") as f:
                csv.writer(f).writerow(STORE_COLUMNS)

    def _read_rows(self) -> List[Dict[str, str]]:
        with open(self.path, "r", newline="", encoding="utf-8") as f:
            return [dict(row) for row in csv.DictReader(f)]

    def _write_rows(self, rows: List[Dict[str, str]]) -> None:
        # Write to temp file first (atomic write pattern)
        temp_fd, temp_path = tempfile.mkstemp(suffix=".csv", text=True)
        try:
            with os.fdopen(temp_fd, "w", newline="", encoding="utf-8") as f:
                writer = csv.DictWriter(f, fieldnames=STORE_COLUMNS)
                writer.writeheader()
                writer.writerows(rows)

            shutil.move(temp_path, self.path)
        except Exception:
            if os.path.exists(temp_path):
                os.unlink(temp_path)
            raise

    def save(self, title: str, content: str, template: str = Template.CLASSIC.value) -> ResumeRecord:
        """
        Store a new resume.

        Args:
            title: Resume title
            content: Raw resume body text
            template: Template identifier

        Returns:
            The stored record

        Raises:
            StyleConfigError: If template is unknown
        """
        template = coerce_enum(Template, template, "template").value
        timestamp = now_exact()
        record = ResumeRecord(
            resume_id=uuid.uuid4().hex,
            title=title,
            template=template,
            content=content,
            created_at=timestamp,
            updated_at=timestamp,
        )

        with open(self.path, "a", newline="", encoding="utf-8") as f:
            csv.DictWriter(f, fieldnames=STORE_COLUMNS).writerow(asdict(record))

        logger.debug(f"Saved resume {record.resume_id} ({title})")
        return record

    def get(self, resume_id: str) -> Optional[ResumeRecord]:
        """Record for an id, or None if not found."""
        for row in self._read_rows():
            if row["resume_id"] == resume_id:
                return ResumeRecord(**row)
        return None

    def list(self) -> List[ResumeRecord]:
        """All records, most recently updated first."""
        records = [ResumeRecord(**row) for row in self._read_rows()]
        return sorted(records, key=lambda record: record.updated_at, reverse=True)

    def update(
        self, resume_id: str, content: Optional[str] = None, title: Optional[str] = None
    ) -> Optional[ResumeRecord]:
        """
        Replace content and/or title of a stored resume.

        Returns:
            Updated record, or None if the id is unknown
        """
        rows = self._read_rows()
        updated = None
        for row in rows:
            if row["resume_id"] == resume_id:
                if content is not None:
                    row["content"] = content
                if title is not None:
                    row["title"] = title
                row["updated_at"] = now_exact()
                updated = ResumeRecord(**row)

        if updated is None:
            return None

        self._write_rows(rows)
        logger.debug(f"Updated resume {resume_id}")
        return updated

    def delete(self, resume_id: str) -> bool:
        """Remove a record. Returns False if the id is unknown."""
        rows = self._read_rows()
        remaining = [row for row in rows if row["resume_id"] != resume_id]
        if len(remaining) == len(rows):
            return False

        self._write_rows(remaining)
        logger.debug(f"Deleted resume {resume_id}")
        return True
