"""
Parse the published MPA repertoire list and write it to `mpaRepertoire`.

Two source formats are supported: the XLSX workbook (preferred, columns are
named) and the PDF listing, whose extracted text is split into columns on runs
of two or more spaces.
"""

from __future__ import annotations

import hashlib
import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from openpyxl import load_workbook
from pypdf import PdfReader

from mpa_judge.models.constants import COLLECTIONS
from mpa_judge.models.repertoire import RepertoireEntry

logger = logging.getLogger(__name__)

FIRESTORE_BATCH_LIMIT = 500

_GRADE_RE = re.compile(r"^(VI|IV|V|III|II|I)\b")
_COLUMN_SPLIT_RE = re.compile(r"\s{2,}")
_WHITESPACE_RE = re.compile(r"\s+")
_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


@dataclass(frozen=True)
class RepertoireSeedSummary:
    parsed: int
    written: int
    batches: int


def normalize_whitespace(value: Any) -> str:
    if value is None:
        return ""
    return _WHITESPACE_RE.sub(" ", str(value)).strip()


def slugify(value: Any) -> str:
    return _NON_SLUG_RE.sub("-", normalize_whitespace(value).lower()).strip("-")


def build_doc_id(entry: RepertoireEntry) -> str:
    base = f"{entry.grade}|{entry.title}|{entry.composer}".lower()
    digest = hashlib.sha1(base.encode("utf-8")).hexdigest()[:12]
    title_slug = slugify(entry.title)[:40] or "title"
    composer_slug = slugify(entry.composer)[:30] or "composer"
    return f"{entry.grade}_{title_slug}_{composer_slug}_{digest}"


def extract_tags(special_instructions: str, status: str) -> list[str]:
    haystack = f"{special_instructions or ''} {status or ''}".lower()
    tags: list[str] = []
    if "underrepresented" in haystack:
        tags.append("Underrepresented")
    if "nc composer/arranger" in haystack or "nc composer and arranger" in haystack:
        tags.append("NC Composer/Arranger")
    elif "nc composer" in haystack:
        tags.append("NC Composer")
    return tags


def normalize_year(value: Any) -> int | str:
    trimmed = normalize_whitespace(value)
    if not trimmed:
        return ""
    if re.fullmatch(r"\d+(\.\d+)?", trimmed):
        rounded = int(float(trimmed))
        if len(str(rounded)) == 4:
            return rounded
    return trimmed


def parse_lines(lines: Iterable[str]) -> list[RepertoireEntry]:
    """
    Parse PDF text lines. A line starting with a roman-numeral grade opens a
    new entry; any other non-blank line continues the special instructions of
    the current entry.
    """

    entries: list[RepertoireEntry] = []
    current: RepertoireEntry | None = None

    for raw in lines:
        trimmed = str(raw or "").strip()
        if not trimmed:
            continue
        match = _GRADE_RE.match(trimmed)
        if match:
            if current is not None and current.title:
                entries.append(current)
            rest = trimmed[match.end() :].strip()
            columns = [c for c in (normalize_whitespace(p) for p in _COLUMN_SPLIT_RE.split(rest)) if c]
            padded = columns + [""] * max(0, 6 - len(columns))
            title, composer, publisher, status, supplier_no, year_added = padded[:6]
            current = RepertoireEntry(
                grade=match.group(1),
                title=title,
                composer=composer,
                distributor_publisher=publisher,
                status=status,
                supplier_item_no=supplier_no,
                year_added=year_added,
                special_instructions=normalize_whitespace(" ".join(columns[6:])),
            )
            current.tags = extract_tags(current.special_instructions, current.status)
            continue
        if current is not None:
            current.special_instructions = normalize_whitespace(f"{current.special_instructions} {trimmed}")

    if current is not None and current.title:
        entries.append(current)
    return entries


def normalize_header_key(value: Any) -> str:
    return _NON_SLUG_RE.sub(" ", normalize_whitespace(value).lower()).strip()


def _get_cell(row: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = row.get(key)
        if value is not None and str(value).strip() != "":
            return value
    return ""


def _is_header_row(row: Iterable[Any]) -> bool:
    keys = [normalize_header_key(cell) for cell in row]
    return "grade" in keys and any("title" in k for k in keys) and any("composer" in k for k in keys)


def parse_rows(rows: list[list[Any]]) -> list[RepertoireEntry]:
    """
    Parse spreadsheet rows (first sheet, cell values). The header row is the
    first one naming grade, title and composer columns, else the first row.
    """

    if not rows:
        return []
    header_index = next((i for i, row in enumerate(rows) if _is_header_row(row)), 0)
    headers = [normalize_header_key(cell) for cell in rows[header_index]]

    entries: list[RepertoireEntry] = []
    for row in rows[header_index + 1 :]:
        mapped = {header: row[i] if i < len(row) else "" for i, header in enumerate(headers) if header}
        grade = normalize_whitespace(_get_cell(mapped, "grade"))
        title = normalize_whitespace(_get_cell(mapped, "title"))
        if not grade or not title:
            continue
        special = normalize_whitespace(_get_cell(mapped, "special instructions", "special instruction"))
        composer_into = normalize_whitespace(_get_cell(mapped, "composer into"))
        status = normalize_whitespace(_get_cell(mapped, "status"))
        entry = RepertoireEntry(
            grade=grade,
            title=title,
            composer=normalize_whitespace(_get_cell(mapped, "composer")),
            distributor_publisher=normalize_whitespace(_get_cell(mapped, "distributor publisher")),
            status=status,
            supplier_item_no=normalize_whitespace(_get_cell(mapped, "supplier id item no", "supplier item no")),
            year_added=_get_cell(mapped, "year added"),
            special_instructions=normalize_whitespace(f"{special} {composer_into}"),
        )
        entry.tags = extract_tags(entry.special_instructions, entry.status)
        entries.append(entry)
    return entries


def parse_workbook_xlsx(path: Path) -> list[RepertoireEntry]:
    workbook = load_workbook(path, read_only=True, data_only=True)
    try:
        if not workbook.worksheets:
            return []
        sheet = workbook.worksheets[0]
        rows = [["" if cell is None else cell for cell in row] for row in sheet.iter_rows(values_only=True)]
    finally:
        workbook.close()
    return parse_rows(rows)


def parse_pdf(path: Path) -> list[RepertoireEntry]:
    # Layout mode keeps the gaps between table columns on a single line.
    reader = PdfReader(str(path))
    text = "\n".join(page.extract_text(extraction_mode="layout") or "" for page in reader.pages)
    return parse_lines(re.split(r"\r?\n", text))


def dedupe_entries(entries: Iterable[RepertoireEntry]) -> list[RepertoireEntry]:
    seen: set[str] = set()
    ordered: list[RepertoireEntry] = []
    for entry in entries:
        if not entry.title:
            continue
        key = entry.dedupe_key
        if key in seen:
            continue
        seen.add(key)
        ordered.append(entry)
    return ordered


def build_repertoire_doc(entry: RepertoireEntry) -> dict[str, Any]:
    title = normalize_whitespace(entry.title)
    composer = normalize_whitespace(entry.composer)
    return {
        "grade": entry.grade,
        "title": title,
        "titleLower": title.lower(),
        "composer": composer,
        "composerLower": composer.lower(),
        "distributorPublisher": normalize_whitespace(entry.distributor_publisher),
        "specialInstructions": normalize_whitespace(entry.special_instructions),
        "status": normalize_whitespace(entry.status),
        "supplierItemNo": normalize_whitespace(entry.supplier_item_no),
        "yearAdded": normalize_year(entry.year_added),
        "tags": list(entry.tags),
    }


def write_repertoire(
    db: Any,
    entries: Iterable[RepertoireEntry],
    *,
    batch_limit: int = FIRESTORE_BATCH_LIMIT,
) -> tuple[int, int]:
    """
    Overwrite one `mpaRepertoire` document per entry using batched writes.

    Returns (documents written, batches committed).
    """

    collection = db.collection(COLLECTIONS["repertoire"])
    batch = db.batch()
    pending = 0
    written = 0
    commits = 0
    for entry in entries:
        batch.set(collection.document(build_doc_id(entry)), build_repertoire_doc(entry))
        pending += 1
        written += 1
        if pending >= batch_limit:
            batch.commit()
            commits += 1
            logger.info("Committed %d repertoire documents", written)
            batch = db.batch()
            pending = 0
    if pending > 0:
        batch.commit()
        commits += 1
    return written, commits


def seed_repertoire(db: Any, parsed: list[RepertoireEntry]) -> RepertoireSeedSummary:
    deduped = dedupe_entries(parsed)
    written, batches = write_repertoire(db, deduped)
    return RepertoireSeedSummary(parsed=len(parsed), written=written, batches=batches)
