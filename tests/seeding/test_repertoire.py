from __future__ import annotations

import re
from unittest.mock import MagicMock

from pypdf import PdfWriter
from pypdf.generic import DecodedStreamObject, DictionaryObject, NameObject

from mpa_judge.models.repertoire import RepertoireEntry
from mpa_judge.seeding.repertoire import (
    build_doc_id,
    build_repertoire_doc,
    dedupe_entries,
    extract_tags,
    normalize_year,
    parse_lines,
    parse_pdf,
    parse_rows,
    seed_repertoire,
    write_repertoire,
)


def test_build_doc_id_is_stable_and_bounded() -> None:
    entry = RepertoireEntry(grade="III", title="Chorale and Shaker Dance", composer="John Zdechlik")

    doc_id = build_doc_id(entry)

    assert doc_id == build_doc_id(RepertoireEntry(grade="III", title="Chorale and Shaker Dance", composer="John Zdechlik"))
    assert doc_id.startswith("III_chorale-and-shaker-dance_john-zdechlik_")
    assert re.fullmatch(r"[0-9a-f]{12}", doc_id.rsplit("_", 1)[1])

    long_entry = RepertoireEntry(grade="V", title="A" * 80, composer="!!!")
    _, title_slug, composer_slug, _ = build_doc_id(long_entry).split("_")
    assert len(title_slug) == 40
    assert composer_slug == "composer"


def test_extract_tags() -> None:
    assert extract_tags("Underrepresented composer", "") == ["Underrepresented"]
    assert extract_tags("NC Composer/Arranger", "") == ["NC Composer/Arranger"]
    assert extract_tags("", "nc composer and arranger") == ["NC Composer/Arranger"]
    assert extract_tags("NC composer", "") == ["NC Composer"]
    assert extract_tags("", "") == []


def test_normalize_year() -> None:
    assert normalize_year(2019) == 2019
    assert normalize_year("2019.0") == 2019
    assert normalize_year(" 19 ") == "19"
    assert normalize_year("n/a") == "n/a"
    assert normalize_year(None) == ""


def test_parse_lines_splits_columns_and_continues_instructions() -> None:
    lines = [
        "Grade  Title  Composer",
        "II  Little Suite  Jane Doe  Pub Co  Active  12345  2019  Play mvt 1",
        "   and mvt 2, NC Composer",
        "",
        "IV  Second Piece  John Roe",
        "VI",
    ]

    entries = parse_lines(lines)

    assert [e.grade for e in entries] == ["II", "IV"]
    first = entries[0]
    assert first.title == "Little Suite"
    assert first.composer == "Jane Doe"
    assert first.distributor_publisher == "Pub Co"
    assert first.status == "Active"
    assert first.supplier_item_no == "12345"
    assert first.year_added == "2019"
    assert first.special_instructions == "Play mvt 1 and mvt 2, NC Composer"
    assert first.tags == []
    assert entries[1].special_instructions == ""


def test_parse_rows_finds_header_and_skips_incomplete_rows() -> None:
    rows = [
        ["NCBA MPA List", "", ""],
        ["Grade", "Title", "Composer", "Distributor - Publisher", "Status", "Supplier ID/Item No.", "Year Added", "Special Instructions", "Composer Into"],
        ["I", "  First   Light ", "A. Writer", "Pub", "", "X1", 2021.0, "Underrepresented", ""],
        ["", "Missing grade", "B", "", "", "", "", "", ""],
        ["II", "Second", "C. Writer", "", "NC Composer", "", "", "", "NC composer and arranger"],
    ]

    entries = parse_rows(rows)

    assert [(e.grade, e.title) for e in entries] == [("I", "First Light"), ("II", "Second")]
    assert entries[0].distributor_publisher == "Pub"
    assert entries[0].supplier_item_no == "X1"
    assert entries[0].tags == ["Underrepresented"]
    assert entries[1].special_instructions == "NC composer and arranger"
    assert entries[1].tags == ["NC Composer/Arranger"]


def test_dedupe_entries_is_case_insensitive_first_wins() -> None:
    a = RepertoireEntry(grade="I", title="Song", composer="Smith", status="first")
    b = RepertoireEntry(grade="I", title="SONG", composer="smith", status="second")
    c = RepertoireEntry(grade="I", title="", composer="Nobody")

    assert dedupe_entries([a, b, c]) == [a]


def test_build_repertoire_doc_fields() -> None:
    entry = RepertoireEntry(grade="III", title="Big  Piece", composer="Some One", year_added="2018", tags=["NC Composer"])

    doc = build_repertoire_doc(entry)

    assert doc["title"] == "Big Piece"
    assert doc["titleLower"] == "big piece"
    assert doc["composerLower"] == "some one"
    assert doc["yearAdded"] == 2018
    assert doc["tags"] == ["NC Composer"]


def test_write_repertoire_commits_full_batches_and_remainder() -> None:
    db = MagicMock()
    batches = [MagicMock(), MagicMock(), MagicMock()]
    db.batch.side_effect = batches
    entries = [RepertoireEntry(grade="I", title=f"Piece {i}", composer="X") for i in range(5)]

    written, commits = write_repertoire(db, entries, batch_limit=2)

    assert (written, commits) == (5, 3)
    db.collection.assert_called_once_with("mpaRepertoire")
    assert [b.set.call_count for b in batches] == [2, 2, 1]
    for b in batches:
        b.commit.assert_called_once()


def test_seed_repertoire_summary_counts_before_and_after_dedupe() -> None:
    db = MagicMock()
    parsed = [
        RepertoireEntry(grade="I", title="Song", composer="Smith"),
        RepertoireEntry(grade="I", title="song", composer="SMITH"),
    ]

    summary = seed_repertoire(db, parsed)

    assert summary.parsed == 2
    assert summary.written == 1
    assert summary.batches == 1


def _write_table_pdf(path, rows: list[list[tuple[int, str]]]) -> None:
    writer = PdfWriter()
    page = writer.add_blank_page(width=612, height=792)
    helvetica = DictionaryObject(
        {
            NameObject("/Type"): NameObject("/Font"),
            NameObject("/Subtype"): NameObject("/Type1"),
            NameObject("/BaseFont"): NameObject("/Helvetica"),
        }
    )
    page[NameObject("/Resources")] = DictionaryObject(
        {NameObject("/Font"): DictionaryObject({NameObject("/F1"): helvetica})}
    )
    ops = []
    y = 700
    for row in rows:
        for x, text in row:
            ops.append(f"BT /F1 10 Tf {x} {y} Td ({text}) Tj ET")
        y -= 14
    content = DecodedStreamObject()
    content.set_data("\n".join(ops).encode("latin-1"))
    page.replace_contents(content)
    writer.write(path)


def test_parse_pdf_keeps_columns_of_a_table_row(tmp_path) -> None:
    path = tmp_path / "list.pdf"
    _write_table_pdf(
        path,
        [
            [(40, "II"), (90, "Little Suite"), (260, "Jane Doe"), (400, "Pub Co"), (520, "Active")],
            [(40, "IV"), (90, "Second Piece"), (260, "John Roe")],
        ],
    )

    entries = parse_pdf(path)

    assert [(e.grade, e.title, e.composer) for e in entries] == [
        ("II", "Little Suite", "Jane Doe"),
        ("IV", "Second Piece", "John Roe"),
    ]
    assert entries[0].distributor_publisher == "Pub Co"
    assert entries[0].status == "Active"
