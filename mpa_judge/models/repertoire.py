from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class RepertoireEntry:
    grade: str
    title: str = ""
    composer: str = ""
    distributor_publisher: str = ""
    status: str = ""
    supplier_item_no: str = ""
    year_added: Any = ""
    special_instructions: str = ""
    tags: list[str] = field(default_factory=list)

    @property
    def dedupe_key(self) -> str:
        return f"{self.grade}|{self.title}|{self.composer}".lower()
