# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: UDLGuideline
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class UDLGuideline:
    """One guideline page from the UDL knowledge base corpus."""
    url: str
    title: str
    content: str
    source: Optional[str] = None
    principle: Optional[str] = None
    guideline_number: Optional[str] = None
    guideline_name: Optional[str] = None
    sub_guideline: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "UDLGuideline":
        def _opt(key: str) -> Optional[str]:
            value = raw.get(key)
            return None if value is None else str(value)

        return cls(
            url=str(raw.get("url") or ""),
            title=str(raw.get("title") or ""),
            content=str(raw.get("content") or ""),
            source=_opt("source"),
            principle=_opt("principle"),
            guideline_number=_opt("guideline_number"),
            guideline_name=_opt("guideline_name"),
            sub_guideline=_opt("sub_guideline"),
        )

    def has_structured_metadata(self) -> bool:
        return bool(
            self.principle
            or self.guideline_number
            or self.guideline_name
            or self.sub_guideline
        )
