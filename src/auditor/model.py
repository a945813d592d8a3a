from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from auditor.dom.core import Finding


class PageAnalysis(BaseModel):
    """
    Result of analysing one page: the FindingSet, the full findings and the
    optional keyword density. Built fresh per call, never persisted.
    """
    url: str
    findings: Dict[str, str] = Field(default_factory=dict)  # FindingSet: key -> message
    details: List[Finding] = Field(default_factory=list)

    keyword: Optional[str] = None
    keyword_density: Optional[float] = None

    # Content metrics
    word_count: int = 0
    raw_length: int = 0
    serialized_length: int = 0
    text_ratio: float = 0.0

    @property
    def critical_count(self) -> int:
        return sum(1 for f in self.details if f.severity == "CRITICAL")
