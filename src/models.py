from dataclasses import asdict, dataclass, field
from typing import List


@dataclass(frozen=True)
class ScrapedData:
    title: str = ""
    description: str = ""
    links: List[str] = field(default_factory=list)
    headings: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)
