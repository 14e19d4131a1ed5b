from dataclasses import dataclass, field
from typing import List


@dataclass
class Task:
    id: str
    name: str
    type: str
    folder: str
    path: str
    references: List[str] = field(default_factory=list)

    def to_metadata(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "path": self.path,
        }
