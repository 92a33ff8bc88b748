from dataclasses import dataclass, field
from typing import List


@dataclass
class Option:
    """A named, ordered list of values such as Color: [Black, White]."""

    id: str
    name: str = ""
    values: List[str] = field(default_factory=lambda: [""])

    def to_dict(self):
        return {"id": self.id, "name": self.name, "values": list(self.values)}

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            values=[str(v) for v in data.get("values", [""])],
        )

    def __repr__(self):
        return f"<Option {self.name}: {', '.join(self.values)}>"
