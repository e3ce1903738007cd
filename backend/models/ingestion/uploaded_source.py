from dataclasses import dataclass
from typing import Literal, Optional


SourceOrigin = Literal["upload", "speech"]


@dataclass
class UploadedSource:
    """
    One user-supplied input unit: a dropped file or a finalized speech transcript.
    Progress only reaches 100 once content has been decoded.
    """

    name: str
    size: int
    origin: SourceOrigin = "upload"
    progress: int = 0
    content: str = ""
    error: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return self.progress == 100

    def __repr__(self):
        return f"<UploadedSource(name='{self.name}', origin='{self.origin}', progress={self.progress})>"
