from enum import Enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


class ServiceKind(str, Enum):
    GENERIC = "generic"
    COMPUTE_INSTANCE = "compute_instance"
    CONTAINER_ORCHESTRATION = "container_orchestration"


class SkipPolicy(str, Enum):
    SKIP = "skip"
    STRICT = "strict"


@dataclass(frozen=True)
class ResourceRecord:
    region: str
    service: str
    identifier: str
    product: Optional[str] = None
    arn: Optional[str] = None
    tags: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}), compare=False)


@dataclass(frozen=True)
class SkippedRecord:
    arn: str
    reason: str


@dataclass
class PaginationState:
    page_size: int
    token: Optional[str] = None   # None until the first page has been read
    page_index: int = 1
    done: bool = False

    def advance(self, next_token: Optional[str]) -> None:
        """Moves the cursor past the page that returned `next_token`."""
        self.page_index += 1
        if next_token:
            self.token = next_token
        else:
            self.done = True


@dataclass
class InventoryResult:
    region: str
    records: list[ResourceRecord] = field(default_factory=list)
    skipped: list[SkippedRecord] = field(default_factory=list)
    pages_fetched: int = 0

    @property
    def complete(self) -> bool:
        return not self.skipped
