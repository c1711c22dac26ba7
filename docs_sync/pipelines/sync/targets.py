"""Remote sources mirrored into packages/."""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

RAW_BASE_URL = "https://raw.githubusercontent.com/bunary-dev"


@dataclass(frozen=True)
class SyncTarget:
    """A package README to mirror locally."""

    group: str  # repository name
    output_file_name: str
    source_url: str


def _readme(group: str) -> SyncTarget:
    return SyncTarget(
        group=group,
        output_file_name=f"{group}.md",
        source_url=f"{RAW_BASE_URL}/{group}/main/README.md",
    )


SYNC_TARGETS: List[SyncTarget] = [
    _readme("core"),
    _readme("http"),
    _readme("orm"),
    _readme("auth"),
    _readme("cli"),
]


def select_targets(
    groups: Optional[Iterable[str]] = None, targets: Optional[Sequence[SyncTarget]] = None
) -> List[SyncTarget]:
    """Return the targets for ``groups`` in list order (all targets when empty).

    Raises:
        ValueError: If a requested group is not configured
    """
    available = list(SYNC_TARGETS if targets is None else targets)
    if not groups:
        return available

    wanted = list(groups)
    known = {t.group for t in available}
    unknown = [g for g in wanted if g not in known]
    if unknown:
        raise ValueError(f"Unknown sync target(s): {', '.join(unknown)}")

    return [t for t in available if t.group in wanted]
