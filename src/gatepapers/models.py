"""Link and result types passed between the pipeline stages."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

DOWNLOADED = "downloaded"
SKIPPED = "skipped"
FAILED = "failed"


@dataclass(frozen=True)
class CandidateLink:
    """Hyperlink found on a source page, before filtering."""

    href: str
    text: str
    base_url: str


@dataclass(frozen=True)
class DownloadTarget:
    """Absolute document URL and the file name it is saved under."""

    url: str
    file_name: str


@dataclass
class PageResult:
    """Outcome of fetching and scanning one source page."""

    url: str
    ok: bool
    links: List[CandidateLink] = field(default_factory=list)
    error: Optional[str] = None


@dataclass
class DownloadResult:
    """Outcome of one download attempt."""

    url: str
    file_name: Optional[str]
    status: str
    error: Optional[str] = None


@dataclass
class RunReport:
    """Everything that happened during a run."""

    output_dir: Path
    pages: List[PageResult] = field(default_factory=list)
    downloads: List[DownloadResult] = field(default_factory=list)
    used_manual_only: bool = False

    def _with_status(self, status: str) -> List[DownloadResult]:
        return [result for result in self.downloads if result.status == status]

    @property
    def downloaded(self) -> List[DownloadResult]:
        return self._with_status(DOWNLOADED)

    @property
    def skipped(self) -> List[DownloadResult]:
        return self._with_status(SKIPPED)

    @property
    def failed(self) -> List[DownloadResult]:
        return self._with_status(FAILED)

    @property
    def failed_pages(self) -> List[PageResult]:
        return [page for page in self.pages if not page.ok]

    def summary(self) -> str:
        return (
            f"{len(self.downloaded)} downloaded, {len(self.skipped)} skipped, "
            f"{len(self.failed)} failed ({len(self.failed_pages)}/{len(self.pages)} pages unreachable)"
        )
