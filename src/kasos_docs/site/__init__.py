"""Documentation site build: assemble, extract, daily update.

Usage::

    from kasos_docs.site import Assembler, SiteRepository

    repo = SiteRepository(Path("docs"))
    result = Assembler(repo).build()
"""

from kasos_docs.site.assembler import Assembler, BuildResult
from kasos_docs.site.extractor import ExtractionResult, Extractor
from kasos_docs.site.order import CANONICAL_ORDER
from kasos_docs.site.regions import TaggedRegion, scan_tagged_regions
from kasos_docs.site.repository import SiteRepository
from kasos_docs.site.updater import DailyUpdater, UpdateReport

__all__ = [
    "Assembler",
    "BuildResult",
    "CANONICAL_ORDER",
    "DailyUpdater",
    "ExtractionResult",
    "Extractor",
    "SiteRepository",
    "TaggedRegion",
    "UpdateReport",
    "scan_tagged_regions",
]
