"""
Report executor - runs one report job end to end

Responsibilities:
1. Load report inputs from the data source (LOAD_DATA)
2. Lay out and save the document on a fresh surface (RENDER)
3. Record the outcome on the ReportJob and classify failures

Failure classes:
- DataLoadError: upstream fetch failed ("failed to load report data")
- PreconditionError: vacancy/candidates missing, nothing drawn
- ReportGenerationError: anything raised while drawing; the surface is
  discarded and no artifact is written

Test points:
- test_execute_success: artifact written, job succeeded
- test_execute_vacancy_not_found: precondition failure, no artifact
- test_execute_load_failure: DataLoadError recorded
- test_execute_draw_failure: generic generation error
"""

from __future__ import annotations

import logging
import uuid
from enum import Enum
from pathlib import Path
from typing import Callable

from ..config import ReportSpec, get_config, load_spec
from ..interfaces import (
    DataLoadError,
    IDrawingSurface,
    IReportDataSource,
    ShortlistReportError,
)
from ..layout import PageGeometry, PdfSurface, ReportDocumentBuilder
from ..models import ReportContext, ReportJob
from ..sources.selection import LOAD_FAILED_MESSAGE

logger = logging.getLogger(__name__)


class StageEnum(str, Enum):
    """Report job stages"""
    LOAD_DATA = "LOAD_DATA"
    RENDER = "RENDER"


class ReportExecutor:
    """Report job executor"""

    def __init__(
        self,
        source: IReportDataSource,
        output_dir: Path | None = None,
        spec: ReportSpec | None = None,
        surface_factory: Callable[[], IDrawingSurface] | None = None,
    ):
        self.config = get_config()
        self.source = source
        self.spec = spec or load_spec()
        self.output_dir = Path(output_dir) if output_dir else self.config.output.output_dir
        self.surface_factory = surface_factory or self._default_surface

    def create_job(self, item_number: str) -> ReportJob:
        return ReportJob(job_id=str(uuid.uuid4()), item_number=item_number)

    def execute(self, job: ReportJob) -> Path:
        """Execute a job; raises the classified error on failure"""
        job.mark_running(StageEnum.LOAD_DATA.value)
        logger.info(f"[{job.job_id}] start stage: {StageEnum.LOAD_DATA.value} ({job.item_number})")

        try:
            ctx = self._stage_load(job)

            job.progress.stage = StageEnum.RENDER.value
            logger.info(f"[{job.job_id}] start stage: {StageEnum.RENDER.value}")
            surface = self.surface_factory()
            builder = ReportDocumentBuilder(
                surface,
                spec=self.spec,
                geometry=PageGeometry(
                    width=surface.page_width,
                    height=surface.page_height,
                    margin=self.config.page.margin,
                ),
                font_family=self.config.page.font_family,
            )
            pdf_path = builder.generate(ctx)

        except ShortlistReportError as e:
            logger.error(f"[{job.job_id}] stage failed {job.progress.stage}: {e}")
            job.mark_failed(str(e))
            job.progress.message = str(e)
            raise

        job.mark_succeeded(pdf_path, surface.page_count())
        job.progress.message = f"saved {pdf_path.name}"
        logger.info(f"[{job.job_id}] report saved: {pdf_path} ({job.page_count} pages)")
        return pdf_path

    def _stage_load(self, job: ReportJob) -> ReportContext:
        try:
            return self.source.load(job.item_number)
        except ShortlistReportError:
            raise
        except Exception as e:
            logger.exception(f"[{job.job_id}] unexpected data source failure")
            raise DataLoadError(LOAD_FAILED_MESSAGE) from e

    def _default_surface(self) -> IDrawingSurface:
        return PdfSurface(
            page_width=self.config.page.width,
            page_height=self.config.page.height,
            output_dir=self.output_dir,
        )
