"""Report routes."""

from fastapi import APIRouter

from apps.reports.handlers import run_report_analysis_action, summarize_ftfr_action
from responses import ActionResult

router = APIRouter(prefix="/reports", tags=["Reports"])

# POST /reports/ftfr-summary - Summarize follow-up reasons
router.post("/ftfr-summary", response_model=ActionResult)(summarize_ftfr_action)

# POST /reports/analysis - KPI analysis
router.post("/analysis", response_model=ActionResult)(run_report_analysis_action)
