"""Daily and monthly summary endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from calorie_tracker.api.schemas import DailySummaryModel

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

router = APIRouter(tags=["summaries"])


@router.get("/daily-summary/{user_id}/{summary_date}")
def daily_summary(
    user_id: str, summary_date: str, request: Request
) -> dict[str, object]:
    """Return the day's summary, or zeros when nothing was logged."""
    container: AppContainer = request.app.state.container
    summary = container.daily_summary_service.get_daily(user_id, summary_date)
    return {
        "success": True,
        "summary": DailySummaryModel.from_domain(summary).to_json(),
    }


@router.get("/monthly-summary/{user_id}/{year}/{month}")
def monthly_summary(
    user_id: str, year: str, month: str, request: Request
) -> dict[str, object]:
    """Return the daily summaries recorded in a month."""
    container: AppContainer = request.app.state.container
    summaries = container.monthly_summary_service.get_monthly(user_id, year, month)
    return {
        "success": True,
        "summaries": [
            DailySummaryModel.from_domain(summary).to_json() for summary in summaries
        ],
    }
