"""
Statistics Routes - Read-only endpoints backing the statistics screens
"""
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from app.core.dependencies import get_statistics_service
from app.core.exceptions import HabitusException, InvalidPeriodError, InvalidRangeError
from app.models.statistics import StatisticsPeriod
from app.services.statistics import StatisticsService

router = APIRouter(prefix="/statistics", tags=["statistics"])


@router.get("/{user_id}/daily")
async def get_daily_aggregates(
    user_id: str,
    start_date: date = Query(..., description="First day (YYYY-MM-DD), inclusive"),
    end_date: date = Query(..., description="Last day (YYYY-MM-DD), inclusive"),
    service: StatisticsService = Depends(get_statistics_service)
):
    """Get expected and completed MIT/MET counts for each day of a range"""
    try:
        aggregates = service.get_daily_aggregates(user_id, start_date, end_date)
        return {
            "status": "success",
            "start_date": str(start_date),
            "end_date": str(end_date),
            "days": [a.model_dump(mode="json") for a in aggregates]
        }
    except InvalidRangeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except HabitusException as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{user_id}/streaks")
async def get_streaks(user_id: str, service: StatisticsService = Depends(get_statistics_service)):
    """Get current and best streak of fully completed MIT days"""
    try:
        return {"status": "success", **service.get_streaks(user_id).model_dump()}
    except HabitusException as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{user_id}/summary")
async def get_period_summary(
    user_id: str,
    period: str = Query(StatisticsPeriod.MONTH.value, description="week, month or year"),
    service: StatisticsService = Depends(get_statistics_service)
):
    """Get totals and success rate for a week, month or year"""
    try:
        return {"status": "success", **service.get_period_summary(user_id, period).model_dump(mode="json")}
    except InvalidPeriodError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except HabitusException as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{user_id}/evolution")
async def get_evolution(
    user_id: str,
    period: str = Query(StatisticsPeriod.MONTH.value, description="week, month or year"),
    service: StatisticsService = Depends(get_statistics_service)
):
    """Get per-day chart series for a week, month or year"""
    try:
        return {"status": "success", **service.get_evolution(user_id, period).model_dump(mode="json")}
    except InvalidPeriodError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except HabitusException as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{user_id}/overview")
async def get_user_statistics(user_id: str, service: StatisticsService = Depends(get_statistics_service)):
    """Get the profile overview (membership, streaks, last month's totals)"""
    try:
        return {"status": "success", "statistics": service.get_user_statistics(user_id).model_dump()}
    except HabitusException as e:
        raise HTTPException(status_code=500, detail=str(e))
