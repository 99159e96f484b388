# api/pregnancy.py

from fastapi import APIRouter, HTTPException, Path
from typing import List, Optional
from models.pregnancy_schemas import (
    AppointmentSchedule,
    CalendarResponse,
    DueDateResponse,
    ExportData,
    ExportFormat,
    FetalDevelopment,
    GestationalAge,
    MonthFilter,
    PregnancySummary,
    Trimester,
    TrimesterInfo,
    TrimesterResponse,
)
from services.pregnancy_calculator import get_pregnancy_calculator
from services.month_filter_service import (
    build_month_filters,
    calculate_calendar_stats,
    filter_by_month,
    find_month_filter,
    generate_month_filters,
)
from services.export_service import build_export_data
from services import reference_data
from utils.date_utils import format_date, parse_local_date

router = APIRouter(prefix="/api/pregnancy", tags=["pregnancy"])


@router.get("/due-date", response_model=DueDateResponse)
async def get_due_date(lmp_date: str):
    """Estimated due date for an LMP date"""
    try:
        lmp = parse_local_date(lmp_date)
        due_date = get_pregnancy_calculator().calculate_due_date(lmp)

        return DueDateResponse(
            lmp_date=lmp,
            due_date=due_date,
            formatted_due_date=format_date(due_date)
        )

    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        print(f"❌ Error calculating due date: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/gestational-age", response_model=GestationalAge)
async def get_gestational_age(lmp_date: str, as_of: Optional[str] = None):
    """Gestational age on as_of (defaults to today)"""
    try:
        lmp = parse_local_date(lmp_date)
        current_date = parse_local_date(as_of)

        return get_pregnancy_calculator().calculate_gestational_age(lmp, current_date)

    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        print(f"❌ Error calculating gestational age: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/trimester/{weeks}", response_model=TrimesterResponse)
async def get_trimester(weeks: int = Path(..., ge=0)):
    """Trimester for a number of completed weeks"""
    return TrimesterResponse(
        weeks=weeks,
        trimester=get_pregnancy_calculator().get_trimester(weeks)
    )


@router.get("/calendar", response_model=CalendarResponse)
async def get_calendar(lmp_date: str, month: Optional[str] = None):
    """
    Full 280 day calendar, or only the days of one calendar month
    when month is given as YYYY-MM
    """
    try:
        lmp = parse_local_date(lmp_date)
        pregnancy_days = get_pregnancy_calculator().generate_pregnancy_calendar(lmp)

        month_filter = None
        if month:
            month_filter = find_month_filter(build_month_filters(pregnancy_days), month)
            if month_filter is None:
                raise HTTPException(
                    status_code=404,
                    detail=f"Month {month} is not part of this pregnancy"
                )
            pregnancy_days = filter_by_month(pregnancy_days, month_filter)

        return CalendarResponse(
            lmp_date=lmp,
            month_filter=month_filter,
            stats=calculate_calendar_stats(pregnancy_days),
            days=pregnancy_days
        )

    except HTTPException:
        raise
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        print(f"❌ Error generating calendar: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/summary", response_model=PregnancySummary)
async def get_summary(lmp_date: str, as_of: Optional[str] = None):
    """Current pregnancy status"""
    try:
        lmp = parse_local_date(lmp_date)
        current_date = parse_local_date(as_of)

        return get_pregnancy_calculator().generate_pregnancy_summary(lmp, current_date)

    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        print(f"❌ Error generating summary: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/month-filters", response_model=List[MonthFilter])
async def get_month_filters(lmp_date: str):
    try:
        return generate_month_filters(parse_local_date(lmp_date))

    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        print(f"❌ Error generating month filters: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/reference/development", response_model=List[FetalDevelopment])
async def get_development_reference():
    return reference_data.list_development_data()


@router.get("/reference/appointments", response_model=List[AppointmentSchedule])
async def get_appointment_reference():
    return reference_data.list_appointment_schedule()


@router.get("/reference/trimesters/{trimester}", response_model=TrimesterInfo)
async def get_trimester_reference(trimester: Trimester):
    return reference_data.get_trimester_info(trimester)


@router.get("/export", response_model=ExportData)
async def get_export_data(
    lmp_date: str,
    format: ExportFormat = 'pdf',
    as_of: Optional[str] = None
):
    """Summary, tables and preview for a PDF or Excel export"""
    try:
        lmp = parse_local_date(lmp_date)
        current_date = parse_local_date(as_of)

        export_data = build_export_data(lmp, format, current_date)
        print(f"✅ Prepared {format} export: {export_data.filename}")
        return export_data

    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        print(f"❌ Error preparing export: {e}")
        raise HTTPException(status_code=500, detail=str(e))
