# services/month_filter_service.py
from typing import Dict, List, Optional, Sequence, Tuple

from models.pregnancy_schemas import CalendarStats, MonthFilter, PregnancyDay
from services.pregnancy_calculator import get_pregnancy_calculator
from services.reference_data import MONTH_NAMES
from utils.date_utils import DateLike


def generate_month_filters(lmp_date: DateLike) -> List[MonthFilter]:
    """
    Group the pregnancy calendar by calendar month.

    One filter per (year, month) the pregnancy touches, sorted by start date.
    """
    pregnancy_days = get_pregnancy_calculator().generate_pregnancy_calendar(lmp_date)
    return build_month_filters(pregnancy_days)


def build_month_filters(pregnancy_days: Sequence[PregnancyDay]) -> List[MonthFilter]:
    """Month filters for an already generated calendar"""
    month_groups: Dict[Tuple[int, int], List[PregnancyDay]] = {}
    for day in pregnancy_days:
        key = (day.calendar_year, day.calendar_month)
        month_groups.setdefault(key, []).append(day)

    filters = []
    for (year, month), days in month_groups.items():
        month_name = MONTH_NAMES[month - 1]
        filters.append(MonthFilter(
            month=month,
            year=year,
            month_name=month_name,
            start_date=days[0].date,
            end_date=days[-1].date,
            pregnancy_days_count=len(days),
            display_label=f"{month_name} {year} ({len(days)} days)",
        ))

    return sorted(filters, key=lambda f: f.start_date)


def filter_by_month(
    pregnancy_days: Sequence[PregnancyDay],
    month_filter: MonthFilter
) -> List[PregnancyDay]:
    """Days in the filter's calendar month, original order kept"""
    return [
        day for day in pregnancy_days
        if day.calendar_month == month_filter.month and day.calendar_year == month_filter.year
    ]


def get_filter_key(month_filter: MonthFilter) -> str:
    """"YYYY-MM" key for a month filter"""
    return f"{month_filter.year}-{month_filter.month:02d}"


def find_month_filter(filters: Sequence[MonthFilter], key: Optional[str]) -> Optional[MonthFilter]:
    if not key:
        return None
    return next((f for f in filters if get_filter_key(f) == key), None)


def calculate_calendar_stats(pregnancy_days: Sequence[PregnancyDay]) -> CalendarStats:
    return CalendarStats(
        total_days=len(pregnancy_days),
        milestone_days=sum(1 for day in pregnancy_days if day.development_milestone),
        appointment_days=sum(1 for day in pregnancy_days if day.appointments),
    )
