# services/pregnancy_calculator.py
"""
Pregnancy calculations based on the standard 280 days (40 weeks) from the
Last Menstrual Period (LMP).

Every method is a pure function of its arguments. "Today" is only looked up
when the caller leaves current_date out.
"""
import math
from datetime import date, timedelta
from typing import List, Optional

from models.pregnancy_schemas import (
    GestationalAge,
    PregnancyDay,
    PregnancySummary,
    Trimester,
)
from services.reference_data import (
    DAYS_PER_WEEK,
    MONTH_NAMES,
    PREGNANCY_DURATION_DAYS,
    SECOND_TRIMESTER_START_WEEK,
    THIRD_TRIMESTER_START_WEEK,
    UPCOMING_MILESTONES,
    APPOINTMENT_SCHEDULE,
    get_appointments_for_week,
    get_development_for_week,
    get_notes_for_week,
    midpoint,
)
from utils.date_utils import DateLike, add_days, format_date, to_local_date

MAX_UPCOMING_MILESTONES = 3
MAX_NEXT_APPOINTMENTS = 2

# Latest LMP whose due date still fits in the date range
LATEST_LMP_DATE = date.max - timedelta(days=PREGNANCY_DURATION_DAYS)


def _check_lmp_date(lmp_date: DateLike) -> date:
    lmp_date = to_local_date(lmp_date)
    if lmp_date > LATEST_LMP_DATE:
        raise ValueError(
            f"lmp_date ({lmp_date}) must not be after {LATEST_LMP_DATE}"
        )
    return lmp_date


class PregnancyCalculatorService:

    def calculate_due_date(self, lmp_date: DateLike) -> date:
        """
        Estimated due date: LMP + 280 days

        Raises:
            ValueError: if lmp_date is after LATEST_LMP_DATE
        """
        return add_days(_check_lmp_date(lmp_date), PREGNANCY_DURATION_DAYS)

    def calculate_gestational_age(
        self,
        lmp_date: DateLike,
        current_date: Optional[DateLike] = None
    ) -> GestationalAge:
        """
        Gestational age from LMP to current_date (defaults to today).

        Both dates are reduced to calendar dates first. The formatted string
        shows the day as 1-indexed ("0 weeks 1 days" on the LMP itself) while
        the days field stays 0..6.

        Raises:
            ValueError: if current_date is before lmp_date
        """
        if current_date is None:
            current_date = date.today()

        lmp_date = to_local_date(lmp_date)
        current_date = to_local_date(current_date)

        if current_date < lmp_date:
            raise ValueError(
                f"current_date ({current_date}) cannot be before lmp_date ({lmp_date})"
            )

        total_days = (current_date - lmp_date).days
        weeks, days = divmod(total_days, DAYS_PER_WEEK)

        return GestationalAge(
            weeks=weeks,
            days=days,
            total_days=total_days,
            formatted=f"{weeks} weeks {days + 1} days",
        )

    def get_trimester(self, gestational_weeks: int) -> Trimester:
        """Trimester from completed gestational weeks"""
        if gestational_weeks < SECOND_TRIMESTER_START_WEEK:
            return 'first'
        if gestational_weeks < THIRD_TRIMESTER_START_WEEK:
            return 'second'
        return 'third'

    def generate_pregnancy_calendar(self, lmp_date: DateLike) -> List[PregnancyDay]:
        """All 280 pregnancy days, day 1 being the LMP date"""
        lmp_date = _check_lmp_date(lmp_date)
        pregnancy_days = []

        for day_number in range(1, PREGNANCY_DURATION_DAYS + 1):
            current_date = add_days(lmp_date, day_number - 1)

            gestational_age = self.calculate_gestational_age(lmp_date, current_date)
            gestational_week = gestational_age.weeks + 1  # week numbering starts at 1
            day_of_week = gestational_age.days + 1

            development = get_development_for_week(gestational_week)

            milestone = None
            fetal_weight = None
            fetal_length = None
            if development is not None:
                # Milestone text only on the first day of the week, size estimates on every day
                if day_of_week == 1:
                    milestone = development.description
                if development.weight_range is not None:
                    fetal_weight = midpoint(development.weight_range.min, development.weight_range.max)
                if development.length_range is not None:
                    fetal_length = midpoint(development.length_range.min, development.length_range.max)

            pregnancy_days.append(PregnancyDay(
                day_number=day_number,
                date=current_date,
                formatted_date=format_date(current_date),
                gestational_week=gestational_week,
                day_of_week=day_of_week,
                gestational_age=gestational_age.formatted,
                calendar_month=current_date.month,
                calendar_year=current_date.year,
                month_name=MONTH_NAMES[current_date.month - 1],
                trimester=self.get_trimester(gestational_age.weeks),
                development_milestone=milestone,
                estimated_fetal_weight=fetal_weight,
                estimated_fetal_length=fetal_length,
                appointments=[
                    f"{appt.appointment_type}: {appt.description}"
                    for appt in get_appointments_for_week(gestational_week)
                ],
                notes=get_notes_for_week(gestational_week),
            ))

        return pregnancy_days

    def generate_pregnancy_summary(
        self,
        lmp_date: DateLike,
        current_date: Optional[DateLike] = None
    ) -> PregnancySummary:
        """Point-in-time status for current_date (defaults to today)"""
        if current_date is None:
            current_date = date.today()
        current_date = to_local_date(current_date)

        gestational_age = self.calculate_gestational_age(lmp_date, current_date)
        due_date = self.calculate_due_date(lmp_date)

        days_remaining = max(0, (due_date - current_date).days)
        progress_percentage = min(
            100,
            math.floor(gestational_age.total_days / PREGNANCY_DURATION_DAYS * 100 + 0.5)
        )

        return PregnancySummary(
            current_gestational_age=gestational_age.formatted,
            current_trimester=self.get_trimester(gestational_age.weeks),
            days_completed=gestational_age.total_days,
            days_remaining=days_remaining,
            progress_percentage=progress_percentage,
            estimated_due_date=due_date,
            formatted_due_date=format_date(due_date),
            upcoming_milestones=self.get_upcoming_milestones(gestational_age.weeks),
            next_appointments=self.get_next_appointments(gestational_age.weeks),
        )

    def get_upcoming_milestones(self, current_week: int) -> List[str]:
        upcoming = [(week, text) for week, text in UPCOMING_MILESTONES if week > current_week]
        return [
            f"Week {week}: {text}"
            for week, text in upcoming[:MAX_UPCOMING_MILESTONES]
        ]

    def get_next_appointments(self, current_week: int) -> List[str]:
        upcoming = [appt for appt in APPOINTMENT_SCHEDULE if appt.week > current_week]
        return [
            f"Week {appt.week}: {appt.appointment_type}"
            for appt in upcoming[:MAX_NEXT_APPOINTMENTS]
        ]


# Singleton instance
_pregnancy_calculator = None

def get_pregnancy_calculator() -> PregnancyCalculatorService:
    global _pregnancy_calculator
    if _pregnancy_calculator is None:
        _pregnancy_calculator = PregnancyCalculatorService()
    return _pregnancy_calculator
