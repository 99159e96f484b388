# services/export_service.py
"""
Shapes calendar and summary data into the tables a PDF or spreadsheet
renderer consumes. No files are written here.
"""
from datetime import date
from typing import List, Optional, Sequence

from models.pregnancy_schemas import (
    CalendarRow,
    DatedWeekRow,
    EstimatedFileSizes,
    ExportData,
    ExportFormat,
    ExportPreview,
    PregnancyDay,
    PregnancySummary,
)
from services.month_filter_service import calculate_calendar_stats
from services.pregnancy_calculator import get_pregnancy_calculator
from utils.date_utils import DateLike, format_iso_date, to_local_date

EXPORT_EXTENSIONS = {
    'pdf': 'pdf',
    'excel': 'xlsx',
}

MEDICAL_DISCLAIMER = [
    'MEDICAL DISCLAIMER: This calendar is based on standard 40-week pregnancy calculations',
    'from your Last Menstrual Period (LMP). All dates and milestones are estimates only.',
    'Individual pregnancies may vary. Always consult with your healthcare provider for',
    'personalized medical advice and accurate pregnancy monitoring.',
]


def build_summary_rows(summary: PregnancySummary) -> List[List[str]]:
    rows = [
        ['Pregnancy Summary', ''],
        ['Current Gestational Age', summary.current_gestational_age],
        ['Current Trimester', summary.current_trimester],
        ['Days Completed', str(summary.days_completed)],
        ['Days Remaining', str(summary.days_remaining)],
        ['Progress Percentage', f"{summary.progress_percentage}%"],
        ['Estimated Due Date', summary.formatted_due_date],
        ['', ''],
        ['Upcoming Milestones', ''],
    ]
    rows.extend(['', milestone] for milestone in summary.upcoming_milestones)
    rows.append(['', ''])
    rows.append(['Next Appointments', ''])
    rows.extend(['', appointment] for appointment in summary.next_appointments)
    return rows


def build_calendar_rows(pregnancy_days: Sequence[PregnancyDay]) -> List[CalendarRow]:
    return [
        CalendarRow(
            day_number=day.day_number,
            date=day.formatted_date,
            gestational_week=day.gestational_week,
            day_of_week=day.day_of_week,
            gestational_age=day.gestational_age,
            month=day.month_name,
            year=day.calendar_year,
            trimester=day.trimester,
            fetal_weight=day.estimated_fetal_weight,
            fetal_length=day.estimated_fetal_length,
        )
        for day in pregnancy_days
    ]


def build_appointment_rows(pregnancy_days: Sequence[PregnancyDay]) -> List[DatedWeekRow]:
    """One row per appointment, days without appointments are skipped"""
    rows = []
    for day in pregnancy_days:
        for appointment in day.appointments:
            rows.append(DatedWeekRow(
                date=day.formatted_date,
                week=f"Week {day.gestational_week}",
                text=appointment,
            ))
    return rows


def build_milestone_rows(pregnancy_days: Sequence[PregnancyDay]) -> List[DatedWeekRow]:
    return [
        DatedWeekRow(
            date=day.formatted_date,
            week=f"Week {day.gestational_week}",
            text=day.development_milestone,
        )
        for day in pregnancy_days
        if day.development_milestone
    ]


def generate_default_filename(
    summary: PregnancySummary,
    export_format: ExportFormat,
    export_date: Optional[DateLike] = None
) -> str:
    """e.g. pregnancy-calendar-12-weeks 3 days-2024-03-28.pdf (first space only)"""
    if export_date is None:
        export_date = date.today()

    age = summary.current_gestational_age.replace(' ', '-', 1)
    extension = EXPORT_EXTENSIONS[export_format]
    return f"pregnancy-calendar-{age}-{format_iso_date(export_date)}.{extension}"


def estimate_file_size(pregnancy_days: Sequence[PregnancyDay], export_format: ExportFormat) -> int:
    """Rough size in KB"""
    data_points = len(pregnancy_days)
    if export_format == 'pdf':
        return int(data_points * 2.5 + 50 + 0.5)
    return data_points + 30


def create_export_preview(pregnancy_days: Sequence[PregnancyDay]) -> ExportPreview:
    stats = calculate_calendar_stats(pregnancy_days)

    return ExportPreview(
        summary=f"Export includes {stats.total_days} days of pregnancy calendar data",
        total_days=stats.total_days,
        appointments_count=stats.appointment_days,
        milestones_count=stats.milestone_days,
        estimated_file_sizes=EstimatedFileSizes(
            pdf=estimate_file_size(pregnancy_days, 'pdf'),
            excel=estimate_file_size(pregnancy_days, 'excel'),
        ),
    )


def build_export_data(
    lmp_date: DateLike,
    export_format: ExportFormat,
    current_date: Optional[DateLike] = None
) -> ExportData:
    """Everything a renderer needs for one export, computed for current_date"""
    if current_date is None:
        current_date = date.today()

    calculator = get_pregnancy_calculator()
    summary = calculator.generate_pregnancy_summary(lmp_date, current_date)
    pregnancy_days = calculator.generate_pregnancy_calendar(lmp_date)

    return ExportData(
        format=export_format,
        filename=generate_default_filename(summary, export_format, current_date),
        lmp_date=to_local_date(lmp_date),
        summary=summary,
        summary_rows=build_summary_rows(summary),
        calendar_rows=build_calendar_rows(pregnancy_days),
        appointment_rows=build_appointment_rows(pregnancy_days),
        milestone_rows=build_milestone_rows(pregnancy_days),
        disclaimer=list(MEDICAL_DISCLAIMER),
        preview=create_export_preview(pregnancy_days),
    )
