# models/pregnancy_schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Literal
from datetime import date

Trimester = Literal['first', 'second', 'third']
AppointmentPriority = Literal['routine', 'important', 'critical']
ExportFormat = Literal['pdf', 'excel']


class CamelModel(BaseModel):
    """Snake case attributes, camelCase JSON (by alias)"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)


# Reference tables

class WeightRange(CamelModel):
    min: float
    max: float


class LengthRange(CamelModel):
    min: float
    max: float


class FetalDevelopment(CamelModel):
    week: int
    description: str
    size_comparison: Optional[str] = Field(default=None, alias="sizeComparison")
    weight_range: Optional[WeightRange] = Field(default=None, alias="weightRange")  # grams
    length_range: Optional[LengthRange] = Field(default=None, alias="lengthRange")  # cm
    key_developments: List[str] = Field(default_factory=list, alias="keyDevelopments")


class AppointmentSchedule(CamelModel):
    week: int
    appointment_type: str = Field(alias="appointmentType")
    description: str
    priority: AppointmentPriority


class TrimesterInfo(CamelModel):
    trimester: Trimester
    display_name: str = Field(alias="displayName")
    short_label: str = Field(alias="shortLabel")
    description: str
    features: List[str] = Field(default_factory=list)


# Calculated values

class GestationalAge(CamelModel):
    weeks: int
    days: int
    total_days: int = Field(alias="totalDays")
    formatted: str


class PregnancyDay(CamelModel):
    """One row of the 280 day calendar"""
    day_number: int = Field(alias="dayNumber")
    date: date
    formatted_date: str = Field(alias="formattedDate")
    gestational_week: int = Field(alias="gestationalWeek")
    day_of_week: int = Field(alias="dayOfWeek")
    gestational_age: str = Field(alias="gestationalAge")
    calendar_month: int = Field(alias="calendarMonth")
    calendar_year: int = Field(alias="calendarYear")
    month_name: str = Field(alias="monthName")
    trimester: Trimester
    development_milestone: Optional[str] = Field(default=None, alias="developmentMilestone")
    estimated_fetal_weight: Optional[int] = Field(default=None, alias="estimatedFetalWeight")
    estimated_fetal_length: Optional[int] = Field(default=None, alias="estimatedFetalLength")
    appointments: List[str] = Field(default_factory=list)
    notes: List[str] = Field(default_factory=list)


class PregnancySummary(CamelModel):
    current_gestational_age: str = Field(alias="currentGestationalAge")
    current_trimester: Trimester = Field(alias="currentTrimester")
    days_completed: int = Field(alias="daysCompleted")
    days_remaining: int = Field(alias="daysRemaining")
    progress_percentage: int = Field(alias="progressPercentage")
    estimated_due_date: date = Field(alias="estimatedDueDate")
    formatted_due_date: str = Field(alias="formattedDueDate")
    upcoming_milestones: List[str] = Field(default_factory=list, alias="upcomingMilestones")
    next_appointments: List[str] = Field(default_factory=list, alias="nextAppointments")


class MonthFilter(CamelModel):
    month: int
    year: int
    month_name: str = Field(alias="monthName")
    start_date: date = Field(alias="startDate")
    end_date: date = Field(alias="endDate")
    pregnancy_days_count: int = Field(alias="pregnancyDaysCount")
    display_label: str = Field(alias="displayLabel")


class CalendarStats(CamelModel):
    total_days: int = Field(alias="totalDays")
    milestone_days: int = Field(alias="milestoneDays")
    appointment_days: int = Field(alias="appointmentDays")


# API responses

class DueDateResponse(CamelModel):
    lmp_date: date = Field(alias="lmpDate")
    due_date: date = Field(alias="dueDate")
    formatted_due_date: str = Field(alias="formattedDueDate")


class TrimesterResponse(CamelModel):
    weeks: int
    trimester: Trimester


class CalendarResponse(CamelModel):
    lmp_date: date = Field(alias="lmpDate")
    month_filter: Optional[MonthFilter] = Field(default=None, alias="monthFilter")
    stats: CalendarStats
    days: List[PregnancyDay]


# Export

class EstimatedFileSizes(CamelModel):
    pdf: int
    excel: int


class ExportPreview(CamelModel):
    summary: str
    total_days: int = Field(alias="totalDays")
    appointments_count: int = Field(alias="appointmentsCount")
    milestones_count: int = Field(alias="milestonesCount")
    estimated_file_sizes: EstimatedFileSizes = Field(alias="estimatedFileSizes")


class CalendarRow(CamelModel):
    day_number: int = Field(alias="dayNumber")
    date: str
    gestational_week: int = Field(alias="gestationalWeek")
    day_of_week: int = Field(alias="dayOfWeek")
    gestational_age: str = Field(alias="gestationalAge")
    month: str
    year: int
    trimester: Trimester
    fetal_weight: Optional[int] = Field(default=None, alias="fetalWeight")
    fetal_length: Optional[int] = Field(default=None, alias="fetalLength")


class DatedWeekRow(CamelModel):
    """Appointment or milestone row: date, "Week N", text"""
    date: str
    week: str
    text: str


class ExportData(CamelModel):
    format: ExportFormat
    filename: str
    lmp_date: date = Field(alias="lmpDate")
    summary: PregnancySummary
    summary_rows: List[List[str]] = Field(alias="summaryRows")
    calendar_rows: List[CalendarRow] = Field(alias="calendarRows")
    appointment_rows: List[DatedWeekRow] = Field(alias="appointmentRows")
    milestone_rows: List[DatedWeekRow] = Field(alias="milestoneRows")
    disclaimer: List[str]
    preview: ExportPreview
