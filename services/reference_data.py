# services/reference_data.py
"""
Static week-indexed reference tables.

Development data exists only for weeks 4, 8, ... 40 and appointments only for
the weeks listed in APPOINTMENT_SCHEDULE. A week without data is not an error:
lookups return None / an empty list.
"""
from types import MappingProxyType
from typing import List, Optional, Tuple

from models.pregnancy_schemas import (
    AppointmentSchedule,
    FetalDevelopment,
    LengthRange,
    Trimester,
    TrimesterInfo,
    WeightRange,
)

PREGNANCY_DURATION_DAYS = 280
DAYS_PER_WEEK = 7

SECOND_TRIMESTER_START_WEEK = 13
THIRD_TRIMESTER_START_WEEK = 27

MONTH_NAMES = (
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
)


def _development(week, description, size, weight, length, key_developments) -> FetalDevelopment:
    return FetalDevelopment(
        week=week,
        description=description,
        size_comparison=size,
        weight_range=WeightRange(min=weight[0], max=weight[1]),
        length_range=LengthRange(min=length[0], max=length[1]),
        key_developments=key_developments,
    )


_DEVELOPMENT_DATA = [
    _development(4, 'Embryo implants in uterine wall', 'Poppy seed',
                 (0, 0), (0.1, 0.2),
                 ['Neural tube formation begins', 'Heart starts to develop']),
    _development(8, 'All major organs have begun to form', 'Raspberry',
                 (1, 2), (1.6, 2.0),
                 ['Limb buds appear', 'Facial features developing']),
    _development(12, 'Fetus can make movements', 'Plum',
                 (14, 20), (5.4, 6.5),
                 ['Reflexes develop', 'Kidneys start producing urine']),
    _development(16, 'Baby can hear sounds from outside', 'Avocado',
                 (100, 140), (10.9, 12.0),
                 ['Hearing develops', 'Limbs are fully formed']),
    _development(20, 'Halfway point - anatomy scan time', 'Banana',
                 (260, 350), (16.4, 18.0),
                 ['Sex can be determined', 'Taste buds develop']),
    _development(24, 'Viability milestone reached', 'Corn on the cob',
                 (600, 750), (21.0, 23.0),
                 ['Lungs begin producing surfactant', 'Hearing is well developed']),
    _development(28, 'Third trimester begins', 'Eggplant',
                 (1000, 1200), (25.0, 27.0),
                 ['Eyes can open', 'Brain tissue increases rapidly']),
    _development(32, 'Rapid brain development continues', 'Jicama',
                 (1700, 1900), (28.0, 30.0),
                 ['Bones harden', 'Toenails and fingernails grow']),
    _development(36, 'Baby is getting ready for birth', 'Romaine lettuce',
                 (2600, 2900), (32.0, 34.0),
                 ['Immune system develops', 'Fat continues to accumulate']),
    _development(40, 'Full term - ready for birth', 'Small pumpkin',
                 (3200, 3600), (48.0, 52.0),
                 ['Fully developed', 'Ready for life outside the womb']),
]

FETAL_DEVELOPMENT: MappingProxyType = MappingProxyType({d.week: d for d in _DEVELOPMENT_DATA})

# Table order matters: next appointments are taken in this order
APPOINTMENT_SCHEDULE: Tuple[AppointmentSchedule, ...] = (
    AppointmentSchedule(week=8, appointment_type='First Prenatal Visit',
                        description='Confirm pregnancy, medical history, initial tests',
                        priority='critical'),
    AppointmentSchedule(week=12, appointment_type='First Trimester Screening',
                        description='NT scan and blood work for genetic screening',
                        priority='important'),
    AppointmentSchedule(week=16, appointment_type='Routine Checkup',
                        description='Blood pressure, weight, fundal height measurement',
                        priority='routine'),
    AppointmentSchedule(week=20, appointment_type='Anatomy Scan',
                        description="Detailed ultrasound to check baby's development",
                        priority='critical'),
    AppointmentSchedule(week=24, appointment_type='Glucose Screening',
                        description='Test for gestational diabetes',
                        priority='important'),
    AppointmentSchedule(week=28, appointment_type='Third Trimester Begin',
                        description='Routine checkup, discuss birth plan',
                        priority='important'),
    AppointmentSchedule(week=32, appointment_type='Routine Checkup',
                        description="Monitor baby's growth and position",
                        priority='routine'),
    AppointmentSchedule(week=36, appointment_type='Group B Strep Test',
                        description='Screen for Group B Streptococcus bacteria',
                        priority='important'),
    AppointmentSchedule(week=38, appointment_type='Pre-delivery Checkup',
                        description='Check cervix, discuss delivery options',
                        priority='important'),
    AppointmentSchedule(week=40, appointment_type='Due Date Assessment',
                        description='Evaluate if induction is needed',
                        priority='critical'),
)

UPCOMING_MILESTONES: Tuple[Tuple[int, str], ...] = (
    (12, 'End of first trimester'),
    (20, 'Anatomy scan'),
    (24, 'Viability milestone'),
    (28, 'Third trimester begins'),
    (32, 'Rapid brain development'),
    (36, 'Baby considered full-term soon'),
    (40, 'Due date'),
)

SECOND_TRIMESTER_NOTE = 'Welcome to the second trimester!'
THIRD_TRIMESTER_NOTE = 'Welcome to the third trimester!'
VIABILITY_NOTE = 'Viability milestone reached - baby has survival chances if born now'
FULL_TERM_NOTE = 'Baby is now considered full-term'

_TRIMESTER_INFO = {
    'first': TrimesterInfo(
        trimester='first',
        display_name='First',
        short_label='1st',
        description="The foundation stage of your pregnancy. Your baby's organs are forming "
                    "and early development is crucial.",
        features=[
            'Morning sickness may occur',
            'Fatigue is common',
            'Important organ development',
            'First prenatal appointments',
            'Folic acid supplementation crucial',
        ],
    ),
    'second': TrimesterInfo(
        trimester='second',
        display_name='Second',
        short_label='2nd',
        description='Often called the "golden period" - you may feel more energetic and '
                    'comfortable during these weeks.',
        features=[
            'Energy levels typically improve',
            'Baby movements may be felt',
            'Anatomy scan around week 20',
            'Gender may be determined',
            'Belly starts to show more',
        ],
    ),
    'third': TrimesterInfo(
        trimester='third',
        display_name='Third',
        short_label='3rd',
        description='The final stretch! Your baby is growing rapidly and preparing for life '
                    'outside the womb.',
        features=[
            'Frequent doctor visits',
            'Baby movements are strong',
            'Prepare for delivery',
            'Monitor for labor signs',
            'Final preparations for baby',
        ],
    ),
}
TRIMESTER_INFO: MappingProxyType = MappingProxyType(_TRIMESTER_INFO)


def get_development_for_week(week: int) -> Optional[FetalDevelopment]:
    return FETAL_DEVELOPMENT.get(week)


def get_appointments_for_week(week: int) -> List[AppointmentSchedule]:
    """All scheduled appointments for a week, in table order (possibly empty)"""
    return [appt for appt in APPOINTMENT_SCHEDULE if appt.week == week]


def get_notes_for_week(week: int) -> List[str]:
    notes = []

    if week == SECOND_TRIMESTER_START_WEEK:
        notes.append(SECOND_TRIMESTER_NOTE)
    elif week == THIRD_TRIMESTER_START_WEEK:
        notes.append(THIRD_TRIMESTER_NOTE)

    if week == 24:
        notes.append(VIABILITY_NOTE)

    if week == 37:
        notes.append(FULL_TERM_NOTE)

    return notes


def get_trimester_info(trimester: Trimester) -> Optional[TrimesterInfo]:
    return TRIMESTER_INFO.get(trimester)


def list_development_data() -> List[FetalDevelopment]:
    return [FETAL_DEVELOPMENT[week] for week in sorted(FETAL_DEVELOPMENT)]


def list_appointment_schedule() -> List[AppointmentSchedule]:
    return list(APPOINTMENT_SCHEDULE)


def midpoint(low: float, high: float) -> int:
    """Midpoint rounded half up, e.g. (1, 2) -> 2"""
    return int((low + high) / 2 + 0.5)
