"""datekit: Gregorian calendar arithmetic, boundaries, differences and formatting."""

import logging

from datekit.arithmetic import (
    add,
    n_days_ago,
    n_days_ahead,
    n_months_ago,
    n_months_ahead,
    n_weeks_ago,
    n_weeks_ahead,
    n_years_ago,
    n_years_ahead,
    subtract,
)
from datekit.boundary import end_of, quarter_bounds, start_of
from datekit.business import (
    add_business_days,
    business_days_diff,
    is_business_day,
    next_business_day,
    previous_business_day,
    subtract_business_days,
)
from datekit.compare import (
    earliest,
    is_after,
    is_before,
    is_between,
    is_future,
    is_past,
    is_same,
    is_this_month,
    is_this_week,
    is_this_year,
    is_today,
    is_tomorrow,
    is_weekday,
    is_weekend,
    is_yesterday,
    latest,
)
from datekit.converters import (
    from_array,
    from_excel_date,
    from_iso_string,
    from_milliseconds_timestamp,
    from_object,
    from_sql_date,
    from_sql_datetime,
    from_unix_timestamp,
    from_utc,
    to_array,
    to_excel_date,
    to_iso_string,
    to_json,
    to_locale_date_string,
    to_locale_string,
    to_locale_time_string,
    to_milliseconds_timestamp,
    to_object,
    to_rfc2822,
    to_sql_date,
    to_sql_datetime,
    to_sql_timestamp,
    to_unix_timestamp,
    to_utc,
    to_utc_string,
)
from datekit.difference import (
    calendar_diff,
    days_between,
    exact_age,
    get_age,
    hours_between,
    milliseconds_between,
    minutes_between,
    seconds_between,
)
from datekit.formatting import (
    DEFAULT_PATTERN,
    ISO_PATTERN,
    calendar,
    format,
    format_duration,
    format_long,
    format_relative,
    format_short,
    format_time,
    from_now,
    timezone_offset,
)
from datekit.gregorian import (
    FRIDAY,
    MONDAY,
    SATURDAY,
    SUNDAY,
    THURSDAY,
    TUESDAY,
    WEDNESDAY,
    WEEKEND_DAYS,
    build,
    day_of_week,
    day_of_year,
    day_with_ordinal,
    days_in_month,
    days_in_year,
    is_am,
    is_even_date,
    is_leap_year,
    is_midnight,
    is_noon,
    is_odd_date,
    is_pm,
    iso_week_of_year,
    quarter,
    quarter_name,
    week_of_month,
)
from datekit.ranges import (
    all_days_in_month,
    all_days_in_year,
    business_days_in_range,
    date_range,
    iter_days,
    last_n_days,
    last_n_months,
    last_n_weeks,
    last_n_years,
    next_n_days,
    next_n_months,
    next_n_weeks,
    next_n_years,
    weekdays_in_month,
    weekends_in_month,
)
from datekit.today import Today
from datekit.types import (
    DateKitError,
    DifferenceResult,
    InvalidDateError,
    InvalidUnitError,
)
from datekit.units import Unit

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_PATTERN",
    "DateKitError",
    "DifferenceResult",
    "FRIDAY",
    "ISO_PATTERN",
    "InvalidDateError",
    "InvalidUnitError",
    "MONDAY",
    "SATURDAY",
    "SUNDAY",
    "THURSDAY",
    "TUESDAY",
    "Today",
    "Unit",
    "WEDNESDAY",
    "WEEKEND_DAYS",
    "add",
    "add_business_days",
    "all_days_in_month",
    "all_days_in_year",
    "build",
    "business_days_diff",
    "business_days_in_range",
    "calendar",
    "calendar_diff",
    "date_range",
    "day_of_week",
    "day_of_year",
    "day_with_ordinal",
    "days_between",
    "days_in_month",
    "days_in_year",
    "earliest",
    "end_of",
    "exact_age",
    "format",
    "format_duration",
    "format_long",
    "format_relative",
    "format_short",
    "format_time",
    "from_array",
    "from_excel_date",
    "from_iso_string",
    "from_milliseconds_timestamp",
    "from_now",
    "from_object",
    "from_sql_date",
    "from_sql_datetime",
    "from_unix_timestamp",
    "from_utc",
    "get_age",
    "hours_between",
    "is_after",
    "is_am",
    "is_before",
    "is_between",
    "is_business_day",
    "is_even_date",
    "is_future",
    "is_leap_year",
    "is_midnight",
    "is_noon",
    "is_odd_date",
    "is_past",
    "is_pm",
    "is_same",
    "is_this_month",
    "is_this_week",
    "is_this_year",
    "is_today",
    "is_tomorrow",
    "is_weekday",
    "is_weekend",
    "is_yesterday",
    "iso_week_of_year",
    "iter_days",
    "last_n_days",
    "last_n_months",
    "last_n_weeks",
    "last_n_years",
    "latest",
    "milliseconds_between",
    "minutes_between",
    "n_days_ago",
    "n_days_ahead",
    "n_months_ago",
    "n_months_ahead",
    "n_weeks_ago",
    "n_weeks_ahead",
    "n_years_ago",
    "n_years_ahead",
    "next_business_day",
    "next_n_days",
    "next_n_months",
    "next_n_weeks",
    "next_n_years",
    "previous_business_day",
    "quarter",
    "quarter_bounds",
    "quarter_name",
    "seconds_between",
    "start_of",
    "subtract",
    "subtract_business_days",
    "timezone_offset",
    "to_array",
    "to_excel_date",
    "to_iso_string",
    "to_json",
    "to_locale_date_string",
    "to_locale_string",
    "to_locale_time_string",
    "to_milliseconds_timestamp",
    "to_object",
    "to_rfc2822",
    "to_sql_date",
    "to_sql_datetime",
    "to_sql_timestamp",
    "to_unix_timestamp",
    "to_utc",
    "to_utc_string",
    "week_of_month",
    "weekdays_in_month",
    "weekends_in_month",
]
