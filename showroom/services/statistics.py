"""
Statistics summary service.

The dashboard headline figures are fixed demo values; they are not derived
from the `daily_stats` rows.
"""
from showroom.db import schemas

_SUMMARY = {
    "emails": {
        "total": 156,
        "aiResponses": 98,
        "humanEscalations": 58,
        "avgResponseTimeMinutes": 135,
    },
    "calls": {
        "total": 234,
        "aiHandled": 187,
        "transferred": 47,
        "avgDurationSeconds": 270,
    },
    "waitlist": {
        "total": 120,
        "conversions": 15,
        "conversionRate": 12.5,
    },
}


def get_summary() -> schemas.StatisticsSummary:
    return schemas.StatisticsSummary.model_validate(_SUMMARY)
