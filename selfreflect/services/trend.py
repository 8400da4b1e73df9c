from typing import List

import pandas as pd

from ..models import Entry

TREND_COLUMNS = ["label", "date", "mood"]


def mood_trend(entries: List[Entry]) -> pd.DataFrame:
    """
    Mood series for the trajectory chart.

    Points follow insertion order, not date order; ``label`` is the MM-DD part
    of the entry date used on the x axis.
    """
    rows = [
        {"label": (e.date or "")[5:], "date": e.date, "mood": e.mood}
        for e in entries
    ]
    return pd.DataFrame(rows, columns=TREND_COLUMNS)
