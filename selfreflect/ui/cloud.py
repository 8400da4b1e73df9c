from html import escape
from typing import List

from ..models import WordStat

EMPTY_CLOUD_MESSAGE = "Write more to see themes emerge..."


def word_style(value: int) -> tuple[float, float]:
    """Font size (rem) and opacity for a word seen ``value`` times."""
    size = min(3, 0.8 + value * 0.15)
    opacity = min(1, 0.3 + value * 0.15)
    return size, opacity


def render_cloud_html(stats: List[WordStat]) -> str:
    if not stats:
        return f'<div class="sr-cloud"><span class="sr-cloud-empty">{EMPTY_CLOUD_MESSAGE}</span></div>'

    spans = []
    for stat in stats:
        size, opacity = word_style(stat.value)
        spans.append(
            f'<span class="sr-cloud-word" title="{stat.value}" '
            f'style="font-size: {size:.2f}rem; opacity: {opacity:.2f};">{escape(stat.text)}</span>'
        )
    return f'<div class="sr-cloud">{"".join(spans)}</div>'
