"""Template filters for the weather widget page."""
from __future__ import annotations

import math

from django import template

register = template.Library()


@register.filter
def round_half_up(value):
    """Round to an integer with halves going up, so -2.5 becomes -2."""
    if value is None or value == "":
        return ""
    return math.floor(float(value) + 0.5)
