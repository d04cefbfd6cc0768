"""Weather code to display icon classification.

Codes are provider specific: Open-Meteo reports WMO interpretation codes
(0-99) while weatherstack uses its own 113-395 code space. Each provider
therefore carries its own :class:`IconClassifier`.
"""
from __future__ import annotations

import enum
from typing import Iterable, List, Tuple


class IconCategory(str, enum.Enum):
    CLEAR = "clear"
    CLOUDY = "cloudy"
    FOG = "fog"
    RAIN = "rain"
    SNOW = "snow"
    THUNDER = "thunder"


CodeRange = Tuple[int, int, IconCategory]


class IconClassifier:
    """Map integer codes onto icon categories using closed, disjoint ranges."""

    default = IconCategory.CLOUDY

    def __init__(self, ranges: Iterable[CodeRange]) -> None:
        ordered: List[CodeRange] = sorted(ranges, key=lambda item: item[0])
        for low, high, _ in ordered:
            if low > high:
                raise ValueError(f"invalid code range {low}..{high}")
        for previous, current in zip(ordered, ordered[1:]):
            if current[0] <= previous[1]:
                raise ValueError(
                    f"code ranges {previous[0]}..{previous[1]} and {current[0]}..{current[1]} overlap"
                )
        self._ranges = tuple(ordered)

    @property
    def ranges(self) -> Tuple[CodeRange, ...]:
        return self._ranges

    def classify(self, code: int) -> IconCategory:
        for low, high, category in self._ranges:
            if low <= code <= high:
                return category
        return self.default


WMO_CLASSIFIER = IconClassifier(
    [
        (0, 0, IconCategory.CLEAR),
        (1, 3, IconCategory.CLOUDY),
        (45, 48, IconCategory.FOG),
        (51, 55, IconCategory.RAIN),
        (56, 57, IconCategory.SNOW),  # freezing drizzle
        (61, 65, IconCategory.RAIN),
        (66, 67, IconCategory.SNOW),  # freezing rain
        (71, 75, IconCategory.SNOW),
        (80, 82, IconCategory.RAIN),
        (85, 86, IconCategory.SNOW),
        (95, 99, IconCategory.THUNDER),
    ]
)

WEATHERSTACK_CLASSIFIER = IconClassifier(
    [
        (113, 113, IconCategory.CLEAR),
        (116, 122, IconCategory.CLOUDY),
        (143, 143, IconCategory.FOG),
        (176, 176, IconCategory.RAIN),
        (179, 185, IconCategory.SNOW),  # patchy snow, sleet, freezing drizzle
        (200, 200, IconCategory.THUNDER),
        (227, 230, IconCategory.SNOW),
        (248, 248, IconCategory.FOG),
        (260, 260, IconCategory.FOG),
        (263, 266, IconCategory.RAIN),
        (281, 284, IconCategory.SNOW),
        (293, 308, IconCategory.RAIN),
        (311, 338, IconCategory.SNOW),
        (350, 350, IconCategory.SNOW),
        (353, 359, IconCategory.RAIN),
        (362, 377, IconCategory.SNOW),
        (386, 395, IconCategory.THUNDER),
    ]
)


__all__ = [
    "CodeRange",
    "IconCategory",
    "IconClassifier",
    "WEATHERSTACK_CLASSIFIER",
    "WMO_CLASSIFIER",
]
