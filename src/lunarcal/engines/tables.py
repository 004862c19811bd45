"""
lunarcal.engines.tables
-----------------------
Fixed lookup tables. Everything here is immutable and indexed by integer
offset (or by (month, day) for festivals).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import NamedTuple, Tuple

# Index 0 is the Rat: cyclic year 1 (Jia-Zi) is a Rat year.
ZODIAC: Tuple[str, ...] = ("鼠", "牛", "虎", "兔", "龙", "蛇", "马", "羊", "猴", "鸡", "狗", "猪")

MONTH_NAMES: Tuple[str, ...] = (
    "正月", "二月", "三月", "四月", "五月", "六月",
    "七月", "八月", "九月", "十月", "冬月", "腊月",
)
LEAP_MONTH_LABEL = "闰月"

NUMERALS: Tuple[str, ...] = ("〇", "一", "二", "三", "四", "五", "六", "七", "八", "九", "十")

DAY_PREFIX_INITIAL = "初"
DAY_PREFIX_TEN = "十"
DAY_PREFIX_TWENTY = "廿"
DAY_TEN = "初十"
DAY_TWENTY = "二十"
DAY_THIRTY = "三十"

# Keyed by lunisolar (month, day).
FESTIVALS = MappingProxyType({
    (1, 1): "春节",
    (1, 15): "元宵",
    (2, 2): "龙抬头",
    (5, 5): "端午",
    (7, 7): "七夕",
    (7, 15): "中元",
    (8, 15): "中秋",
    (9, 9): "重阳",
    (12, 8): "腊八",
    (12, 23): "小年",
    (12, 30): "除夕",
})


class SolarTerm(NamedTuple):
    name: str
    c: float


# Two terms per Gregorian month, January first. The C constants are
# empirical; keep them exactly as they are.
SOLAR_TERMS: Tuple[SolarTerm, ...] = (
    SolarTerm("小寒", 5.4055), SolarTerm("大寒", 20.12),
    SolarTerm("立春", 3.87), SolarTerm("雨水", 18.73),
    SolarTerm("惊蛰", 5.63), SolarTerm("春分", 20.646),
    SolarTerm("清明", 4.81), SolarTerm("谷雨", 20.1),
    SolarTerm("立夏", 5.52), SolarTerm("小满", 21.04),
    SolarTerm("芒种", 5.678), SolarTerm("夏至", 21.37),
    SolarTerm("小暑", 7.108), SolarTerm("大暑", 22.83),
    SolarTerm("立秋", 7.5), SolarTerm("处暑", 23.13),
    SolarTerm("白露", 7.646), SolarTerm("秋分", 23.042),
    SolarTerm("寒露", 8.318), SolarTerm("霜降", 23.438),
    SolarTerm("立冬", 7.438), SolarTerm("小雪", 22.36),
    SolarTerm("大雪", 7.18), SolarTerm("冬至", 21.94),
)

SOLAR_TERM_D = 0.2422
