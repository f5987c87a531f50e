"""
calconv.engines.names
---------------------
Fixed name tables. Index with (field - 1) for 1-based fields.
"""

from __future__ import annotations

from typing import Tuple

WEEKDAY_NAMES: Tuple[str, ...] = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)

GREGORIAN_MONTH_NAMES: Tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

ISLAMIC_MONTH_NAMES: Tuple[str, ...] = (
    "Muharram", "Safar", "Rabi I", "Rabi II", "Jumada I", "Jumada II",
    "Rajab", "Sha'ban", "Ramadan", "Shawwal", "Dhu al-Qada", "Dhu al-Hijjah",
)

# Month 12 is "Adar" in common years and "Adar I" in leap years;
# month 13 only exists in leap years.
HEBREW_MONTH_NAMES: Tuple[str, ...] = (
    "Nisan", "Iyyar", "Sivan", "Tammuz", "Av", "Elul",
    "Tishri", "Heshvan", "Kislev", "Teveth", "Shevat", "Adar", "Adar II",
)
HEBREW_LEAP_ADAR = "Adar I"

MAYAN_HAAB_MONTH_NAMES: Tuple[str, ...] = (
    "Pop", "Uo", "Zip", "Zotz", "Tzec", "Xul", "Yaxkin", "Mol", "Chen", "Yax",
    "Zac", "Ceh", "Mac", "Kankin", "Muan", "Pax", "Kayab", "Cumku", "Uayeb",
)

MAYAN_TZOLKIN_NAMES: Tuple[str, ...] = (
    "Imix", "Ik", "Akbal", "Kan", "Chiccan", "Cimi", "Manik", "Lamat", "Muluc", "Oc",
    "Chuen", "Eb", "Ben", "Ix", "Men", "Cib", "Caban", "Etznab", "Cauac", "Ahau",
)

FRENCH_MONTH_NAMES: Tuple[str, ...] = (
    "Vendémiaire", "Brumaire", "Frimaire", "Nivôse", "Pluviôse", "Ventôse",
    "Germinal", "Floréal", "Prairial", "Messidor", "Thermidor", "Fructidor",
    "Sansculottides",
)

# The monthless days closing a French year, indexed by day - 1.
SANSCULOTTIDES: Tuple[str, ...] = (
    "Jour de la vertu",
    "Jour du génie",
    "Jour du travail",
    "Jour de l'opinion",
    "Jour des récompenses",
    "Jour de la révolution",
)

HINDU_SOLAR_MONTH_NAMES: Tuple[str, ...] = (
    "Mesha", "Vrshabha", "Mithuna", "Karka", "Simha", "Kanya",
    "Tula", "Vrischika", "Dhanus", "Makara", "Kumbha", "Mina",
)

HINDU_LUNAR_MONTH_NAMES: Tuple[str, ...] = (
    "Chaitra", "Vaisakha", "Jyaishtha", "Ashadha", "Sravana", "Bhadrapada",
    "Asvina", "Kartika", "Margasira", "Pausha", "Magha", "Phalguna",
)
