"""Unit conversion between imperial and metric measurements.

Every calculator works in kilograms and centimetres. These helpers are
applied once, at the input boundary, and use a single constant per pair
so that converting there and back recovers the original value.
"""

from __future__ import annotations

from typing import Tuple

KG_PER_LB = 0.453592
CM_PER_INCH = 2.54
INCHES_PER_FOOT = 12
MMHG_PER_KPA = 7.50062
MG_DL_PER_MMOL_L = 18.0182
# Lipid panels use molar masses of cholesterol and triolein
CHOLESTEROL_MG_DL_PER_MMOL_L = 38.67
TRIGLYCERIDE_MG_DL_PER_MMOL_L = 88.57
NMOL_L_PER_NG_ML = 2.5
FL_OZ_PER_LITER = 33.814


def lb_to_kg(pounds: float) -> float:
    return pounds * KG_PER_LB


def kg_to_lb(kilograms: float) -> float:
    return kilograms / KG_PER_LB


def inches_to_cm(inches: float) -> float:
    return inches * CM_PER_INCH


def cm_to_inches(centimetres: float) -> float:
    return centimetres / CM_PER_INCH


def feet_inches_to_cm(feet: float, inches: float = 0.0) -> float:
    """Convert a feet + inches height (e.g. 5 ft 10 in) to centimetres."""
    return inches_to_cm(feet * INCHES_PER_FOOT + inches)


def cm_to_feet_inches(centimetres: float) -> Tuple[int, float]:
    """Split a centimetre height into whole feet and remaining inches."""
    total_inches = cm_to_inches(centimetres)
    feet = int(total_inches // INCHES_PER_FOOT)
    return feet, total_inches - feet * INCHES_PER_FOOT


def kpa_to_mmhg(kpa: float) -> float:
    return kpa * MMHG_PER_KPA


def mmol_to_mg_dl(mmol_l: float) -> float:
    return mmol_l * MG_DL_PER_MMOL_L


def mg_dl_to_mmol(mg_dl: float) -> float:
    return mg_dl / MG_DL_PER_MMOL_L


def liters_to_fl_oz(liters: float) -> float:
    return liters * FL_OZ_PER_LITER


def cholesterol_mmol_to_mg_dl(mmol_l: float) -> float:
    return mmol_l * CHOLESTEROL_MG_DL_PER_MMOL_L


def triglyceride_mmol_to_mg_dl(mmol_l: float) -> float:
    return mmol_l * TRIGLYCERIDE_MG_DL_PER_MMOL_L


def nmol_to_ng_ml(nmol_l: float) -> float:
    return nmol_l / NMOL_L_PER_NG_ML
