#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/core/contrast.py

from . import config as c
from .luminance import get_luminance


def get_wcag_contrast(lum: float) -> dict:
    """
    Calculate WCAG contrast ratios against pure white and pure black.

    Source: Web Content Accessibility Guidelines (WCAG) 2.1
    Formula: (L1 + 0.05) / (L2 + 0.05), where L is the relative luminance.
    """

    contrast_white = (c.UNIT + c.WCAG_LUMINANCE_OFFSET) / (lum + c.WCAG_LUMINANCE_OFFSET)
    contrast_black = (lum + c.WCAG_LUMINANCE_OFFSET) / c.WCAG_LUMINANCE_OFFSET

    return {
        "white": {"ratio": round(contrast_white, 2), "levels": get_pass_fail(contrast_white)},
        "black": {"ratio": round(contrast_black, 2), "levels": get_pass_fail(contrast_black)},
    }


def get_pass_fail(ratio: float) -> dict:
    return {
        "AA-Large": "Pass" if ratio >= c.WCAG_AA_LARGE else "Fail",
        "AA": "Pass" if ratio >= c.WCAG_AA_NORMAL else "Fail",
        "AAA-Large": "Pass" if ratio >= c.WCAG_AAA_LARGE else "Fail",
        "AAA": "Pass" if ratio >= c.WCAG_AAA_NORMAL else "Fail",
    }


def get_contrast_ratio(color_a, color_b) -> float:
    """
    Calculate the WCAG 2.1 contrast ratio between two colors.

    Symmetric in its arguments. Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    """
    y1 = get_luminance(color_a.red, color_a.green, color_a.blue)
    y2 = get_luminance(color_b.red, color_b.green, color_b.blue)

    l1, l2 = max(y1, y2), min(y1, y2)

    return (l1 + c.WCAG_LUMINANCE_OFFSET) / (l2 + c.WCAG_LUMINANCE_OFFSET)
