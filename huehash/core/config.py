#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: huehash/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for conversion cache
LRU_CACHE_SIZE = 1024

# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_AA_LARGE = 3.0                # Minimum contrast for large text (Level AA)
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_AAA_LARGE = 4.5               # Enhanced contrast for large text (Level AAA)
WCAG_AAA_NORMAL = 7.0              # Enhanced contrast for normal text (Level AAA)
WCAG_LUMINANCE_OFFSET = 0.05       # Standard offset constant in the (L + 0.05) contrast formula
WCAG_LINEAR_TH = 0.03928           # WCAG 2.0 threshold for the linear sRGB segment

# Perceived Brightness (Source: W3C AERT brightness formula)
BRIGHTNESS_R = 299.0
BRIGHTNESS_G = 587.0
BRIGHTNESS_B = 114.0
BRIGHTNESS_DIV = 1000.0
BRIGHTNESS_LIGHT_TH = 0.5          # Colors at or above this brightness read as "light"

# Grayscale Weights (Source: ITU-R BT.601 luma)
GRAY_LUMA_R = 0.299
GRAY_LUMA_G = 0.587
GRAY_LUMA_B = 0.114

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
DIV_3 = 3.0                        # Divisor for simple R+G+B averages
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
HUE_HALF = 180.0                   # Half circle, shortest-arc limit for hue mixing
HUE_SECTOR = 60.0                  # Degrees per HSB sector
HSL_HUE_MOD = 6.0                  # Hue sector divisor for HSL/HSB
ROUND_PRECISION = 1000.0           # Three-decimal rounding for XYZ/Lab round-trips

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# XYZ D65 Reference White (Source: sRGB / CIE D65, 4-digit)
D65_X = 95.05                      # X coordinate for D65 illuminant
D65_Y = 100.0                      # Y coordinate (Luminance) for D65 illuminant
D65_Z = 108.9                      # Z coordinate for D65 illuminant
XYZ_SCALING = 100.0                # Factor for normalizing/scaling XYZ coordinates

# sRGB to XYZ Matrix (Source: sRGB D65)
M_SRGB_XYZ_X = (0.4124, 0.3576, 0.1805)    # Coefficients for X coordinate calculation
M_SRGB_XYZ_Y = (0.2126, 0.7152, 0.0722)    # Coefficients for Y (Luminance) calculation
M_SRGB_XYZ_Z = (0.0193, 0.1192, 0.9505)    # Coefficients for Z coordinate calculation

# XYZ to sRGB Matrix (Source: sRGB D65 inverse)
M_XYZ_SRGB_R = (3.2406, -1.5372, -0.4986)  # Coefficients for linear Red component calculation
M_XYZ_SRGB_G = (-0.9689, 1.8758, 0.0415)   # Coefficients for linear Green component calculation
M_XYZ_SRGB_B = (0.0557, -0.2040, 1.0570)   # Coefficients for linear Blue component calculation

# CIELAB Constants (Source: CIE 15:2004)
LAB_E = 0.008856                   # Threshold for switching between linear and power functions
LAB_K = 7.787                      # Slope of the linear segment for low luminance values
LAB_OFFSET = 16.0 / 116.0          # Constant offset for normalization in XYZ to Lab conversion
LAB_POW = 1.0 / 3.0                # Cube root exponent
LAB_L_MULT = 116.0                 # Multiplier for Lightness (L*) calculation
LAB_L_SUB = 16.0                   # Subtraction constant for Lightness (L*) calculation
LAB_A_MULT = 500.0                 # Multiplier for 'a*' (green-red) channel calculation
LAB_B_MULT = 200.0                 # Multiplier for 'b*' (blue-yellow) channel calculation
LAB_L_MAX = 100.0                  # Upper bound for L* on Lab input
LAB_AB_MIN = -128.0                # Lower bound for a*/b* on Lab input
LAB_AB_MAX = 127.0                 # Upper bound for a*/b* on Lab input

# ==========================================
# Adjustment Defaults
# ==========================================

DEFAULT_ADJUST_AMOUNT = 0.2        # Default step for lighten/darken/saturate/tint/shade
DEFAULT_MIX_WEIGHT = 0.5           # Default weight for mixing two colors
COLOR_SPACES = ("rgb", "hsl", "hsb", "lab")
GRAYSCALE_MODES = ("luminance", "lightness", "average", "value")
DEFAULT_GRAYSCALE_MODE = "lightness"

# ==========================================
# Identicon Generation
# ==========================================

SEED_WORDS = 4                     # Number of 32-bit words in the seed state
UINT32_MASK = 0xFFFFFFFF           # 32-bit wraparound mask
INT32_SIGN = 0x80000000            # Sign bit of a 32-bit word
INT32_MAX = 2147483647             # Divisor for turning a draw into a float
SEED_MULTIPLIER = 31               # Rolling hash multiplier (s * 32 - s)
XORSHIFT_A = 11                    # Left shift applied to the outgoing word
XORSHIFT_B = 19                    # Arithmetic right shift of the newest word
XORSHIFT_C = 8                     # Arithmetic right shift of the mixed word

PATTERN_SPREAD = 2.3               # floor(draw * 2.3) gives cell codes 0, 1, 2
SATURATION_RANGE = 60.0            # Saturation span in percent
SATURATION_FLOOR = 40.0            # Saturation minimum in percent
LIGHTNESS_SAMPLES = 4              # Draws averaged into one lightness value
LIGHTNESS_SAMPLE_WEIGHT = 25.0     # Percent contributed by each lightness draw
PERCENT = 100.0

CELL_BACKGROUND = 0
CELL_FOREGROUND = 1
CELL_SPOT = 2

DEFAULT_SIZE = 8                   # Grid side in cells
DEFAULT_SCALE = 8                  # Pixel edge per cell
DEFAULT_SCALE_MULTIPLE = 1         # Extra magnification applied at render time

# ==========================================
# CLI UI & Data Structures
# ==========================================

MAX_DEC = 16777215                 # Max integer value for 24-bit Hex (0xFFFFFF)
MAX_GRID_SIZE = 64                 # Largest identicon grid the CLI will preview
MAX_SCALE = 16                     # Largest per-cell scale the CLI will preview
DEFAULT_PREVIEW_SCALE = 2          # Two pixels per cell keeps previews square in half-blocks

# Keys used to extract and format technical color data
TECH_INFO_KEYS = [
    'rgb',
    'luminance',
    'hsl',
    'hsb',
    'xyz',
    'lab',
    'contrast',
]

# Adjustment pipeline order for the 'adjust' command
PIPELINE = [
    "rotate",
    "complement",
    "lighten",
    "darken",
    "saturate",
    "desaturate",
    "tint",
    "shade",
    "grayscale",
    "invert",
    "opacity",
]

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
UPPER_HALF_BLOCK = "▀"
