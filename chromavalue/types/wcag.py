"""Constants of the sRGB transfer curve, WCAG 2.x and CIE L*."""

# sRGB → linear
SRGB_LINEAR_THRESHOLD = 0.03928
SRGB_LINEAR_SCALE = 12.92
SRGB_OFFSET = 0.055
SRGB_GAMMA = 2.4

# ITU-R BT.709 channel weights
LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)

WCAG_LUMINANCE_OFFSET = 0.05
CONTRAST_MIN = 1.0
CONTRAST_MAX = 21.0

# (normal text, large text)
WCAG_AA = (4.5, 3.0)
WCAG_AAA = (7.0, 4.5)

# CIE L*
CIE_EPSILON = 0.008856
CIE_KAPPA = 903.3
