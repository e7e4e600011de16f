"""Basic Chromavalue usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from chromavalue import Color, Fraction, np_rgb_to_hsl, np_hsl_to_rgb, np_relative_luminance


def demonstrate_colors() -> None:
    # Parse CSS hex and keywords, read derived HSL values.
    accent = Color("#ff8040")
    print("RGBA bytes:", accent.rgba)
    print("HSL:", accent.to_hsl_array())
    print("As CSS:", accent.to_rgb_string(), accent.to_hsl_string())

    # Build from HSL, or from fractions instead of bytes.
    green = Color.from_hsla(120, 1.0, 0.5)
    half_red = Color.from_rgba(Fraction(1), 0, 0, 0.5)
    print("HSL -> hex:", green.to_hex(include_alpha=False))
    print("Fractional alpha:", half_red)


def demonstrate_transforms() -> None:
    base = Color("rebeccapurple")
    print("Complement:", base.complement())
    print("Lighter:", base.with_lightness(0.8))
    print("Mixed with white:", base.mix("white", 0.25))
    print("Average:", Color.average("red", "lime", "blue"))


def demonstrate_accessibility() -> None:
    for background in ("#336699", "gold", "navy", "#777777"):
        color = Color(background)
        text = color.best_text_color()
        ratio = color.contrast_ratio(text)
        print(f"{background}: text {text.to_name()} contrast={ratio:.2f} {color.wcag_levels(text)}")


def demonstrate_arrays() -> None:
    # Vectorized conversions over a batch of byte triples.
    rgb = np.array([[255, 128, 64], [51, 102, 153], [0, 0, 0]])
    hsl = np_rgb_to_hsl(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    print("Batch HSL:\n", hsl)
    print("Back to RGB:\n", np_hsl_to_rgb(hsl[..., 0], hsl[..., 1], hsl[..., 2]))
    print("Luminance:", np_relative_luminance(rgb))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_transforms()
    demonstrate_accessibility()
    demonstrate_arrays()
