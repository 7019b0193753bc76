"""Developer CLI for inspecting contrast and intent expansion.

Subcommands:
  contrast FG BG [--min R]
      Print the contrast ratio of FG against BG and, when it falls short of
      R, the adjusted foreground found by the contrast search (JSON).
  expand --component C --style S [--role R] [--high-contrast] [--value V]
         [--font-face F] [--brand FILE]
      Expand one intent and record it through the override validator. Prints
      the resulting updates as JSON. Exit status 2 when validation rejects
      the intent.

Usage examples:
  python -m cli.theme_tool contrast "#777777" white --min 4.5
  python -m cli.theme_tool expand --component Surface --style background-color --role Primary
"""
from __future__ import annotations

import argparse, json, logging, sys
from typing import Any, Dict, List

from theming import (
    BrandValidationError,
    ColorFormatError,
    ColorValue,
    ComponentType,
    FontFace,
    IntentExpander,
    OverrideValidationError,
    PaletteRole,
    StyleType,
    ThemeIntent,
    contrast_ratio,
    ensure_minimum_contrast,
    load_brand,
    parse_tag,
)
from theming.settings import TEXT_MINIMUM_CONTRAST


def _tag(enum_cls):
    def convert(text: str):
        try:
            return parse_tag(enum_cls, text)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from None

    return convert


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="theme-tool", description="Inspect contrast and theme intent expansion")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    c = sub.add_parser("contrast", help="Contrast ratio and adjusted foreground")
    c.add_argument("foreground", help="Foreground color (hex, rgb(), hsv() or name)")
    c.add_argument("background", help="Background color")
    c.add_argument("--min", type=float, default=TEXT_MINIMUM_CONTRAST, dest="minimum", help="Minimum ratio")

    e = sub.add_parser("expand", help="Expand and validate one intent")
    e.add_argument("--component", required=True, type=_tag(ComponentType))
    e.add_argument("--style", required=True, type=_tag(StyleType))
    e.add_argument("--role", type=_tag(PaletteRole), help="Palette role for color properties")
    e.add_argument("--font-face", type=_tag(FontFace), help="Font face for font-family")
    e.add_argument("--value", help="Explicit value for non-color properties")
    e.add_argument("--high-contrast", action="store_true", help="Target the high-contrast theme pair")
    e.add_argument("--brand", help="Brand JSON file (defaults to THEMING_BRAND_FILE / built-in)")
    return p


def _run_contrast(args: argparse.Namespace) -> Dict[str, Any]:
    fg = ColorValue.parse(args.foreground)
    bg = ColorValue.parse(args.background)
    result = ensure_minimum_contrast(fg, bg, args.minimum)
    return {
        "foreground": fg.hex,
        "background": bg.hex,
        "ratio": round(contrast_ratio(fg, bg), 4),
        "minimum": args.minimum,
        "adjusted": result.color.hex,
        "adjusted_ratio": round(result.ratio, 4),
        "meets_minimum": result.meets_minimum,
    }


def _run_expand(args: argparse.Namespace) -> List[Dict[str, Any]]:
    intent = ThemeIntent(
        args.component,
        args.style,
        palette_role=args.role,
        high_contrast=args.high_contrast,
        value=args.value,
        font_face=args.font_face,
    )
    expander = IntentExpander(load_brand(args.brand))
    expander.apply(intent)
    rows: List[Dict[str, Any]] = []
    for update in expander.validator:
        _component, theme, state, _style = update.selector.single()
        (prop, value), = update.declarations()
        rows.append({"theme": theme.value, "state": state.value, "property": prop, "value": value})
    return rows


def main(argv: list[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        if args.command == "contrast":
            payload: Any = _run_contrast(args)
        else:
            payload = _run_expand(args)
    except OverrideValidationError as exc:
        print(json.dumps({"error": str(exc), "rule": exc.rule, "axis": exc.axis}), file=sys.stderr)
        return 2
    except (ColorFormatError, BrandValidationError, FileNotFoundError, ValueError) as exc:
        ap.error(str(exc))
    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
