"""Export a pattern to an SVG file or a data URI.

Standalone counterpart of the download button: renders the same image the
gallery shows for a message, given its seed and emotion.

Usage:
    # from the project root
    python scripts/export_pattern.py --seed 3f1c... --emotion joy
    python scripts/export_pattern.py --seed 0.42 --numeric --width 800 --height 800
    python scripts/export_pattern.py --seed abc --format uri --output -
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

# backend/ on the path for standalone runs without an install
_BACKEND_PATH = Path(__file__).parent.parent / "backend"
if str(_BACKEND_PATH) not in sys.path:
    sys.path.insert(0, str(_BACKEND_PATH))

from whispher.core.config import get_settings
from whispher.services.palettes import EMOTIONS
from whispher.services.pattern import encode_data_uri, export_filename, new_seed, render_svg


def export(
    seed: str,
    emotion: Optional[str] = None,
    width: Optional[float] = None,
    height: Optional[float] = None,
    numeric: bool = False,
    fmt: str = "svg",
) -> str:
    """Render a pattern and return it in the requested format.

    Args:
        seed: Seed string; parsed as a float when ``numeric`` is set.
        emotion: Emotion category (configured default when omitted).
        width: Canvas width (configured default when omitted).
        height: Canvas height (configured default when omitted).
        numeric: Treat ``seed`` as a numeric seed instead of hashing it.
        fmt: "svg" for raw markup, "uri" for a base64 data URI.

    Returns:
        The rendered pattern.
    """
    settings = get_settings()
    svg = render_svg(
        width if width is not None else settings.default_width,
        height if height is not None else settings.default_height,
        float(seed) if numeric else seed,
        emotion if emotion is not None else settings.default_emotion,
    )
    if fmt == "uri":
        return encode_data_uri(svg)
    return svg


def default_output_path(seed: str, emotion: Optional[str]) -> Path:
    return Path(export_filename(seed, emotion or get_settings().default_emotion))


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Render a Whispher pattern to a file.")
    parser.add_argument("--seed", help="Seed string (a new UUID when omitted).")
    parser.add_argument("--emotion", help=f"One of: {', '.join(EMOTIONS)}.")
    parser.add_argument("--width", type=float)
    parser.add_argument("--height", type=float)
    parser.add_argument(
        "--numeric",
        action="store_true",
        help="Use --seed as a numeric seed instead of hashing it.",
    )
    parser.add_argument("--format", choices=("svg", "uri"), default="svg")
    parser.add_argument("--output", help="Output path, or - for stdout.")
    args = parser.parse_args(argv)

    seed = args.seed or new_seed()
    try:
        content = export(
            seed,
            emotion=args.emotion,
            width=args.width,
            height=args.height,
            numeric=args.numeric,
            fmt=args.format,
        )
    except ValueError as exc:
        parser.error(str(exc))

    if args.output == "-":
        sys.stdout.write(content)
        return 0
    path = Path(args.output) if args.output else default_output_path(seed, args.emotion)
    path.write_text(content, encoding="utf-8")
    print(f"Wrote {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
