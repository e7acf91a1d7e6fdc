# src/chart_color_extractor/demo.py
import argparse
import json
import logging
import sys


def main(argv=None):
    """CLI demo: import a stylesheet or hex list, suggest a palette, print JSON."""
    from .extraction.general.utils.log import enable_topics
    from .extraction.orchestrator import analyze_stylesheet

    parser = argparse.ArgumentParser(
        prog="chart-colors",
        description="Extract light/dark chart colors from stylesheet text or a hex list.",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Stylesheet or hex list (e.g. F7F6F7, F1F0F2, DEDCDF); read from stdin when omitted",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    parser.add_argument(
        "--count",
        type=int,
        default=None,
        help="Number of suggested colors (default: colors usable in both modes)",
    )
    parser.add_argument("--css", action="store_true", help="Include the exported stylesheet")

    args = parser.parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
        enable_topics("all")

    text = " ".join(args.text) if args.text else sys.stdin.read()

    try:
        result = analyze_stylesheet(text, count=args.count)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not args.css:
        result.pop("css", None)
    print(json.dumps(result, indent=2, ensure_ascii=False))
    if result["message"]:
        print(result["message"], file=sys.stderr)
    return 0 if result["status"] != "failed" else 2


if __name__ == "__main__":
    sys.exit(main())
