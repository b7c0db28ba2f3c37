from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import converter, renderer_html
from .config import load_options
from .sample import SAMPLE_MARKDOWN
from .utils import STDIN, configure_logging, read_markdown, resolve_output_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markdoc",
        description="Convert Markdown into a DOCX document and an HTML preview.",
    )
    parser.add_argument("input", nargs="?", type=str, help="Path to Markdown file, or - for stdin")
    parser.add_argument("-o", "--output", type=str, help="Output DOCX path")
    parser.add_argument("--html", type=str, help="Also write an HTML preview to this path")
    parser.add_argument("--author", type=str, help="Document author property")
    parser.add_argument("--title", type=str, help="Document title property")
    parser.add_argument("--config", type=str, help="YAML file with author/title options")
    parser.add_argument("--sample", action="store_true", help="Print a sample Markdown document and exit")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)

    if args.sample:
        sys.stdout.write(SAMPLE_MARKDOWN + "\n")
        return 0
    if not args.input:
        parser.error("the following arguments are required: input")
    if args.input != STDIN and not Path(args.input).expanduser().exists():
        parser.error(f"Input file not found: {args.input}")

    try:
        options = load_options(args.config, overrides={"author": args.author, "title": args.title})
    except ValueError as e:
        parser.error(str(e))

    input_name = args.input if args.input == STDIN else str(Path(args.input).expanduser())
    logging.info("Reading %s", "stdin" if input_name == STDIN else input_name)
    try:
        markdown_text = read_markdown(input_name)
    except (OSError, UnicodeDecodeError) as e:
        parser.error(f"Cannot read input {args.input}: {e}")
    logging.debug("Markdown length: %d chars", len(markdown_text))
    if not markdown_text.strip():
        logging.error("Nothing to convert: input is empty.")
        return 1

    logging.info("Converting markdown...")
    try:
        result = converter.convert(markdown_text, options)
    except converter.ConversionFailed as e:
        logging.error("Failed to convert document. Please check your Markdown syntax. (%s)", e)
        return 1

    output_path = resolve_output_path(input_name, args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(result.docx)
    logging.info("Saved DOCX to %s", output_path)

    if args.html:
        html_path = Path(args.html)
        html_path.parent.mkdir(parents=True, exist_ok=True)
        html_path.write_text(
            renderer_html.render_page(result.document, title=options.title),
            encoding="utf-8",
        )
        logging.info("Saved HTML preview to %s", html_path)

    logging.info("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
