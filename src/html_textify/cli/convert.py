"""
Command-line interface for HTML to text conversion.

Usage:
    # Single file
    html-textify page.html

    # E-mail preview
    html-textify message.eml

    # Directory batch processing
    html-textify mails/ --output previews.jsonl

    # From stdin
    curl -s https://example.com | html-textify -
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from html_textify.config import settings
from html_textify.converter import EML_SUFFIXES, HTML_SUFFIXES, convert_source, convert_stream
from html_textify.exceptions import TextifyError
from html_textify.logging_config import get_logger, setup_logging
from html_textify.models.conversion import ConversionResult
from html_textify.parsing.html_parser import SUPPORTED_PARSERS
from html_textify.rendering import RenderOptions


# Setup logging
setup_logging()
logger = get_logger(__name__)

SOURCE_SUFFIXES = HTML_SUFFIXES | EML_SUFFIXES


# ============================================================================
# CLI FUNCTIONS
# ============================================================================

def process_single_file(
    path: Path,
    parser: Optional[str] = None,
    encoding: Optional[str] = None,
) -> ConversionResult:
    """
    Convert a single HTML or .eml file.

    Raises:
        TextifyError: On decoding or parsing errors
        OSError: If the file cannot be read
    """
    logger.debug("processing_file", path=str(path))

    result = convert_source(
        path,
        options=RenderOptions.from_settings(settings),
        parser=parser,
        encoding=encoding,
    )

    logger.debug(
        "file_converted",
        path=str(path),
        source_type=result.source_type,
        encoding=result.encoding,
        char_count=result.char_count,
    )

    return result


def process_directory(
    dir_path: Path,
    parser: Optional[str] = None,
    encoding: Optional[str] = None,
    verbose: bool = False,
) -> List[ConversionResult]:
    """
    Convert all HTML and .eml files below a directory.

    Files that fail are logged and skipped.
    """
    source_files = sorted(
        p for p in dir_path.glob("**/*") if p.is_file() and p.suffix.lower() in SOURCE_SUFFIXES
    )

    if not source_files:
        logger.warning("no_source_files_found", directory=str(dir_path))
        return []

    logger.info("processing_directory", files_count=len(source_files))

    results = []
    failed = 0

    for idx, source_file in enumerate(source_files, 1):
        try:
            if verbose:
                print(f"[{idx}/{len(source_files)}] Converting {source_file.name}...", file=sys.stderr)

            results.append(
                process_single_file(source_file, parser=parser, encoding=encoding)
            )

        except (TextifyError, OSError) as e:
            logger.error("file_processing_failed", file=str(source_file), error=str(e))
            failed += 1

    logger.info(
        "directory_processing_completed",
        total=len(source_files),
        success=len(results),
        errors=failed,
    )

    return results


def format_results(results: List[ConversionResult], format: str = "text") -> str:
    """
    Serialize results for output.

    Args:
        results: Conversion results
        format: "text", "json" or "jsonl"
    """
    if format == "jsonl":
        return "".join(json.dumps(r.model_dump(), ensure_ascii=False) + "\n" for r in results)
    if format == "json":
        return json.dumps([r.model_dump() for r in results], ensure_ascii=False, indent=2) + "\n"

    if len(results) == 1:
        return results[0].text + "\n"
    # Several documents: separate them with a header line
    return "".join(f"==> {r.source} <==\n{r.text}\n\n" for r in results)


def write_output(results: List[ConversionResult], output_path: Optional[Path], format: str = "text"):
    """
    Write results to a file, or to stdout when no path is given.
    """
    content = format_results(results, format)

    if not output_path:
        sys.stdout.write(content)
        return

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")

    logger.info("output_written", path=str(output_path), count=len(results))


# ============================================================================
# MAIN CLI
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html-textify",
        description="Render HTML documents and e-mails as readable plain text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Single file to stdout
  %(prog)s page.html

  # E-mail body preview
  %(prog)s message.eml

  # Process directory, save to file
  %(prog)s mails/ --output previews.jsonl

  # Read from stdin with a given encoding
  %(prog)s - --encoding iso-8859-1 < page.html
        """,
    )

    parser.add_argument(
        "input",
        type=str,
        help="Path to .html/.eml file, directory, or '-' for stdin",
    )

    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Output file path (default: stdout). .json/.jsonl extensions select the format",
    )

    parser.add_argument(
        "--format",
        "-f",
        type=str,
        choices=["text", "json", "jsonl"],
        default="text",
        help="Output format (default: text)",
    )

    parser.add_argument(
        "--parser",
        type=str,
        choices=list(SUPPORTED_PARSERS),
        default=None,
        help=f"HTML tree builder (default: {settings.html_parser})",
    )

    parser.add_argument(
        "--encoding",
        "-e",
        type=str,
        default=None,
        help="Encoding of HTML input when it carries no byte-order mark",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        setup_logging(log_level="DEBUG")

    output_path = Path(args.output) if args.output else None

    # Auto-detect format from file extension
    format = args.format
    if output_path and format == "text" and output_path.suffix in (".json", ".jsonl"):
        format = output_path.suffix[1:]

    try:
        if args.input == "-":
            results = [
                convert_stream(
                    sys.stdin.buffer,
                    options=RenderOptions.from_settings(settings),
                    parser=args.parser,
                    encoding=args.encoding,
                )
            ]

        else:
            input_path = Path(args.input)

            if not input_path.exists():
                print(f"Error: Path not found: {input_path}", file=sys.stderr)
                sys.exit(1)

            if input_path.is_dir():
                results = process_directory(
                    input_path, parser=args.parser, encoding=args.encoding, verbose=args.verbose
                )
            else:
                results = [
                    process_single_file(input_path, parser=args.parser, encoding=args.encoding)
                ]

        write_output(results, output_path, format)

        if args.verbose:
            print(f"\n✓ Converted {len(results)} documents successfully", file=sys.stderr)

    except (TextifyError, OSError) as e:
        logger.error("cli_failed", error=str(e), exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
