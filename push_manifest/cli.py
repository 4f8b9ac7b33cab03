"""
Command-line interface for the push-manifest generator.
"""

import argparse
import asyncio
import sys

from push_manifest import __version__
from push_manifest.config import DEFAULT_MANIFEST_NAME
from push_manifest.core.manifest import PushManifest
from push_manifest.errors import PushManifestError
from push_manifest.utils.log import log, setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="push-manifest",
        description="Generate an HTTP/2 push manifest by scanning HTML "
                    "documents for the resources they reference.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  push-manifest -f index.html\n"
            "  push-manifest -f index.html -f page.html -o push.json\n"
            "  push-manifest app/index.html --base app\n"
            "\n"
            "With more than one document the manifest is keyed by document "
            "name.\n"
            "The output name can also be set via the PUSH_MANIFEST_NAME "
            "env var."
        ),
    )
    parser.add_argument(
        "documents", nargs="*", metavar="FILE",
        help="HTML document(s) to scan",
    )
    parser.add_argument(
        "-f", "--file", dest="files", action="append", default=[],
        metavar="FILE",
        help="HTML document to scan (repeatable)",
    )
    parser.add_argument(
        "-o", "--output", "-n", "--name", dest="name",
        default=DEFAULT_MANIFEST_NAME,
        help=f"Manifest filename (default: {DEFAULT_MANIFEST_NAME})",
    )
    parser.add_argument(
        "--base", default=None, metavar="DIR",
        help="Directory served as '/' (default: each document's directory)",
    )
    parser.add_argument(
        "--no-css", dest="scan_stylesheets", action="store_false", default=True,
        help="Do not read local stylesheets for fonts and images",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )
    verbosity.add_argument(
        "-q", "--quiet", action="store_true",
        help="Only report warnings and errors",
    )
    parser.add_argument(
        "--log-file", default=None,
        help="Also write a full DEBUG log to this file",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args(argv)
    args.inputs = args.files + args.documents
    if not args.inputs:
        parser.error("no input documents given (use -f FILE)")
    return args


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the CLI. Returns the process exit status.
    """
    args = parse_args(argv)
    setup_logging(debug=args.debug, quiet=args.quiet, log_file=args.log_file)

    try:
        manifest = PushManifest(
            args.inputs,
            name=args.name,
            base_dir=args.base,
            scan_stylesheets=args.scan_stylesheets,
            show_progress=len(args.inputs) > 1 and sys.stderr.isatty(),
        )
        asyncio.run(manifest.run())
    except PushManifestError as exc:
        log.error("[ERR] %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
