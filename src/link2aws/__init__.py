import argparse
import sys
from importlib.metadata import PackageNotFoundError, version

from rich.console import Console

from .core.app import read_arns, resolve_links, run_interactive
from .core.arn import ArnShape, ParsedArn, parse
from .core.errors import (
    ArnError,
    ConsoleLinkError,
    InvalidCharactersError,
    InvalidRegionError,
    MalformedArnError,
    NotAnArnError,
    TooLongError,
    TypeMismatchError,
    UnknownServiceError,
    UnsupportedPartitionError,
    UnsupportedResourceTypeError,
)
from .services.registry import LINK_TEMPLATES, coverage
from .ui import LinkUI

try:
    __version__ = version("link2aws")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "LINK_TEMPLATES",
    "ArnError",
    "ArnShape",
    "ConsoleLinkError",
    "InvalidCharactersError",
    "InvalidRegionError",
    "MalformedArnError",
    "NotAnArnError",
    "ParsedArn",
    "TooLongError",
    "TypeMismatchError",
    "UnknownServiceError",
    "UnsupportedPartitionError",
    "UnsupportedResourceTypeError",
    "main",
    "parse",
]

console = Console()


def main() -> None:
    """Turn AWS ARNs into AWS console links."""
    parser = argparse.ArgumentParser(description="Turn AWS ARNs into AWS console links")
    parser.add_argument("arns", nargs="*", metavar="ARN", help="ARNs to link; read from stdin when omitted")
    parser.add_argument("--version", action="version", version=f"link2aws {__version__}")
    parser.add_argument("--open", action="store_true", help="Also open each link in the default browser")
    parser.add_argument("--coverage", action="store_true", help="List supported services and resource types")
    args = parser.parse_args()

    if args.coverage:
        LinkUI().display_coverage(coverage())
        return

    if args.arns:
        resolve_links(args.arns, open_links=args.open)
        return

    if not sys.stdin.isatty():
        resolve_links(read_arns(sys.stdin), open_links=args.open)
        return

    console.print("🔗 Welcome to link2aws!", style="bold cyan")
    console.print("Paste an ARN, get an AWS console link\n", style="dim")
    try:
        run_interactive(LinkUI())
    except KeyboardInterrupt:
        console.print("\n👋 Goodbye!", style="cyan")


if __name__ == "__main__":
    main()
