"""
Command-line interface for placesort.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from .config import Config
from .constants import PROGRAM, get_console, get_error_console
from .errors import InputError, PlacesortError, UserCancelled
from .session import OrganizeSession


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM,
        description="Interactively sort the photos and videos in the current directory "
                    "into DD-MM-YYYY_<place> folders by the day they were taken",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Run {PROGRAM} from inside the folder to organize. For each date you will be
shown the pictures and asked where they were taken:
  <name>  label the whole date with a place name and move its files
  n / p   show the next / previous picture of the date
  q       quit without touching the remaining files
        """
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--version", "-V", action="store_true",
        help=f"Display the version number of {PROGRAM} and exit"
    )

    return parser


def confirm_directory(console: Console) -> None:
    """Ask the user to confirm the working directory. Raises UserCancelled on 'n'."""
    while True:
        try:
            response = console.input("Do you want to continue? (y/n): ").strip().lower()
        except EOFError as e:
            raise InputError("Standard input closed before confirmation") from e

        if response == "y":
            console.print("Continuing")
            return
        if response == "n":
            console.print("Exiting")
            raise UserCancelled("Operation aborted by the user.")
        console.print("Invalid input, please enter 'y' or 'n'.")


def main(config_path: Optional[Path] = None) -> int:
    """Main entry point.

    Args:
        config_path: Optional path to config file (for testing)
    """
    parser = create_parser()
    args = parser.parse_args()

    if args.version:
        from . import __version__, __copyright__
        if args.verbose:
            print(f"{PROGRAM} version {__version__} {__copyright__}")
            return 0
        print(__version__)
        return 0

    console = get_console()
    error_console = get_error_console()
    config = Config(config_path=config_path)

    directory = Path.cwd()
    console.print(f"The current working directory is: {escape(str(directory))}")

    session = None
    try:
        confirm_directory(console)
        session = OrganizeSession(directory, config, console=console, verbose=args.verbose)
        session.run()
    except UserCancelled as e:
        error_console.print(f"[red]{escape(str(e))}[/red]")
        return 1
    except KeyboardInterrupt:
        error_console.print("\n[red]Operation cancelled by user[/red]")
        return 1
    except PlacesortError as e:
        error_console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1
    except OSError as e:
        error_console.print(f"[red]Fatal error: {escape(str(e))}[/red]")
        return 1
    finally:
        if session is not None:
            session.close()

    console.print("\n[green]✓ All dates organized![/green]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
