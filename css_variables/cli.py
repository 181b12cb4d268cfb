#!/usr/bin/env python3
"""
Command-line interface for CSS Variables.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from css_variables.core.models import ListingState
from css_variables.core.service import COPY_FORMATS, VariableSearchService, format_variable
from css_variables.managers.factory import ManagerFactory
from css_variables.utils.config import ALL_CATEGORY, LOG_LEVEL, PREFERENCES_FILE, VERSION, load_preferences
from css_variables.utils.error import ConfigurationError
from css_variables.utils.logging import setup_logging
from css_variables.utils.ui import NotificationStyle, UserInterface

logger = logging.getLogger(__name__)

PROMPT = 'search> '
INTERACTIVE_HELP = (
    "Type search terms to filter. Commands: "
    ":c NAME select category, :categories list categories, "
    ":r refresh, :q quit"
)

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='css-variables',
        description='Search CSS custom properties in a local file or remote stylesheet'
    )

    parser.add_argument(
        'terms',
        help='Search terms, all must match the variable name or value',
        nargs='*'
    )

    # Input source
    parser.add_argument(
        '-f', '--file',
        help='Path to CSS file (takes priority over --url)'
    )
    parser.add_argument(
        '-u', '--url',
        help='URL of CSS file'
    )
    parser.add_argument(
        '--config',
        help='Preferences JSON file',
        type=Path,
        default=PREFERENCES_FILE
    )

    # Listing options
    parser.add_argument(
        '-p', '--prefix',
        help='Variable prefix used to derive categories, e.g. --prefix=--app-'
    )
    parser.add_argument(
        '-c', '--category',
        help='Only show this category',
        default=ALL_CATEGORY
    )
    parser.add_argument(
        '--categories',
        help='List available categories and exit',
        action='store_true'
    )
    parser.add_argument(
        '--no-color-preview',
        help='Do not show color swatches',
        dest='color_preview',
        action='store_false',
        default=None
    )
    parser.add_argument(
        '--print',
        help='Print only the chosen form of each variable',
        dest='print_format',
        choices=COPY_FORMATS
    )
    parser.add_argument(
        '--format',
        help='Output format',
        dest='output_format',
        choices=['text', 'json'],
        default='text'
    )

    # Other options
    parser.add_argument(
        '-i', '--interactive',
        help='Keep the listing open and read queries from stdin',
        action='store_true'
    )
    parser.add_argument(
        '--log-file',
        help='Also write log records to this file'
    )
    parser.add_argument(
        '-v', '--verbose',
        help='Enable verbose output',
        action='store_true'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {VERSION}'
    )

    return parser.parse_args(argv)

def render(service: VariableSearchService, ui: UserInterface, state: ListingState,
           category: str, query: str, print_format: Optional[str] = None,
           settings_path: Optional[Path] = None) -> None:
    """Render the current listing or its error entry."""
    if state.error is not None:
        ui.render_error(state.error)
        if ui.output_format == 'text':
            ui.write(f"  Preferences: {settings_path or PREFERENCES_FILE}")
        return

    sections = service.sections(category, query)
    if print_format:
        lines = [format_variable(v, print_format) for section in sections for v in section.variables]
        ui.render_lines(lines)
        if lines:
            ui.notify(NotificationStyle.SUCCESS, f"Printed {len(lines)} variables", f"format: {print_format}")
        return
    ui.render_sections(sections, service.color_for)

def interactive(service: VariableSearchService, ui: UserInterface, category: str,
                query: str, stdin=None, settings_path: Optional[Path] = None) -> None:
    """Read queries line by line until EOF or :q."""
    stdin = stdin or sys.stdin
    ui.write(INTERACTIVE_HELP)
    while True:
        ui.stream.write(PROMPT)
        ui.stream.flush()
        line = stdin.readline()
        if not line:
            break
        line = line.strip()
        if line in (':q', ':quit'):
            break
        if line in (':r', ':refresh'):
            render(service, ui, service.refresh(), category, query, settings_path=settings_path)
            continue
        if line == ':categories':
            ui.render_lines(service.categories())
            continue
        if line == ':c' or line.startswith(':c '):
            category = line[2:].strip() or ALL_CATEGORY
        else:
            query = line
        render(service, ui, service.state, category, query, settings_path=settings_path)

def main(argv: Optional[List[str]] = None, ui: Optional[UserInterface] = None,
         factory: Optional[ManagerFactory] = None, stdin=None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else LOG_LEVEL, args.log_file)

    ui = ui or UserInterface()
    ui.set_verbosity(args.verbose, False)
    ui.set_output_format(args.output_format)

    try:
        preferences = load_preferences(args.config).merged(
            css_file_path=args.file,
            css_file_url=args.url,
            filter_prefix=args.prefix,
            show_color_preview=args.color_preview
        )
    except ConfigurationError as e:
        ui.print_error(str(e))
        return 1

    with (factory or ManagerFactory()) as managers:
        service = VariableSearchService(
            preferences,
            loader=managers.create_source_loader(),
            cache=managers.create_cache_manager(),
            notifier=ui
        )
        state = service.load()
        query = ' '.join(args.terms)

        if state.ok and args.categories:
            ui.render_lines(service.categories())
        elif args.interactive:
            render(service, ui, state, args.category, query, settings_path=args.config)
            interactive(service, ui, args.category, query, stdin, settings_path=args.config)
        else:
            render(service, ui, state, args.category, query, args.print_format,
                   settings_path=args.config)

        ui.print_debug(f"Manager stats: {managers.get_all_stats()}")
        return 0 if service.state.ok else 1

if __name__ == '__main__':
    sys.exit(main())
