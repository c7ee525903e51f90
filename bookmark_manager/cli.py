"""
Command-line interface for the Bookmark Manager.

This module provides the CLI for adding, editing, deleting, listing,
importing and exporting bookmarks kept in the local store.
"""

import argparse
import logging
import sys
from pathlib import Path

from bookmark_manager import __version__
from bookmark_manager.config.configuration import Configuration
from bookmark_manager.config.pydantic_config import ConfigurationManager
from bookmark_manager.ui.app import BookmarkManagerApp
from bookmark_manager.ui.header import Theme
from bookmark_manager.ui.notifications import NotificationLevel
from bookmark_manager.utils.error_handler import BookmarkManagerError, ValidationError
from bookmark_manager.utils.logging_setup import setup_logging
from bookmark_manager.utils.validation import validate_config_file, validate_output_file


class CLIInterface:
    """Command line interface driving BookmarkManagerApp."""

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser."""
        parser = argparse.ArgumentParser(
            prog="bookmark-manager",
            description="Bookmark Manager - keep, import and export bookmarks locally",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  bookmark-manager add --title Example --url https://example.com --tags "demo, sample"
  bookmark-manager list
  bookmark-manager edit 3f2a... --title "New title"
  bookmark-manager delete 3f2a...
  bookmark-manager import exported_bookmarks.html
  bookmark-manager export --output ~/Downloads/bookmarks.html
  bookmark-manager theme toggle

Configuration:
  Settings are read from --config, ./user_config.toml, ./user_config.json
  or ~/.bookmark_manager/config.toml. BOOKMARK_MANAGER_STORE overrides the
  store location.
            """,
        )

        parser.add_argument(
            "--version", "-V", action="version", version=f"%(prog)s {__version__}"
        )
        parser.add_argument(
            "--config",
            "-c",
            help="Custom configuration file path (TOML or JSON format)",
        )
        parser.add_argument(
            "--store",
            "-s",
            help="Local store file (overrides configuration)",
        )
        parser.add_argument(
            "--verbose",
            "-v",
            action="store_true",
            help="Enable debug logging",
        )

        subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
        subparsers.required = True

        list_parser = subparsers.add_parser("list", help="List bookmarks")
        list_parser.add_argument(
            "--json", action="store_true", help="Print the collection as JSON"
        )

        add_parser = subparsers.add_parser("add", help="Add a bookmark")
        add_parser.add_argument("--title", "-t", required=True, help="Bookmark title")
        add_parser.add_argument("--url", "-u", required=True, help="Bookmark URL")
        add_parser.add_argument("--description", "-d", default="", help="Description")
        add_parser.add_argument(
            "--tags", default="", help="Comma separated tags"
        )

        edit_parser = subparsers.add_parser("edit", help="Edit a bookmark")
        edit_parser.add_argument("id", help="Bookmark id")
        edit_parser.add_argument("--title", "-t", help="New title")
        edit_parser.add_argument("--url", "-u", help="New URL")
        edit_parser.add_argument("--description", "-d", help="New description")
        edit_parser.add_argument("--tags", help="New comma separated tags")

        delete_parser = subparsers.add_parser("delete", help="Delete a bookmark")
        delete_parser.add_argument("id", help="Bookmark id")

        import_parser = subparsers.add_parser(
            "import", help="Import bookmarks from an HTML file"
        )
        import_parser.add_argument("file", help="HTML bookmark file")
        import_parser.add_argument(
            "--skip-existing",
            action="store_true",
            help="Skip links whose URL is already bookmarked",
        )

        export_parser = subparsers.add_parser(
            "export", help="Export bookmarks as a Netscape HTML file"
        )
        export_parser.add_argument(
            "--output",
            "-o",
            help="Output file (default: bookmarks.html in the download directory)",
        )

        theme_parser = subparsers.add_parser("theme", help="Show or change the theme")
        theme_parser.add_argument(
            "value",
            nargs="?",
            choices=["light", "dark", "toggle"],
            help="Theme to select, or 'toggle'",
        )

        config_parser = subparsers.add_parser(
            "create-config", help="Write a sample configuration file"
        )
        config_parser.add_argument(
            "--format", choices=["toml", "json"], default="toml", help="File format"
        )
        config_parser.add_argument(
            "--output", "-o", help="Destination (default: user_config.<format>)"
        )
        config_parser.add_argument(
            "--force", action="store_true", help="Overwrite an existing file"
        )

        return parser

    def parse_args(self, args=None) -> argparse.Namespace:
        """Parse command line arguments."""
        return self.parser.parse_args(args)

    def process_arguments(self, args: argparse.Namespace) -> Configuration:
        """
        Load configuration and apply command-line overrides.

        Raises:
            ValidationError: If the configuration path is invalid
            ConfigurationError: If the configuration is invalid
        """
        config_path = validate_config_file(args.config)
        config = Configuration(config_path)
        config.update_from_args(
            {
                "store": args.store,
                "verbose": args.verbose,
                "skip_existing": getattr(args, "skip_existing", False),
            }
        )
        setup_logging(config, verbose=args.verbose)
        return config

    def _handle_create_config(self, args: argparse.Namespace) -> int:
        output_path = Path(args.output or f"user_config.{args.format}")
        if output_path.exists() and not args.force:
            print(
                f"Configuration file '{output_path}' already exists (use --force to overwrite)",
                file=sys.stderr,
            )
            return 1
        ConfigurationManager.create_sample_config(output_path, format=args.format)
        print(f"Created configuration file: {output_path}")
        return 0

    def _cmd_list(self, app: BookmarkManagerApp, args: argparse.Namespace) -> int:
        if args.json:
            print(app.list_view.render_json())
        else:
            print(app.list_view.render())
        return 0

    def _cmd_add(self, app: BookmarkManagerApp, args: argparse.Namespace) -> int:
        app.editor.set_title(args.title)
        app.editor.set_url(args.url)
        app.editor.set_description(args.description)
        app.editor.set_tags_text(args.tags)
        bookmark = app.handle_submit()
        print(bookmark.id)
        return 0

    def _cmd_edit(self, app: BookmarkManagerApp, args: argparse.Namespace) -> int:
        app.handle_edit(args.id)
        if args.title is not None:
            app.editor.set_title(args.title)
        if args.url is not None:
            app.editor.set_url(args.url)
        if args.description is not None:
            app.editor.set_description(args.description)
        if args.tags is not None:
            app.editor.set_tags_text(args.tags)
        bookmark = app.handle_submit()
        print(bookmark.id)
        return 0

    def _cmd_delete(self, app: BookmarkManagerApp, args: argparse.Namespace) -> int:
        removed = app.handle_delete(args.id)
        print(f"Deleted {removed.id}: {removed.title}")
        return 0

    def _cmd_import(self, app: BookmarkManagerApp, args: argparse.Namespace) -> int:
        result = app.import_file(args.file)
        return 1 if result.error else 0

    def _cmd_export(self, app: BookmarkManagerApp, args: argparse.Namespace) -> int:
        output_path = validate_output_file(args.output) if args.output else None
        result = app.handle_export(output_path)
        print(result.path)
        return 0

    def _cmd_theme(self, app: BookmarkManagerApp, args: argparse.Namespace) -> int:
        if args.value == "toggle":
            app.toggle_theme()
        elif args.value:
            app.header.theme_state.set_theme(Theme(args.value))
        print(app.header.theme_state.theme.value)
        return 0

    def _print_notifications(self, app: BookmarkManagerApp) -> None:
        for notification in app.notifications.drain():
            stream = sys.stdout if notification.level is NotificationLevel.INFO else sys.stderr
            print(str(notification), file=stream)

    def run(self, args=None) -> int:
        """Execute CLI interface."""
        parsed_args = self.parse_args(args)

        if parsed_args.command == "create-config":
            return self._handle_create_config(parsed_args)

        commands = {
            "list": self._cmd_list,
            "add": self._cmd_add,
            "edit": self._cmd_edit,
            "delete": self._cmd_delete,
            "import": self._cmd_import,
            "export": self._cmd_export,
            "theme": self._cmd_theme,
        }

        app = None
        try:
            config = self.process_arguments(parsed_args)

            logger = logging.getLogger(__name__)
            logger.debug(f"Command: {parsed_args.command}")
            logger.debug(f"Store: {config.store_path}")

            app = BookmarkManagerApp(config)
            return commands[parsed_args.command](app, parsed_args)

        except ValidationError as e:
            print(f"Validation Error: {e}", file=sys.stderr)
            return 1
        except BookmarkManagerError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        except Exception as e:
            print(f"Error: {e}", file=sys.stderr)
            logging.getLogger(__name__).exception("Unexpected error in CLI")
            return 1
        finally:
            if app is not None:
                self._print_notifications(app)


def main(args=None):
    """Main entry point for the CLI."""
    cli = CLIInterface()
    return cli.run(args)


if __name__ == "__main__":
    sys.exit(main())
