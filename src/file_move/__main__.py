"""Command line entry point for the file move tool."""

import argparse
import asyncio
from datetime import datetime, timezone
import glob
import logging
from logging.handlers import RotatingFileHandler
import os
import sys
from typing import List
import uuid

from mcp_tool import MCPToolCall, MCPToolManager
from project_directories import ProjectDirectories, ProjectSettings, ProjectSettingsError
from project_files import LocalFiles
from file_move.file_move_mcp_tool import FileMoveMCPTool
from file_move.file_move_operation import FileMoveOperation


DEFAULT_LOG_DIR = "~/.file_move/logs"


def setup_logging(log_dir: str, level: str) -> None:
    """
    Configure logging with timestamped files and rotation.

    Only the first call in a process opens a log file; later calls leave the
    existing handler in place.
    """
    root_logger = logging.getLogger()
    if any(isinstance(h, RotatingFileHandler) for h in root_logger.handlers):
        return

    log_dir = os.path.expanduser(log_dir)
    os.makedirs(log_dir, exist_ok=True)

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d-%H-%M-%S-%f")[:23]
    log_file = os.path.join(log_dir, f"{timestamp}.log")

    # Keep up to 50 log files, max 1MB each
    handler = RotatingFileHandler(
        log_file,
        maxBytes=1024*1024,
        backupCount=49,
        encoding='utf-8'
    )

    handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    cleanup_old_logs(log_dir, max_logs=50)


def cleanup_old_logs(log_dir: str, max_logs: int) -> None:
    """Remove oldest log files if we exceed maximum count."""
    log_files = glob.glob(os.path.join(log_dir, "*.log*"))
    log_files.sort(key=os.path.getctime)

    while len(log_files) > max_logs:
        try:
            os.remove(log_files.pop(0))

        except OSError:
            pass  # Another process may have removed it already


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="file_move",
        description="Move a file within the project directory structure",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s a/in.txt b/out.txt                    # Move within the current directory
  %(prog)s --root ~/project src/x.py lib/x.py   # Move within another project
  %(prog)s --no-create-directory a.txt b/a.txt   # Fail if b/ does not exist
        """
    )

    parser.add_argument('source', help='File to move, relative to the project root')
    parser.add_argument('destination', help='New location, relative to the project root')

    parser.add_argument(
        '--no-create-directory',
        action='store_true',
        help='Do not create the destination directory if it is missing'
    )

    parser.add_argument('--root', help='Project root (overrides the settings file)')
    parser.add_argument('--settings', help='JSON settings file')
    parser.add_argument('--log-dir', default=DEFAULT_LOG_DIR, help='Directory for log files')
    parser.add_argument('--log-level', help='Log level (overrides the settings file)')

    return parser


def load_settings(args: argparse.Namespace) -> ProjectSettings:
    """
    Build settings from the settings file and command line overrides.

    Raises:
        ProjectSettingsError: If the settings file cannot be loaded or an override is invalid
    """
    settings = ProjectSettings.load(args.settings) if args.settings else ProjectSettings.create_default()

    if args.root:
        settings.root_path = args.root

    if args.log_level:
        settings.log_level = ProjectSettings.check_log_level(args.log_level)

    return settings


def run(argv: List[str] | None = None) -> int:
    """
    Run a single file move.

    Args:
        argv: Command line arguments, excluding the program name

    Returns:
        Process exit code: 0 on success or warning, 1 on error
    """
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args)

    except ProjectSettingsError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        return 1

    setup_logging(args.log_dir, settings.log_level)
    logger = logging.getLogger("file_move")
    logger.debug("Project root: %s", settings.root_path)

    operation = FileMoveOperation(
        LocalFiles(), ProjectDirectories(settings.root_path), restrict_to_root=settings.restrict_to_root
    )
    tool = FileMoveMCPTool(operation)

    manager = MCPToolManager()
    tool_name = tool.get_definition().name
    manager.unregister_tool(tool_name)
    manager.register_tool(tool)

    tool_call = MCPToolCall(
        id=str(uuid.uuid4()),
        name=tool_name,
        arguments={
            "source": args.source,
            "destination": args.destination,
            "createDirectory": not args.no_create_directory
        }
    )
    result = asyncio.run(manager.call_tool(tool_call))

    print(result.text, file=sys.stderr if result.is_error else sys.stdout)
    return 1 if result.is_error else 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
