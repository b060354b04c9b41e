#!/usr/bin/env python3

# Review a working copy against its last committed version, word by word.

__version__ = '0.3.1'

import getopt
import os
import shutil
import sys

from loguru import logger

from annodiff.strtobool import strtobool

USAGE = ('annodiff [-b baseline file] [-m comment marker] [-w width] [-u unified] [-c changes only]'
         ' [-l log level - TRACE, DEBUG, INFO, SUCCESS, WARNING(default), ERROR, CRITICAL] FILE')


def get_version():
    return __version__


def configure_logger(logger_level):
    # Without this, a logger will be duplicated
    logger.remove()
    log_level_for_stdout = {'TRACE', 'DEBUG', 'INFO', 'SUCCESS'}
    logger.configure(handlers=[
        {"sink": sys.stdout, "level": logger_level,
         "filter": lambda record: record['level'].name in log_level_for_stdout},
        {"sink": sys.stderr, "level": logger_level,
         "filter": lambda record: record['level'].name not in log_level_for_stdout},
    ])


def main(argv=None):
    from annodiff import git
    from annodiff.annotations import detect_comment_style, read_annotated_file
    from annodiff.diff import calculate_diff
    from annodiff.render import render_side_by_side, render_unified

    if argv is None:
        argv = sys.argv[1:]

    try:
        opts, args = getopt.getopt(argv, "b:m:w:ucl:")
    except getopt.GetoptError:
        print(USAGE)
        sys.exit(2)

    baseline_path = None
    comment_style = os.getenv('ANNODIFF_COMMENT_MARKER')
    width = shutil.get_terminal_size().columns
    unified = False
    try:
        changes_only = strtobool(os.getenv('ANNODIFF_CHANGES_ONLY', 'false'))
    except ValueError as e:
        print(f"ANNODIFF_CHANGES_ONLY: {str(e)}")
        sys.exit(2)

    # Keep the review output readable, debug lines go to stdout as well
    logger_level = 'WARNING'
    # Set a logger level via shell env variable
    if os.getenv("LOGGER_LEVEL"):
        level = os.getenv("LOGGER_LEVEL")
        logger_level = int(level) if level.isdigit() else level.upper()

    for opt, arg in opts:
        if opt == '-b':
            baseline_path = arg

        if opt == '-m':
            comment_style = arg

        if opt == '-w':
            if not arg.isdigit():
                print(USAGE)
                sys.exit(2)
            width = int(arg)

        if opt == '-u':
            unified = True

        if opt == '-c':
            changes_only = True

        if opt == '-l':
            logger_level = int(arg) if arg.isdigit() else arg.upper()

    try:
        configure_logger(logger_level)
    # Catch negative number or wrong log level name
    except ValueError:
        print("Available log level names: TRACE, DEBUG, INFO, SUCCESS,"
              " WARNING(default), ERROR, CRITICAL")
        sys.exit(2)

    if len(args) != 1:
        print(USAGE)
        sys.exit(2)

    path = args[0]
    if comment_style is None:
        comment_style = detect_comment_style(path)

    try:
        lines = read_annotated_file(path, comment_style)
    except (OSError, UnicodeDecodeError) as e:
        logger.critical(f"ERROR: Could not read '{path}' - {str(e)}")
        sys.exit(2)

    if baseline_path:
        try:
            with open(baseline_path, 'r', encoding='utf-8', newline='') as f:
                baseline = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.critical(f"ERROR: Could not read baseline '{baseline_path}' - {str(e)}")
            sys.exit(2)
    else:
        try:
            baseline = git.get_head_content(path)
        except git.BaselineUnavailable as e:
            logger.warning(f"{str(e)}, showing every line as added")
            baseline = ''

    result = calculate_diff(lines, baseline, comment_style)

    if unified:
        output = render_unified(result, changes_only=changes_only)
    else:
        output = render_side_by_side(result, width=width)

    if output:
        print(output)

    if not result.has_changes:
        logger.success("No changes against the baseline")

    return 0
