#!/usr/bin/env python3
"""
FM_STEPS — FileMaker script step decompiler
Renders FileMaker script XML into plain text, one canonical line per step,
for diffing and version control.

Usage:
    fm-steps script.xml             # Decompile file → stdout
    fm-steps script.xml -o out.txt  # Decompile file → text file
    cat script.xml | fm-steps       # Decompile stdin → stdout
"""

from fm_steps import __version__

# ============================================================
#  CHANGELOG
# ============================================================
# 0.1.0  2026-10-19  Initial release. Per-step renderer with label
#                     display policies (ON/OFF, Label: ON/OFF, flag),
#                     List and Comment parameters, snippet decompile
#                     with block indentation and // disabled prefix.
# ============================================================

import logging
import sys

from fm_steps.decompile import decompile_xml
from fm_steps.errors import MalformedInput

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


# ============================================================
#  CLI
# ============================================================

def print_banner(mode):
    print("=" * 60)
    print(f"  FM_STEPS — FileMaker Script Step Decompiler  v{__version__}")
    print(f"  Mode: {mode}")
    print("=" * 60)


def print_usage():
    print_banner("fm_steps")
    print("  Usage: fm-steps [--debug] [-o file] [input]")
    print()
    print("  Reads FM XML in the ParameterValues export format from a file or stdin")
    print("  and renders one plain text line per script step.")
    print()
    print("  Options:")
    print("    -o file     Write output to file instead of stdout")
    print("    --debug     Log parameter decoding details to stderr")
    print("    -v          Print version")
    print()
    print("  Examples:")
    print("    fm-steps script.xml              # Decompile file → stdout")
    print("    fm-steps script.xml -o out.txt   # Decompile → save text file")
    print("=" * 60)


def parse_args(args):
    """Split CLI args into (file_path, output_file, debug).
    Returns an error string instead when an option is missing its value."""
    output_file = None
    file_path = None
    debug = False

    # Parse -o/--output with its value
    skip_next = False
    for i, a in enumerate(args):
        if skip_next:
            skip_next = False
            continue
        if a in ('-o', '--output'):
            if i + 1 >= len(args):
                return f"Option {a} requires a file name"
            output_file = args[i + 1]
            skip_next = True
        elif a == '--debug':
            debug = True
        else:
            file_path = a

    return file_path, output_file, debug


def print_error(source, message):
    print_banner(f"decompile — {source}")
    print(f"  ✗ ERROR: {message}")
    print("=" * 60)


def cmd_process(file_path=None, output_file=None):
    """Decompile a file or stdin. Returns the process exit code."""
    # --- Get input ---
    if file_path and file_path != '-':
        source = file_path
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            print_error(source, f"Cannot read {file_path}: {e}")
            return 1
    else:
        content = sys.stdin.read()
        source = "stdin"

    if not content.strip():
        print_error(source, "No input")
        return 1

    # --- Decompile ---
    try:
        plain_text = decompile_xml(content)
    except MalformedInput as e:
        print_error(source, e)
        return 1

    if output_file:
        try:
            with open(output_file, 'w', encoding='utf-8') as f:
                f.write(plain_text + '\n')
        except OSError as e:
            print_error(source, f"Cannot write {output_file}: {e}")
            return 1
        print_banner(f"decompile — {source}")
        print(f"  {len(plain_text.splitlines())} lines decompiled")
        print(f"  → Saved to {output_file}")
        print("=" * 60)
    else:
        # Plain text only, so the output can be piped or redirected
        print(plain_text)
    return 0


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)

    if args and args[0] in ('-v', '--version'):
        print(f"fm-steps {__version__}")
        return 0

    if args and args[0] in ('-h', '--help'):
        print_usage()
        return 0

    parsed = parse_args(args)
    if isinstance(parsed, str):
        print_banner("fm_steps")
        print(f"  ✗ ERROR: {parsed}")
        print("  Usage: fm-steps [--debug] [-o file] [input]")
        print("=" * 60)
        return 2
    file_path, output_file, debug = parsed

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    return cmd_process(file_path, output_file)


if __name__ == '__main__':
    sys.exit(main())
