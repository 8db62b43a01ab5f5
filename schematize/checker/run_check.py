#!/usr/bin/env python3
# Copyright 2025 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""CLI entry point for checking instance files against a schema."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from ..config import checker_config
from ..exceptions import SchemaReferenceError
from ..file_io.template_renderer import ReportRenderer
from . import CheckResult, check_files, resolve_schema_reference

logger = logging.getLogger(__name__)

INSTANCE_EXTENSIONS = ('.yaml', '.yml', '.json')
OUTPUT_FORMATS = ('human', 'json', 'github-actions', 'markdown')


def find_instance_files(paths: List[str]) -> List[Path]:
    """Find all YAML/JSON instance files in the given paths."""
    instance_files = []

    for path_str in paths:
        path = Path(path_str)

        if not path.exists():
            logger.warning(f"Path does not exist: {path}")
            continue

        if path.is_file():
            if path.suffix in INSTANCE_EXTENSIONS:
                instance_files.append(path)
            else:
                logger.warning(f"File is not a YAML or JSON document: {path}")
        elif path.is_dir():
            for ext in INSTANCE_EXTENSIONS:
                instance_files.extend(path.rglob(f'*{ext}'))
        else:
            logger.warning(f"Path is neither file nor directory: {path}")

    return sorted(set(instance_files))


def _location(entry: dict) -> str:
    if 'line' not in entry:
        return ""
    if 'column' in entry:
        return f":{entry['line']}:{entry['column']}"
    return f":{entry['line']}"


def format_human(results: List[CheckResult]) -> str:
    lines = []
    for result in results:
        if result.errors or result.warnings:
            lines.append(f"\n{result.file_path}:")
            for error in result.errors:
                path = error.get('path') or '<root>'
                lines.append(f"  ERROR{_location(error)}: {path}: {error['message']}")
            for warning in result.warnings:
                lines.append(f"  WARNING{_location(warning)}: {warning['message']}")
    return "\n".join(lines)


def format_json(results: List[CheckResult]) -> str:
    output = {
        'files': len(results),
        'errors': sum(len(r.errors) for r in results),
        'warnings': sum(len(r.warnings) for r in results),
        'results': [r.to_dict() for r in results],
    }
    return json.dumps(output, indent=2)


def format_github_actions(results: List[CheckResult]) -> str:
    lines = []
    for result in results:
        for error in result.errors:
            lines.append(f"::error file={result.file_path},line={error.get('line', 1)}::{error['message']}")
        for warning in result.warnings:
            lines.append(f"::warning file={result.file_path},line={warning.get('line', 1)}::{warning['message']}")
    return "\n".join(lines)


def format_markdown(results: List[CheckResult], schema_ref: str) -> str:
    return ReportRenderer().render_check_report(results, schema_ref)


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the checker CLI."""
    parser = argparse.ArgumentParser(
        description='Check YAML/JSON instance files against a schematize schema',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'paths',
        nargs='*',
        default=None,
        help='File paths or directories to check (default: current directory)',
    )
    parser.add_argument(
        '--schema',
        required=True,
        help="Schema to check against, as 'package.module:attribute'",
    )
    parser.add_argument(
        '--format',
        choices=OUTPUT_FORMATS,
        default=checker_config.output_format if checker_config.output_format in OUTPUT_FORMATS else 'human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--log-level',
        default=None,
        help='Logging level (default: SCHEMATIZE_LOG_LEVEL or WARNING)',
    )

    args = parser.parse_args(argv)

    if args.log_level:
        checker_config.log_level = args.log_level
    checker_config.set_logging()

    if not args.paths:
        args.paths = ['.']

    try:
        schema = resolve_schema_reference(args.schema)
    except SchemaReferenceError as e:
        logger.error(str(e))
        sys.exit(2)

    instance_files = find_instance_files(args.paths)

    if not instance_files:
        logger.error("No YAML or JSON instance files found.")
        sys.exit(1)

    results = check_files(instance_files, schema)

    if args.format == 'json':
        output = format_json(results)
    elif args.format == 'github-actions':
        output = format_github_actions(results)
    elif args.format == 'markdown':
        output = format_markdown(results, args.schema)
    else:
        output = format_human(results)
    if output:
        print(output)

    total_errors = sum(len(r.errors) for r in results)
    if total_errors > 0:
        sys.exit(1)
    if args.format == 'human':
        print(f"Check succeeded for {len(results)} file(s) with no errors.")
    sys.exit(0)


if __name__ == '__main__':
    main()
