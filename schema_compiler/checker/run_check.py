#!/usr/bin/env python3
# Copyright 2026 TIER IV, inc.
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

"""CLI entry point for checking documents against a JSON Schema."""

import argparse
import json
import sys
from typing import List, Optional

from ..config import compiler_config
from ..exceptions import SchemaCompilerError
from ..utils.source_location import format_source
from . import CheckResult, check_documents


def _print_json(results: List[CheckResult]) -> None:
    output = {
        'files': len(results),
        'errors': sum(len(r.errors) for r in results),
        'warnings': sum(len(r.warnings) for r in results),
        'results': [
            {
                'file': str(r.file_path),
                'errors': r.errors,
                'warnings': r.warnings,
            }
            for r in results
        ],
    }
    print(json.dumps(output, indent=2))


def _print_github_actions(results: List[CheckResult]) -> None:
    for result in results:
        for level, entries in (('error', result.errors), ('warning', result.warnings)):
            for entry in entries:
                position = f"line={entry.get('line', 1)}"
                if 'column' in entry:
                    position += f",col={entry['column']}"
                print(f"::{level} file={result.file_path},{position}::{entry['message']}")


def _print_human(results: List[CheckResult]) -> None:
    for result in results:
        if not (result.errors or result.warnings):
            continue
        print(f"\n{result.file_path}:")
        for error in result.errors:
            print(f"  ERROR: {error['message']}{format_source(result.location(error))}")
        for warning in result.warnings:
            print(f"  WARNING: {warning['message']}{format_source(result.location(warning))}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the checker CLI."""
    parser = argparse.ArgumentParser(
        description='Validate JSON or YAML documents against a JSON Schema',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('schema', help='JSON Schema file (JSON or YAML)')
    parser.add_argument('documents', nargs='+', help='Documents to validate')
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--check-schema',
        action='store_true',
        default=None,
        help='Validate the schema against its metaschema before compiling it',
    )

    args = parser.parse_args(argv)
    compiler_config.set_logging()

    try:
        results = check_documents(args.schema, args.documents, check_schema=args.check_schema)
    except SchemaCompilerError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    if args.format == 'json':
        _print_json(results)
    elif args.format == 'github-actions':
        _print_github_actions(results)
    else:
        _print_human(results)

    # Exit with error code if any errors found
    if any(r.errors for r in results):
        sys.exit(1)
    if args.format == 'human':
        print(f"Checked {len(results)} document(s) with no errors.")
    sys.exit(0)


if __name__ == '__main__':
    main()
