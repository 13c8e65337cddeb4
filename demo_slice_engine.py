#!/usr/bin/env python3
"""
Demo: Slice an array from a JSON/YAML document.

Shows slicing, truthiness and typed coercion on one array field.
Without a document the bundled example is used.
"""

import argparse
import logging
import sys

from qvs.coercion import to_number_array, to_string_array
from qvs.examples import build_example_people
from qvs.predicates import is_falsy
from qvs.serialization import load_document, value_to_json
from qvs.slicing import InvalidSliceError, SliceSyntaxError, parse_slice_expression, slice_array
from qvs.values import ValueKind


def main():
    parser = argparse.ArgumentParser(description='Apply a [start:stop:step] slice to an array field')
    parser.add_argument('document', nargs='?', help='Path to a .json/.yaml document (defaults to the example)')
    parser.add_argument('--field', default='scores', help='Top-level array field to slice')
    parser.add_argument('--slice', dest='slice_text', default='::-1', help="Slice text, e.g. '1:4' or '::-1'")
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    document = load_document(args.document) if args.document else build_example_people()
    if document.kind is not ValueKind.OBJECT or args.field not in document.members:
        print(f"Field '{args.field}' not found in document", file=sys.stderr)
        return 1
    target = document.members[args.field]

    try:
        params = parse_slice_expression(args.slice_text)
        selection = slice_array(target, params)
    except (SliceSyntaxError, InvalidSliceError, TypeError) as e:
        print(f"Cannot slice '{args.field}': {e}", file=sys.stderr)
        return 1

    print("=" * 80)
    print(f"{args.field}[{args.slice_text}]")
    print("=" * 80)
    print(value_to_json(selection))
    print(f"\nFalsy: {is_falsy(selection)}")

    numbers = to_number_array(selection)
    if numbers is not None:
        print(f"Numbers: {numbers} (sum {sum(numbers)})")
    strings = to_string_array(selection)
    if strings is not None:
        print(f"Strings: {', '.join(strings)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
