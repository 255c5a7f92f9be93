#!/usr/bin/env python3
"""
MIT License

Copyright (c) 2026 Mario Dimitri Capuozzo

Permission is hereby granted, free of charge, to any person obtaining a copy of this software and associated documentation files (the “Software”), 
to deal in the Software without restriction, including without limitation the rights to use, copy, modify, merge, publish, distribute, sublicense, 
and/or sell copies of the Software, and to permit persons to whom the Software is furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED “AS IS”, WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, 
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, 
WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE. 

IEC 61850 SCL Edit command line
"""

import logging
import os
import sys
from collections import Counter
from typing import Dict, List, Optional, Tuple

from lxml import etree as ET

from .dom import parse_xml, query_selector_all, tag_name
from .equality import is_public
from .errors import SCLEditError
from .identity import identity, is_identifiable, selector
from .schema import is_scl_tag


def count_tags(root: ET._Element) -> Dict[str, int]:
    counts = Counter(
        tag_name(e) for e in root.iter() if is_scl_tag(tag_name(e)) and is_public(e)
    )
    return dict(sorted(counts.items()))


def list_identities(root: ET._Element, tag: str) -> List[Tuple[str, int]]:
    result = []
    for element in root.iter():
        if tag_name(element) != tag or not is_public(element):
            continue
        value = identity(element)
        if is_identifiable(value):
            result.append((value, element.sourceline))
    return result


def find(root: ET._Element, tag: str, value: str) -> Tuple[str, List[ET._Element]]:
    css = selector(tag, value)
    return css, query_selector_all(root, css)


def main(argv: Optional[List[str]] = None):
    import argparse
    parser = argparse.ArgumentParser(description="IEC 61850 SCL identity and selector tool")
    parser.add_argument("file", help="Input SCL file")
    parser.add_argument("--tag", help="List identity and line of every public element of TAG")
    parser.add_argument("--find", nargs=2, metavar=("TAG", "IDENTITY"), help="Locate an element by identity")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG] %(name)s: %(message)s", stream=sys.stderr)

    if not os.path.isfile(args.file):
        print(f"File not found: {args.file}", file=sys.stderr)
        sys.exit(1)
    try:
        root = parse_xml(args.file).getroot()
        if args.find:
            css, matches = find(root, *args.find)
            print(css)
            for element in matches:
                print(f"{tag_name(element)}\t{element.sourceline}")
            if not matches:
                sys.exit(3)
        elif args.tag:
            for value, line in list_identities(root, args.tag):
                print(f"{value}\t{line}")
        else:
            for tag, count in count_tags(root).items():
                print(f"{tag}\t{count}")
    except (SCLEditError, ValueError, ET.XMLSyntaxError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
