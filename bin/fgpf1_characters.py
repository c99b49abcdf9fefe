#!/usr/bin/env python
"""Parse Fantasy Grounds Pathfinder character sheets into json.

Usage: python fgpf1_characters.py [options] [db.xml or directory ...]
  Each argument is a db.xml file or a directory holding one
  (default: current directory, then ~/.fgpf1).
"""

from universal.options import option_parser, exec_main
from fgpf1.character import parse_characters
from fgpf1.constants import CMD_FIELD_MAPPINGS


def main():
    parser = option_parser(
        "usage: %prog [options] [db.xml or directory ...]\n"
        "Parses Fantasy Grounds Pathfinder characters into json")
    (options, args) = parser.parse_args()
    if options.cmd_mapping not in CMD_FIELD_MAPPINGS:
        parser.error("-c/--cmd-mapping must be one of: %s" % ", ".join(
            sorted(CMD_FIELD_MAPPINGS.keys())))
    exec_main(options, args, parse_characters)


if __name__ == "__main__":
    main()
