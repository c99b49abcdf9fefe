import sys
import os
from optparse import OptionParser


def exec_main(options, args, function):
    if not options.output and not options.dryrun:
        sys.stderr.write("-o/--output required\n")
        sys.exit(1)
    if not options.dryrun and not os.path.exists(options.output):
        sys.stderr.write(
            "-o/--output points to a directory that does not exist\n")
        sys.exit(1)
    if not options.dryrun and not os.path.isdir(options.output):
        sys.stderr.write(
            "-o/--output points to a file, it must point to a directory\n")
        sys.exit(1)
    if not args:
        args = [os.getcwd()]
    for arg in args:
        try:
            function(arg, options)
        except FileNotFoundError as e:
            sys.stderr.write("%s\n" % e)
            sys.exit(2)


def option_parser(usage):
    parser = OptionParser(usage=usage)
    parser.add_option(
        "-o", "--output", dest="output",
        help="Output data directory. Characters are written to <output>/characters. (required)")
    parser.add_option(
        "-d", "--dry-run", dest="dryrun", default=False, action="store_true",
        help="Dry run (no actual output)")
    parser.add_option(
        "-k", "--skip-schema", dest="skip_schema", default=False, action="store_true",
        help="Skip schema validation")
    parser.add_option(
        "-s", "--stdout", dest="stdout", default=False, action="store_true",
        help="Write json to stdout")
    parser.add_option(
        "-c", "--cmd-mapping", dest="cmd_mapping", default="dexterity_base",
        help="Source field mapping for combat maneuver defense (default: dexterity_base)")
    return parser
