#!/usr/bin/env python3

# Replay add/remove operations against a range list and print the result

import argparse
import os
import sys

from prettytable import PrettyTable
from tqdm import tqdm

from .domain import DOMAINS
from .errors import RangeListError
from .rangelist import RangeList

def build_parser():
    parser = argparse.ArgumentParser(prog="rangelist", description="Replay range list operations")
    parser.add_argument("ops", type=argparse.FileType('r'), help="operations file ('-' for stdin)")
    parser.add_argument("--keys", "-k", choices=sorted(DOMAINS), default=os.getenv("RANGELIST_KEYS", "int"), help="key type (env RANGELIST_KEYS)")
    parser.add_argument("--table", "-t", action='store_true', default=False, help="Print a table instead of the compact output")
    parser.add_argument("--progress", "-p", action='store_true', default=False, help="Show a progress bar")
    parser.add_argument("--strict-remove", action='store_true', default=False, help="remove leaves ranges exactly matching the removed one")
    parser.add_argument("--debug", "-d", action='store_true', default=False, help="Debug output")
    return parser

def parse_line(line, domain):
    """Return (op, args) for a line, or None for blanks and comments"""
    line = line.strip()
    if not line or line.startswith("#"):
        return None

    fields = line.split()
    op = fields[0].lower()
    if op == "add":
        if len(fields) < 4:
            raise ValueError("add needs <start> <end> <value>")
        return op, (domain.parse(fields[1]), domain.parse(fields[2]), " ".join(fields[3:]))
    if op == "remove":
        if len(fields) != 3:
            raise ValueError("remove needs <start> <end>")
        return op, (domain.parse(fields[1]), domain.parse(fields[2]))
    raise ValueError(f"unknown operation {fields[0]!r}")

def load_ops(lines, domain):
    ops = []
    for lineno, line in enumerate(lines, 1):
        try:
            parsed = parse_line(line, domain)
        except ValueError as ex:
            raise ValueError(f"line {lineno}: {ex}") from ex
        if parsed is not None:
            ops.append((lineno, *parsed))
    return ops

def replay(ops, rl, progress=False, debug=False):
    if progress:
        ops = tqdm(ops)

    for lineno, op, args in ops:
        try:
            if op == "add":
                rl.add(*args)
            else:
                rl.remove(*args)
        except RangeListError as ex:
            raise ValueError(f"line {lineno}: {ex}") from ex
        if debug:
            print(f"{lineno}: {op} {' '.join(str(a) for a in args)} -> {rl.output()}")
    return rl

def make_table(rl):
    table = PrettyTable()
    table.field_names = ["Start", "End", "Value"]
    table.align["Value"] = "l"
    for start, end, value in rl:
        table.add_row([start, end, value])
    return table

def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.keys not in DOMAINS:
        print(f"ERROR unknown key type {args.keys!r} (expected one of {', '.join(sorted(DOMAINS))})")
        return 1
    rl = RangeList(DOMAINS[args.keys](), strict_remove=args.strict_remove)

    if args.ops is sys.stdin:
        lines = args.ops.readlines()
    else:
        with args.ops as f:
            lines = f.readlines()

    try:
        ops = load_ops(lines, rl.domain)
        replay(ops, rl, progress=args.progress, debug=args.debug)
    except ValueError as ex:
        print(f"ERROR {ex}")
        return 1

    if args.table:
        print(make_table(rl))
    else:
        print(rl.output())
    return 0
