#!/usr/bin/env python3
import argparse, logging, os, sys
from wangtiler.config import DEFAULTS, TilerConfig
from wangtiler.logging_config import setup_logging
from wangtiler.mapgen.check import edge_mismatches
from wangtiler.mapgen.generator import WangTiler
from wangtiler.tsv import read_tsv, write_tsv

log = logging.getLogger("wangtiler.tools")

def make_tiler(cfg):
    return WangTiler(cfg.width, cfg.height, cfg.make_rng())

def cmd_emit(args):
    tiler = make_tiler(TilerConfig(args.width, args.height, args.seed))
    tiler.generate()
    write_tsv(tiler.as_matrix(), args.out, header=args.header)
    print(f"Wrote {args.out}")

def cmd_batch(args):
    os.makedirs(args.outdir, exist_ok=True)
    for k in range(args.count):
        seed = None if args.seed is None else args.seed + k
        tiler = make_tiler(TilerConfig(args.width, args.height, seed))
        tiler.generate()
        path = os.path.join(args.outdir, f"{k + 1:02d}.tsv")
        write_tsv(tiler.as_matrix(), path)
        log.debug("wrote %s (seed %s)", path, seed)
    print(f"Wrote {args.count} tilings to {args.outdir}")

def cmd_verify(args):
    mat = read_tsv(args.path, header=args.header)
    if not mat:
        raise SystemExit(f"{args.path}: empty grid")
    bad = edge_mismatches(mat)
    for row, col, side in bad:
        print(f"{args.path}: cell ({row}, {col}) {side} mismatch")
    if bad:
        return 1
    print(f"{args.path}: {len(mat[0])}x{len(mat)} tiling is seamless")
    return 0

def main(argv=None):
    p = argparse.ArgumentParser(description="Wang tiling generator")
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)

    p1 = sub.add_parser('emit')
    p1.add_argument('--width', type=int, default=DEFAULTS.width)
    p1.add_argument('--height', type=int, default=DEFAULTS.height)
    p1.add_argument('--seed', type=int, default=None)
    p1.add_argument('--out', type=str, required=True)
    p1.add_argument('--header', action='store_true')
    p1.set_defaults(func=cmd_emit)

    p2 = sub.add_parser('batch')
    p2.add_argument('--count', type=int, required=True)
    p2.add_argument('--width', type=int, default=DEFAULTS.width)
    p2.add_argument('--height', type=int, default=DEFAULTS.height)
    p2.add_argument('--seed', type=int, default=None)
    p2.add_argument('--outdir', type=str, required=True)
    p2.set_defaults(func=cmd_batch)

    p3 = sub.add_parser('verify')
    p3.add_argument('path', type=str)
    p3.add_argument('--header', action='store_true')
    p3.set_defaults(func=cmd_verify)

    args = p.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    try:
        rc = args.func(args)
    except ValueError as e:
        p.error(str(e))
    return rc or 0

if __name__ == '__main__':
    sys.exit(main())
