"""
Multiavatar command line entrypoint

    multiavatar "Binx Bond" --out binx.svg
    multiavatar --character 08 --theme B
    multiavatar --seed 42 --sans-env
    multiavatar --examples target/examples
    multiavatar --vectors test-vectors.json
"""

import argparse
import logging
import random
import sys

from multiavatar.kernel.avatar import Avatar, generate, generate_pure, generate_random
from multiavatar.kernel.characters import CharacterType, Coordinate, Theme
from multiavatar.kernel.vectors import export_vectors, write_examples


def get_logger(name="multiavatar"):
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(logging.INFO)
    fmt = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    sh = logging.StreamHandler(sys.stderr)
    sh.setFormatter(fmt)
    logger.addHandler(sh)
    return logger

log = get_logger("multiavatar")


def build_parser():
    parser = argparse.ArgumentParser(prog="multiavatar", description="Multicultural avatar generator (SVG)")
    parser.add_argument("identifier", nargs="?", help="Text the avatar is derived from")
    parser.add_argument("--sans-env", action="store_true", help="Leave out the round background")
    parser.add_argument("--character", help="Character id 00-15 (pure avatar, or forced version with an identifier)")
    parser.add_argument("--theme", help="Theme A, B or C (default A)")
    parser.add_argument("--seed", type=int, help="Random avatar from this seed")
    parser.add_argument("--out", help="Write SVG here instead of stdout")
    parser.add_argument("--examples", metavar="DIR", help="Write example avatars into DIR")
    parser.add_argument("--vectors", metavar="FILE", help="Write JSON test vectors to FILE")
    parser.add_argument("--descriptor", action="store_true", help="Print the part codes instead of SVG")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    return parser


def _coordinate(args):
    character = CharacterType.from_id(args.character)
    if character is None:
        raise ValueError(f"unknown character {args.character!r}, expected 00-15")
    theme = Theme.from_code((args.theme or "A").upper())
    if theme is None:
        raise ValueError(f"unknown theme {args.theme!r}, expected A, B or C")
    return Coordinate(character, theme)


def _descriptor(args, version):
    if args.seed is not None:
        return Avatar.from_random(random.Random(args.seed)).descriptor()
    if args.identifier is None:
        return Avatar.pure(version.character, version.theme).descriptor()
    if not args.identifier:
        return ""
    avatar = Avatar.from_id(args.identifier)
    if version is not None:
        avatar = avatar.with_version(version)
    return avatar.descriptor()


def run(args) -> str:
    if args.seed is not None and args.identifier is not None:
        raise ValueError("--seed draws a random avatar, drop the identifier or the seed")
    if args.theme is not None and args.character is None:
        raise ValueError("--theme needs --character")
    version = _coordinate(args) if args.character is not None else None
    if args.identifier is None and version is None and args.seed is None:
        raise ValueError("nothing to draw: give an identifier, --character or --seed")
    if args.descriptor:
        return _descriptor(args, version)
    if args.seed is not None:
        return generate_random(random.Random(args.seed), args.sans_env)
    if args.identifier is None:
        return generate_pure(version.character, version.theme, args.sans_env)
    return generate(args.identifier, args.sans_env, version)


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        log.setLevel(logging.DEBUG)

    try:
        if args.examples:
            write_examples(args.examples)
        if args.vectors:
            export_vectors(args.vectors)
        if args.examples or args.vectors:
            if args.identifier is None and args.character is None and args.seed is None:
                return 0
        output = run(args)
    except ValueError as e:
        log.error(str(e))
        return 1

    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(output)
        log.info("wrote %s", args.out)
    else:
        sys.stdout.write(output + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
