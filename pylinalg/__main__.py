"""
Command-line Gram-Schmidt driver.

    python -m pylinalg
    python -m pylinalg --vector 1,2,3,4 --vector -1,2,4,1 --vector 2,0,5,-7
    python -m pylinalg --vector 1,0 --vector 2,0 --classical --tol 1e-9

Prints the Grammian determinant, its rank and the orthonormal basis.
Exits 0 on success and 1 (with the message on stderr) when the library
rejects the input.
"""

from __future__ import annotations

import argparse
import sys

from pylinalg.core.exceptions import PyLinalgError
from pylinalg.dense.vector import Vector
from pylinalg.orthogonalization import gram_schmidt

# Sample vector set run by the demo driver
DEFAULT_VECTORS = (
    (1.0, 2.0, 3.0, 4.0),
    (-1.0, 2.0, 4.0, 1.0),
    (2.0, 0.0, 5.0, -7.0),
)


def _parse_vector(text: str) -> tuple[float, ...]:
    try:
        return tuple(float(part) for part in text.split(','))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid vector {text!r}, expected comma-separated numbers"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pylinalg',
        description='Orthonormalize a vector set with Gram-Schmidt.',
    )
    parser.add_argument(
        '--vector', '-v', dest='vectors', action='append', type=_parse_vector,
        metavar='X1,X2,...',
        help='vector coordinates; repeat for each vector (default: built-in sample set)',
    )
    parser.add_argument(
        '--tol', type=float, default=None,
        help='zero threshold (default: 1e-6)',
    )
    parser.add_argument(
        '--classical', action='store_true',
        help='use classical instead of modified Gram-Schmidt',
    )
    parser.add_argument(
        '--dump', action='store_true',
        help='also dump the Grammian matrix and each basis vector',
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    coords = args.vectors if args.vectors else DEFAULT_VECTORS

    kwargs = {'method': 'classical' if args.classical else 'modified'}
    if args.tol is not None:
        kwargs['tol'] = args.tol

    try:
        vectors = [Vector.from_array(c, len(c)) for c in coords]
        solution = gram_schmidt(vectors, **kwargs)
    except PyLinalgError as e:
        print(f"Error - {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    print(solution.summary())
    if args.dump:
        print()
        solution.grammian.dump()
        for vec in solution.basis:
            print()
            vec.dump()
    return 0


if __name__ == '__main__':
    sys.exit(main())
