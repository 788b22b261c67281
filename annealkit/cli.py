"""Command-line interface for annealkit.

Subcommands
-----------
``annealkit info``
    Print version and default run parameters.

``annealkit tour [--config params.yaml] [options]``
    Anneal a travelling-salesman tour (the bundled 41-city instance, or a
    random one with ``--cities``) and print its length and visiting order.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from annealkit import __version__
from annealkit.core import (
    DEFAULT_PARAMS,
    AnnealError,
    RunParameters,
    anneal,
    geometric_schedule,
    metropolis_acceptance,
)
from annealkit.loggers import LocalFileLogger
from annealkit.problems.tour import DEMO_XS, DEMO_YS, Tour, random_cities
from annealkit.utils.helpers import ensure_dir, timestamp_id

logger = logging.getLogger(__name__)

# Cost deltas on the demo instance are in the hundreds; the acceptance
# function divides them down to the temperature range.
DEMO_ACCEPTANCE_SCALE = 600.0


# ── Helpers ─────────────────────────────────────────────────────────────


def _load_params(path: Optional[str]) -> RunParameters:
    """Load run parameters from YAML, or start from the demo defaults."""
    if path is None:
        return DEFAULT_PARAMS.replace(cost_reduction_tolerance=0.0)
    p = Path(path)
    if not p.exists():
        print(f'Error: config file not found: {path}', file=sys.stderr)
        sys.exit(1)
    return RunParameters.from_yaml(str(p))


def _apply_overrides(params: RunParameters, args: argparse.Namespace) -> RunParameters:
    """Apply command-line values on top of *params* (command line wins)."""
    overrides: Dict[str, Any] = {}
    if args.max_temps is not None:
        overrides['max_temperatures'] = args.max_temps
    if args.iters_per_temp is not None:
        overrides['iters_per_temperature'] = args.iters_per_temp
    if args.alpha is not None:
        overrides['cooling_factor'] = args.alpha
    if args.tolerance is not None:
        overrides['cost_reduction_tolerance'] = args.tolerance
    if args.verbose:
        overrides['verbose'] = True
    return params.replace(**overrides).validate()


# ── Subcommands ─────────────────────────────────────────────────────────


def cmd_info(_args: argparse.Namespace) -> None:
    """Print version information."""
    print(f'annealkit {__version__}')
    print('Generic simulated annealing engine')
    print('Default run parameters:')
    for key, value in DEFAULT_PARAMS.to_dict().items():
        print(f'  {key}: {value}')


def cmd_tour(args: argparse.Namespace) -> None:
    """Anneal a travelling-salesman tour and print the result."""
    params = _apply_overrides(_load_params(args.config), args)
    alpha = params.cooling_factor if params.cooling_factor is not None else 0.9

    if args.cities is not None:
        xs, ys = random_cities(args.cities, seed=args.seed)
    else:
        xs, ys = list(DEMO_XS), list(DEMO_YS)
    tour = Tour(xs, ys, random_source=args.seed)

    run_logger = None
    if args.log_dir:
        run_dir = ensure_dir(os.path.join(args.log_dir, f'tour_{timestamp_id()}'))
        run_logger = LocalFileLogger(run_dir=run_dir)
        with tempfile.TemporaryDirectory() as tmp:
            params_path = os.path.join(tmp, 'params.yaml')
            params.to_yaml(params_path)
            run_logger.log_artifact(params_path, metadata={'kind': 'run_parameters'})
        logger.info('Run parameters saved to %s', run_dir)

    result = anneal(
        tour,
        params,
        metropolis_acceptance(scale=args.scale),
        cooling_schedule=geometric_schedule(alpha),
        random_source=None if args.seed is None else args.seed + 1,
        run_logger=run_logger,
    )
    _print_result(result, tour)


def _print_result(result: Any, initial: Tour) -> None:
    """Pretty-print a tour run."""
    print(f'Initial length: {initial.cost()}')
    print(f'Tour length: {result.final_cost}')
    print('Computed tour: ' + ' '.join(str(i) for i in result.best.visited))
    print(
        f'Evaluations: {result.evaluations}  Temperatures: {result.iterations}'
        f'  State: {result.state.value}'
    )


# ── Main entry point ───────────────────────────────────────────────────


def main(argv: Optional[list] = None) -> None:
    """Entry point for the ``annealkit`` CLI."""
    parser = argparse.ArgumentParser(
        prog='annealkit',
        description='Generic simulated annealing with a travelling-salesman demo.',
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'annealkit {__version__}',
    )
    parser.add_argument(
        '-v',
        '--verbose',
        action='store_true',
        help='Enable verbose (DEBUG) logging and log every accepted move.',
    )

    subparsers = parser.add_subparsers(dest='command', help='Available subcommands')

    # info
    sp_info = subparsers.add_parser('info', help='Show version information')
    sp_info.set_defaults(func=cmd_info)

    # tour
    sp_tour = subparsers.add_parser('tour', help='Anneal a travelling-salesman tour')
    sp_tour.add_argument('--config', default=None, help='Path to run parameters YAML')
    sp_tour.add_argument('--max-temps', type=int, default=None, help='Number of temperatures')
    sp_tour.add_argument(
        '--iters-per-temp', type=int, default=None, help='Iterations per temperature'
    )
    sp_tour.add_argument('--alpha', type=float, default=None, help='Cooling factor in (0, 1)')
    sp_tour.add_argument(
        '--tolerance',
        type=float,
        default=None,
        help='Cost reduction tolerance; 0 disables early exit',
    )
    sp_tour.add_argument(
        '--scale',
        type=float,
        default=DEMO_ACCEPTANCE_SCALE,
        help='Cost delta scale for the acceptance function',
    )
    sp_tour.add_argument('--cities', type=int, default=None, help='Use N random cities')
    sp_tour.add_argument('--seed', type=int, default=None, help='Random seed')
    sp_tour.add_argument('--log-dir', default=None, help='Write per-temperature metrics here')
    sp_tour.set_defaults(func=cmd_tour)

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s %(message)s')

    if not hasattr(args, 'func'):
        parser.print_help()
        return
    try:
        args.func(args)
    except (AnnealError, ValueError, yaml.YAMLError) as exc:
        print(f'Error: {exc}', file=sys.stderr)
        sys.exit(2)


if __name__ == '__main__':
    main()
