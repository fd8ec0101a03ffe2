#!/usr/bin/env python3

import argparse
import logging
import sys

from planar_fabrik import (
    FabrikSolver,
    FabrikError,
    EmptyChainError,
    UnreachableTargetError,
    check_reachable
)
from planar_fabrik.fabrik_chain import as_lengths
from arm_config import motion as motion_config
from arm_config import system as sys_config

logger = logging.getLogger(__name__)


class InputError(Exception):
    """Raised when the user supplies a value that cannot be used."""


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='planar-ik-solver',
        description='Pose a planar arm so its end reaches a target, using FABRIK relaxation.'
    )
    p.add_argument('--lengths', type=float, nargs='+', metavar='L',
                   help='Segment lengths, base first.')
    p.add_argument('--target', type=float, nargs=2, metavar=('X', 'Y'),
                   help='Target point for the end effector.')
    p.add_argument('--angles', type=float, nargs='+', metavar='A',
                   help='Starting relative joint angles in radians (one per segment). '
                        'Without it the arm starts on the line to the target.')
    p.add_argument('--iterations', type=int, default=motion_config.FABRIK_MAX_ITERATIONS,
                   help=f'Relaxation pass budget (default: {motion_config.FABRIK_MAX_ITERATIONS}).')
    p.add_argument('--precision', type=float, default=motion_config.FABRIK_PRECISION,
                   help='Stop early once the worst segment error drops below this, '
                        f'0 disables (default: {motion_config.FABRIK_PRECISION}).')
    p.add_argument('--seed', type=int, default=None,
                   help='Seed for the initial perturbation; clock-derived when omitted.')
    p.add_argument('--noise', type=float, default=motion_config.FABRIK_INIT_NOISE,
                   help=f'Half-width of the initial perturbation (default: {motion_config.FABRIK_INIT_NOISE}).')
    p.add_argument('--degenerate-policy', choices=motion_config.FABRIK_DEGENERATE_POLICIES,
                   default=motion_config.FABRIK_DEGENERATE_POLICY,
                   help='Handling of coincident joints during relaxation.')
    p.add_argument('--log-level', choices=sys_config.LOG_LEVELS, default=sys_config.LOG_LEVEL,
                   help=f'Logging level (default: {sys_config.LOG_LEVEL}).')
    p.add_argument('--interactive', action='store_true',
                   help='Ask for every value on the terminal.')
    return p


def _read(input_fn, prompt: str, cast, what: str):
    raw = input_fn(prompt)
    try:
        return cast(raw.strip())
    except ValueError:
        raise InputError(f'Invalid {what}: {raw!r}')


def prompt_request(input_fn=None) -> dict:
    """
    Collect a solve request on the terminal.

    Reachability is checked as soon as the target is known, before the
    loop settings are asked for.

    Raises:
        InputError: On malformed or refused answers
        EmptyChainError: If the arm has no segments
        UnreachableTargetError: If the target is beyond full extension
    """
    if input_fn is None:
        input_fn = input

    count = _read(input_fn, sys_config.PROMPT_SEGMENT_COUNT, int, 'segment count')
    if count < 1:
        raise EmptyChainError()

    print()
    print(sys_config.PROMPT_LENGTHS)
    lengths = [_read(input_fn, f'{i}: ', float, f'length {i}') for i in range(count)]
    lengths = as_lengths(lengths)

    print()
    answer = input_fn(sys_config.PROMPT_START_FROM_POSITION).strip().lower()
    if answer not in ('y', 'n'):
        raise InputError('Invalid response!')

    angles = None
    if answer == 'y':
        print(sys_config.PROMPT_ANGLES)
        angles = [_read(input_fn, f'{i}: ', float, f'angle {i}') for i in range(count)]

    print()
    print(sys_config.PROMPT_TARGET)
    target = (
        _read(input_fn, '  X: ', float, 'target X'),
        _read(input_fn, '  Y: ', float, 'target Y')
    )
    check_reachable(lengths, target)

    print()
    iterations = _read(input_fn, sys_config.PROMPT_ITERATIONS, int, 'iteration count')
    print()
    precision = _read(input_fn, sys_config.PROMPT_PRECISION, float, 'precision')

    return {
        'lengths': lengths.tolist(),
        'angles': angles,
        'target': target,
        'iterations': iterations,
        'precision': precision
    }


def request_from_args(args: argparse.Namespace) -> dict:
    return {
        'lengths': args.lengths,
        'angles': args.angles,
        'target': tuple(args.target),
        'iterations': args.iterations,
        'precision': args.precision
    }


class PlanarIKSolverCli:
    def __init__(self, seed=None, noise=motion_config.FABRIK_INIT_NOISE,
                 degenerate_policy=motion_config.FABRIK_DEGENERATE_POLICY):
        self.seed = seed
        self.solver = FabrikSolver(noise=noise, degenerate_policy=degenerate_policy)
        self.digits = sys_config.OUTPUT_PRECISION

        logger.info('Planar IK solver started')
        logger.info(f'  Noise: {noise}')
        logger.info(f'  Degenerate policy: {degenerate_policy}')

    def run(self, request: dict) -> dict:
        """Solve one request and print every result block."""
        iterations = request['iterations']
        if iterations < 0:
            raise InputError(f'Iteration count must be >= 0, got {iterations}')
        precision = request['precision']
        if precision < 0.0:
            logger.warning(f'Negative precision {precision} treated as 0')
            precision = 0.0

        result = self.solver.solve(
            request['lengths'],
            request['target'],
            angles=request['angles'],
            seed=self.seed,
            precision=precision,
            max_iterations=iterations
        )
        self.print_result(result)
        return result

    def print_result(self, result: dict):
        self.print_positions('The starting positions are:', result['initial_positions'])
        self.print_angles('The starting angles are:', result['initial_angles'])
        self.print_positions('The ending positions are:', result['positions'])
        self.print_angles('The ending angles are:', result['angles'])
        self.print_angles('The angle deltas are:', result['angle_deltas'])

        status = 'converged' if result['converged'] else 'not converged'
        print()
        print(f'{status} after {result["iterations"]} iterations, '
              f'final error {result["final_error"]:.{self.digits}g} (seed {result["seed"]})')

    def print_positions(self, title: str, positions):
        print()
        print(title)
        for x, y in positions:
            print(f'{x:.{self.digits}g} {y:.{self.digits}g}')

    def print_angles(self, title: str, angles):
        print()
        print(title)
        for angle in angles:
            print(f'{angle:.{self.digits}g} {sys_config.ANGLE_UNIT}')


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=sys_config.LOG_FORMAT)

    try:
        if args.interactive or args.lengths is None or args.target is None:
            request = prompt_request()
        else:
            request = request_from_args(args)

        cli = PlanarIKSolverCli(
            seed=args.seed,
            noise=args.noise,
            degenerate_policy=args.degenerate_policy
        )
        cli.run(request)
    except EmptyChainError:
        print('Well, I need at least 1!')
        return 1
    except UnreachableTargetError as exc:
        print()
        print(sys_config.MESSAGE_UNREACHABLE)
        logger.info(str(exc))
        return 1
    except (InputError, FabrikError) as exc:
        print(str(exc), file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
