# largeprimes/cli.py
# Usage: python -m largeprimes.cli --action miller-rabin --target 1000000007
#        python -m largeprimes.cli --action generate --maximum 100 --show 0
#        python -m largeprimes.cli --action lucas-lehmer --mersenne-exp 127
#        python -m largeprimes.cli --action fermat --input nums.txt

import argparse
import enum
import logging
import os
import sys
import time
from functools import partial

from largeprimes.generators import riemann_r, sieve_primes_upto
from largeprimes.operations import pow
from largeprimes.primality import fermat, lucas_lehmer_test, miller_rabin, trial_division

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "LARGEPRIMES_LOG_LEVEL"


class Action(enum.Enum):
    STANDARD = "standard"
    FERMAT = "fermat"
    MILLER_RABIN = "miller-rabin"
    GENERATE = "generate"
    POWER = "power"
    LUCAS_LEHMER = "lucas-lehmer"


_ALIASES = {
    "trial-division": Action.STANDARD,
    "generate-primes": Action.GENERATE,
}

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

TESTERS = {
    Action.STANDARD: ("Standard Test", trial_division),
    Action.FERMAT: ("Fermat Test", fermat),
    Action.MILLER_RABIN: ("Miller Rabin Test", miller_rabin),
}


class MissingArgument(Exception):
    def __init__(self, flag: str):
        super().__init__(f"Use --help for more information ({flag} is required)")
        self.flag = flag


def get_action(name: str) -> Action:
    name = (name or "").lower()
    if name in _ALIASES:
        return _ALIASES[name]
    return Action(name)


def _require(value, flag: str):
    if value is None:
        raise MissingArgument(flag)
    return value


def _read_targets(path: str):
    with open(path, "r") as f:
        for lineno, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                yield int(line)
            except ValueError:
                raise ValueError(f"{path}:{lineno}: not an integer: {line!r}") from None


def run_tester(action: Action, target: int) -> str:
    label, test = TESTERS[action]
    return f"{label}: {target} is prime: {test(target)}"


def run_lucas_lehmer(exp: int) -> str:
    return f"Lucas Lehmer Test: M{exp} is prime: {lucas_lehmer_test(exp)}"


def run_generate(maximum: int, show: int) -> str:
    primes = sieve_primes_upto(maximum)
    shown = primes if show <= 0 else primes[:show]
    lines = [f"Primes upto {maximum}: {shown}"]
    lines.append(f"Primes found: {len(primes)}")
    lines.append(f"Expected (Riemann R): {riemann_r(maximum):.1f}")
    return "\n".join(lines)


def run_power(target: int, power: int) -> str:
    return f"Power: {target}^{power} = {pow(target, power)}"


def dispatch(action: Action, args) -> str:
    if action in TESTERS:
        return run_tester(action, _require(args.target, "--target"))
    if action is Action.LUCAS_LEHMER:
        return run_lucas_lehmer(_require(args.mersenne_exp, "--mersenne-exp"))
    if action is Action.GENERATE:
        return run_generate(_require(args.maximum, "--maximum"), args.show)
    return run_power(_require(args.target, "--target"), _require(args.power, "--power"))


def dispatch_batch(action: Action, path: str):
    if action in TESTERS:
        runner = partial(run_tester, action)
    elif action is Action.LUCAS_LEHMER:
        runner = run_lucas_lehmer
    else:
        raise ValueError(f"--input is not supported for action {action.value!r}")
    for n in _read_targets(path):
        yield runner(n)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="largeprimes", description="Large prime number analysis"
    )
    parser.add_argument(
        "-a",
        "--action",
        type=str,
        required=True,
        choices=[a.value for a in Action] + sorted(_ALIASES),
        help="The action to be performed on the target",
    )
    parser.add_argument("-t", "--target", type=int, default=None, help="The target number")
    parser.add_argument(
        "-p",
        "--power",
        type=int,
        default=None,
        help="The power to raise the target to (only used by `power`)",
    )
    parser.add_argument(
        "-m",
        "--maximum",
        type=int,
        default=None,
        help="Upper bound for prime generation, inclusive (only used by `generate`)",
    )
    parser.add_argument(
        "-e",
        "--mersenne-exp",
        type=int,
        default=None,
        help="Exponent p of the Mersenne number 2^p - 1 (only used by `lucas-lehmer`)",
    )
    parser.add_argument(
        "-i",
        "--input",
        type=str,
        default=None,
        help="Run the action once per line of this file (not combinable with --target/--mersenne-exp)",
    )
    parser.add_argument(
        "--show",
        type=int,
        default=0,
        help="Show first K generated primes (0 shows all)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=os.environ.get(LOG_LEVEL_ENV, "WARNING").upper(),
        choices=LOG_LEVELS,
        help=f"Logging verbosity (default from ${LOG_LEVEL_ENV}, else WARNING)",
    )
    return parser


def main(argv=None):
    # thousands-of-digit targets exceed the default int<->str limit
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)

    parser = build_parser()
    args = parser.parse_args(argv)
    # argparse does not check defaults against choices
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid ${LOG_LEVEL_ENV}: {args.log_level!r}")
    if args.input is not None and (args.target is not None or args.mersenne_exp is not None):
        parser.error("--input cannot be combined with --target or --mersenne-exp")
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(args.log_level)
    action = get_action(args.action)
    logger.info("action=%s", action.value)

    t0 = time.perf_counter()
    try:
        if args.input is not None:
            for line in dispatch_batch(action, args.input):
                print(line)
        else:
            print(dispatch(action, args))
    except MissingArgument as e:
        print(e, file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    dt = time.perf_counter() - t0
    print(f"Total time: {dt:.3f}s", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
