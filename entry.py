#!/usr/bin/env python3
"""
Ark regtest environment bootstrap.

Usage:
    ./entry.py                              # Bootstrap the running nigiri stack
    ./entry.py --functional                 # Bootstrap, then run all functional tests
    ./entry.py --functional -t test_wallet_ready
    ./entry.py --functional -g functional
"""

import argparse
import logging
import os
import sys

import flexitest

from arkenv.bootstrap import ArkBootstrap
from arkenv.config import BootstrapConfig
from arkenv.step_logging import StepNameFilter
from envconfigs.ark import ArkEnvConfig

TEST_DIR = "tests"
FUNCTIONAL_DIR = os.path.join(TEST_DIR, "functional")
DD_ROOT = "_dd"

logger = logging.getLogger("entry")


def setup_logging() -> None:
    """Configure root logger."""
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s - %(name)s - [%(step)s] %(levelname)s - %(message)s",
    )
    for handler in logging.getLogger().handlers:
        handler.addFilter(StepNameFilter())


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="entry.py",
        description="Bootstrap a local Ark regtest environment",
    )
    parser.add_argument(
        "--functional",
        action="store_true",
        help="Run the functional tests against the bootstrapped environment",
    )
    parser.add_argument(
        "-t",
        "--tests",
        nargs="*",
        help="Run specific functional test(s)",
    )
    parser.add_argument(
        "-g",
        "--groups",
        nargs="*",
        help="Run functional test group(s)",
    )
    return parser.parse_args(argv[1:])


def filter_tests(parsed_args: argparse.Namespace, modules: dict[str, str]) -> dict[str, str]:
    """
    Filters test modules against parsed args supplied from the command line.
    """
    arg_groups = frozenset(parsed_args.groups or [])
    # Extract filenames from the tests paths.
    arg_tests = frozenset(
        [os.path.split(t)[1].removesuffix(".py") for t in parsed_args.tests or []]
    )

    filtered = dict()
    for test, path in modules.items():
        # Drop the prefix of the path up to and including TEST_DIR.
        parts = os.path.normpath(path).split(os.path.sep)
        idx = next((i for i, part in enumerate(parts) if part == TEST_DIR), -1)
        test_groups = frozenset(parts[idx + 1 : -1])

        take = True
        if arg_groups and not (arg_groups & test_groups):
            take = False
        if arg_tests and test not in arg_tests:
            take = False

        if take:
            filtered[test] = path

    return filtered


def run_bootstrap(config: BootstrapConfig | None = None) -> int:
    """Run the bootstrap once. Returns the process exit code."""
    try:
        ArkBootstrap(config).run()
    except Exception as e:
        logger.exception(f"Setup failed: {e}")
        return 1
    return 0


def run_functional(parsed_args: argparse.Namespace, config: BootstrapConfig | None = None) -> int:
    root_dir = os.path.dirname(os.path.abspath(__file__))

    global_envs: dict[str, flexitest.EnvConfig] = {
        "ark": ArkEnvConfig(config),
    }

    datadir = flexitest.create_datadir_in_workspace(os.path.join(root_dir, DD_ROOT))
    runtime = flexitest.TestRuntime(global_envs, datadir, {})

    test_dir = os.path.join(root_dir, FUNCTIONAL_DIR)
    modules = filter_tests(parsed_args, flexitest.runtime.scan_dir_for_modules(test_dir))
    tests = flexitest.runtime.load_candidate_modules(modules)

    runtime.prepare_registered_tests()
    results = runtime.run_tests(tests)

    runtime.save_json_file("results.json", results)
    flexitest.dump_results(results)

    # Exit with error if any test failed
    flexitest.fail_on_error(results)

    return 0


def main(argv: list[str]) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging()

    if args.functional:
        return run_functional(args)
    return run_bootstrap()


def cli() -> None:
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
