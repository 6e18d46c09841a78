#!/usr/bin/env python3
"""Test runner script for the Biblia API."""
import subprocess
import sys
import os

PYTEST = [sys.executable, "-m", "pytest"]


def run_unit_tests():
    """Run only unit tests (fast, no database needed)."""
    print("🧪 Running Unit Tests")
    print("=" * 30)
    return subprocess.run(PYTEST + ["tests/", "-v", "-m", "not integration", "--tb=short"]).returncode


def run_integration_tests():
    """Run integration tests against a throwaway PostgreSQL database."""
    print("🧪 Running Integration Tests")
    print("=" * 30)
    return subprocess.run([sys.executable, "run_integration_tests.py"]).returncode


def run_all_tests():
    """Run unit tests, then integration tests if they pass."""
    unit_result = run_unit_tests()
    if unit_result != 0:
        print("❌ Unit tests failed, skipping integration tests")
        return unit_result

    print("\n" + "=" * 50)
    integration_result = run_integration_tests()
    if integration_result == 0:
        print("\n🎉 All tests passed!")
    return integration_result


def run_coverage():
    """Run unit tests with a coverage report for the app package."""
    print("🧪 Running Tests with Coverage")
    print("=" * 35)
    result = subprocess.run(PYTEST + [
        "tests/", "-v",
        "-m", "not integration",
        "--cov=app",
        "--cov-report=term-missing",
    ]).returncode
    return result


MODES = {
    "unit": run_unit_tests,
    "integration": run_integration_tests,
    "all": run_all_tests,
    "coverage": run_coverage,
}


def main():
    """Dispatch to the requested test mode."""
    mode = sys.argv[1].lower() if len(sys.argv) > 1 else ""
    if mode not in MODES:
        print("Usage: python run_tests.py [unit|integration|all|coverage]")
        sys.exit(1)

    os.chdir(os.path.dirname(os.path.abspath(__file__)))
    sys.exit(MODES[mode]())


if __name__ == "__main__":
    main()
