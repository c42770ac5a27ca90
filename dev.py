"""Development script to run checks (formatting, linting, tests, coverage)."""

import argparse
import subprocess
import sys


def run_command(command: list[str], step_name: str) -> None:
    """Run a shell command as a step in the development process."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\n❌ Failed: {step_name}")
        sys.exit(1)


def run_gate() -> None:
    """Run lint, format check, and tests with a coverage floor."""
    run_command(["uv", "run", "ruff", "check"], "Ruff Linting")
    run_command(["uv", "run", "ruff", "format", "--check"], "Ruff Format Check")
    run_command(
        [
            "uv",
            "run",
            "pytest",
            "--cov=wordcase",
            "--cov-branch",
            "--cov-report=term-missing",
            "--cov-fail-under=90",
        ],
        "Tests & Coverage",
    )


def main() -> None:
    """Run the development checks and optionally a CLI smoke run."""
    parser = argparse.ArgumentParser(description="Run development checks.")
    parser.add_argument(
        "--ci", action="store_true", help="Run checks and tests only, skipping fixes"
    )
    args = parser.parse_args()

    if args.ci:
        run_gate()
        print("\n✅ CI checks passed successfully.")
        return

    # Run auto-formatting and fixing
    run_command(["uv", "run", "ruff", "format"], "Ruff Formatting")
    run_command(
        ["uv", "run", "ruff", "check", "--fix", "--unsafe-fixes"],
        "Ruff Linting & Fixes",
    )

    run_gate()

    run_command(
        ["uv", "run", "wordcase", "--style", "lower_camel_case", "someObjectIdUrlApi"],
        "CLI Smoke Run",
    )

    print("\n✅ All development checks passed successfully.")


if __name__ == "__main__":
    main()
