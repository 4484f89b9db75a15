#!/usr/bin/env python3
"""
run_tests.py
------------
Auto-test runner for the popshot simulation core.
Monitors file changes and automatically runs tests.

Usage:
    python run_tests.py                    # Start watching for changes
    python run_tests.py --run-once         # Run tests once and exit
    python run_tests.py --fast             # Skip tests marked slow
    python run_tests.py --coverage         # Add a coverage report
"""

import sys
import os
import time
import subprocess
import argparse
from pathlib import Path
from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler


WATCHED_DIRS = ["popshot", "tests"]


class TestRunner(FileSystemEventHandler):
    """File system event handler that runs tests on file changes."""

    def __init__(self, args):
        self.args = args
        self.last_run = 0
        self.debounce_time = 1.0  # seconds between runs
        self.project_root = Path(__file__).parent

    def on_modified(self, event):
        """Handle file modification events."""
        if event.is_directory:
            return

        # Python sources and JSON tables under the watched directories
        file_path = Path(event.src_path)
        file_path_str = str(file_path).replace('\\', '/')
        if file_path.suffix not in ('.py', '.json'):
            return
        if not any(f'{d}/' in file_path_str for d in WATCHED_DIRS):
            return

        current_time = time.time()
        if current_time - self.last_run < self.debounce_time:
            return

        self.last_run = current_time
        self.run_tests()

    def run_tests(self):
        """Run the test suite."""
        print("\n" + "="*60)
        print("Running tests...")
        print("="*60)

        cmd = [sys.executable, "-m", "pytest", "-v"]

        if self.args.fast:
            cmd.extend(["-m", "not slow"])

        if self.args.coverage:
            cmd.extend([
                "--cov=popshot",
                "--cov-report=term-missing",
                "--cov-report=html",
                "--cov-fail-under=70"
            ])

        try:
            result = subprocess.run(cmd, cwd=self.project_root, capture_output=False)

            if result.returncode == 0:
                print("All tests passed!")
            else:
                print("Some tests failed!")

        except KeyboardInterrupt:
            print("\nTest execution interrupted")
            return False
        except OSError as e:
            print(f"Error running tests: {e}")
            return False

        return result.returncode == 0


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Auto-test runner for popshot")
    parser.add_argument("--run-once", action="store_true",
                        help="Run tests once and exit")
    parser.add_argument("--fast", action="store_true",
                        help="Skip tests marked slow")
    parser.add_argument("--coverage", action="store_true",
                        help="Generate coverage report")

    args = parser.parse_args()

    test_runner = TestRunner(args)

    if args.run_once:
        success = test_runner.run_tests()
        return 0 if success else 1

    print("Starting file watcher...")
    print(f"Monitoring: {', '.join(d + '/' for d in WATCHED_DIRS)}")
    print("Press Ctrl+C to stop")

    test_runner.run_tests()

    observer = Observer()
    for directory in WATCHED_DIRS:
        if os.path.exists(directory):
            observer.schedule(test_runner, directory, recursive=True)

    observer.start()

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        observer.stop()
        print("\nFile watcher stopped")

    observer.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())
