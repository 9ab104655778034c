"""Build the HTML documentation.

Regenerates the API reference pages from the package docstrings with
``sphinx-apidoc`` and then runs ``sphinx-build``.
"""

import subprocess
import sys
from pathlib import Path


def run_command(command: list[str]) -> None:
    """Run a command, streaming its output, and exit on failure."""
    print(f"Running: {' '.join(command)}")
    result = subprocess.run(command, check=False)
    if result.returncode != 0:
        print(f"Command failed with exit code {result.returncode}")
        sys.exit(result.returncode)


def main() -> None:
    docs_dir = Path(__file__).parent.absolute()
    package_dir = docs_dir.parent / "symmetrix"
    reference_dir = docs_dir / "reference"
    reference_dir.mkdir(exist_ok=True)

    for stale in reference_dir.glob("*.rst"):
        stale.unlink()

    print("Generating API documentation...")
    run_command(["sphinx-apidoc", "-f", "-e", "-o", str(reference_dir), str(package_dir)])

    print("Building HTML documentation...")
    run_command(["sphinx-build", "-b", "html", str(docs_dir), str(docs_dir / "_build" / "html")])

    print(f"Documentation built: {docs_dir / '_build' / 'html' / 'index.html'}")


if __name__ == "__main__":
    main()
