"""
run_collager.py: CLI Entry Point

This script serves as the command-line interface entry point for the
image collager. It forwards execution to the CLI logic defined in
`src/image_collager/cli.py`.

Usage:
    python run_collager.py <Rectangle|Circle> <rows> image1.jpg image2.jpg [options]

This wrapper allows you to run the tool directly without needing to
modify PYTHONPATH or install the project as a package.

For help on available options, run:
    python run_collager.py --help
"""
import sys
# Source code in src/ subdirectory
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import image_collager.cli as ic_cli

if __name__ == "__main__":
    raise SystemExit(ic_cli.main())
