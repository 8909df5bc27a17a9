"""Print the pure-component parameter table of an electrolyte PC-SAFT JSON file."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from epcsaft.parameters import load_parameters_from_json


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", type=Path, help="Parameter JSON file, e.g. data/params/water_nacl.json")
    parser.add_argument("--temperature", type=float, default=298.15, help="Temperature [K] for the diameter summary")
    parser.add_argument("--plain", action="store_true", help="Aligned text table instead of markdown")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args()


def main():
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    params = load_parameters_from_json(args.path)
    print(params.format_table() if args.plain else params.to_markdown())
    print()
    names = [p.name or f"Component {i + 1}" for i, p in enumerate(params.pure_records)]
    for name, sigma, d in zip(names, params.sigma_t(args.temperature), params.hs_diameter(args.temperature)):
        print(f"{name}: sigma(T)={sigma:.5f} A, d(T)={d:.5f} A at T={args.temperature} K")


if __name__ == "__main__":
    main()
