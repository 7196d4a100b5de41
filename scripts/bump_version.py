"""
Set the aerounits version in aerounits/__init__.py and pyproject.toml.

The API and CLI read ``aerounits.__version__``; pyproject.toml carries a
static copy for packaging, so both have to move together.

Usage:
    python scripts/bump_version.py 0.2.0
    python scripts/bump_version.py 0.2.0 --dry-run
"""

from __future__ import annotations

import argparse
import re
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

VERSION_FILES = {
    ROOT / "aerounits" / "__init__.py": r'^__version__\s*=\s*"[^"]+"',
    ROOT / "pyproject.toml": r'^version\s*=\s*"[^"]+"',
}

VERSION_PATTERN = re.compile(r"^\d+\.\d+\.\d+([-.+][0-9A-Za-z.]+)?$")


def bump(new_version: str, dry_run: bool = False) -> list[Path]:
    """Rewrite the version line in every tracked file; returns the files changed."""
    if not VERSION_PATTERN.match(new_version):
        raise SystemExit(f"Not a valid version: {new_version}")

    changed = []
    for path, pattern in VERSION_FILES.items():
        text = path.read_text()
        prefix = "__version__" if path.suffix == ".py" else "version"
        new_text, count = re.subn(
            pattern, f'{prefix} = "{new_version}"', text, count=1, flags=re.MULTILINE
        )
        if count == 0:
            raise SystemExit(f"No version line found in {path.relative_to(ROOT)}")
        if new_text != text:
            changed.append(path)
            if not dry_run:
                path.write_text(new_text)
    return changed


def main() -> None:
    parser = argparse.ArgumentParser(description="Bump the aerounits version")
    parser.add_argument("version", help="New version, e.g. 0.2.0")
    parser.add_argument("--dry-run", action="store_true", help="Report without writing")
    args = parser.parse_args()

    changed = bump(args.version, dry_run=args.dry_run)
    verb = "Would update" if args.dry_run else "Updated"
    for path in changed:
        print(f"{verb} {path.relative_to(ROOT)}")
    print(f"Version {args.version}")


if __name__ == "__main__":
    main()
