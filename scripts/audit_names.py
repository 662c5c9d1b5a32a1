#!/usr/bin/env python3
"""
Resolve raw author names from a log dump and compare them with the database.

Reports canonical names that are not in the contributor store yet, which
usually means a new contributor or a missing alias.

Usage:
    git log --format=%an | sort -u > data/authors.txt
    python scripts/audit_names.py --input data/authors.txt --db data/contributors.db
"""

import argparse
from pathlib import Path
import sys

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from contributors.database import all_names
from contributors.names import resolve_all


def audit(input_path: Path, db_path: Path) -> bool:
    """
    Resolve every raw name in input_path and look the results up in db_path.

    Returns True if every canonical name is known, False otherwise.
    """
    print(f"Loading raw names from {input_path}...")
    with open(input_path, encoding="utf-8") as f:
        raws = [line.rstrip("\n") for line in f if line.strip()]
    print(f"  Raw: {len(raws)} names")

    resolved = resolve_all(raws)
    canonical = set().union(*resolved.values()) if resolved else set()
    print(f"  Canonical: {len(canonical)} names")

    print(f"\nQuerying database at {db_path}...")
    known = all_names(db_path)
    print(f"  DB:  {len(known)} contributors")

    unknown = sorted(canonical - known)
    if not unknown:
        print("\n✅ All resolved names are known contributors")
        return True

    print(f"\n❌ UNKNOWN: {len(unknown)} names not in database")
    sources = {}
    for raw, names in resolved.items():
        for name in names:
            sources.setdefault(name, []).append(raw)
    for name in unknown[:20]:
        print(f"   - {name}  (from {', '.join(repr(r) for r in sources[name][:3])})")
    if len(unknown) > 20:
        print(f"   ... and {len(unknown) - 20} more")
    return False


def main():
    parser = argparse.ArgumentParser(description="Audit resolved author names against the database")
    parser.add_argument("--input", type=Path, required=True,
                       help="Text file with one raw author name per line")
    parser.add_argument("--db", type=Path, default=Path("data/contributors.db"),
                       help="Path to SQLite database file")

    args = parser.parse_args()

    if not args.input.exists():
        print(f"❌ Input file not found: {args.input}")
        sys.exit(1)

    if not args.db.exists():
        print(f"❌ Database file not found: {args.db}")
        sys.exit(1)

    success = audit(args.input, args.db)
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
