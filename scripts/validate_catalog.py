#!/usr/bin/env python3
"""Validate a packages catalog JSON file.
Exit non-zero if invalid."""
import json, sys, pathlib

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parent.parent / "src"))

from checkout.catalog import CatalogValidationError, validate_catalog_payload  # noqa: E402

path = pathlib.Path(sys.argv[1] if len(sys.argv) > 1 else "packages.json")
if not path.exists():
    print(f"{path} missing", file=sys.stderr)
    sys.exit(1)
try:
    data = json.loads(path.read_text(encoding="utf-8"))
except json.JSONDecodeError as e:
    print("JSON parse error:", e, file=sys.stderr)
    sys.exit(2)
try:
    packages = validate_catalog_payload(data)
except CatalogValidationError as e:
    print(f"Validation failed: {e}", file=sys.stderr)
    sys.exit(3)
base = [p["label"] for p in packages if p["base"]]
if len(base) > 1:
    print(f"More than one base package: {', '.join(base)}", file=sys.stderr)
    sys.exit(4)
print(f"{path} valid: {len(packages)} packages")
