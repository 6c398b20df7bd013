#!/usr/bin/env python3
"""Reclassify an exported requirement set and save it as a template."""

import sys
import json
import argparse
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dotenv import load_dotenv

load_dotenv()

from matrix import generate_template, import_from_json
from utils.text import slugify


def main():
    parser = argparse.ArgumentParser(description="Generate a reusable template from an export")
    parser.add_argument(
        "export",
        help="JSON export produced by run_parser.py"
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Template path (defaults to data/templates/<name>.json)"
    )
    args = parser.parse_args()

    export_path = Path(args.export)
    try:
        data = json.loads(export_path.read_text(encoding='utf-8'))
    except (OSError, json.JSONDecodeError) as e:
        print(f"ERROR: Could not load {export_path}: {e}")
        sys.exit(1)

    result = import_from_json(data)
    if not result.requirements:
        print("ERROR: Export has no requirements; nothing to template")
        sys.exit(1)

    template = generate_template(result)

    output_path = Path(args.output) if args.output else (
        Path("data/templates") / f"{slugify(result.document_name) or 'template'}.json"
    )
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(template, f, ensure_ascii=False, indent=2)

    print(f"Template {template['id']}: {template['structure']['requirementCount']} requirements")
    print(f"Saved: {output_path}")


if __name__ == "__main__":
    main()
