#!/usr/bin/env python3
"""Parse a compliance document into structured requirements."""

import os
import sys
import json
import argparse
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dotenv import load_dotenv

load_dotenv()

from matrix import ComplianceMatrixParser, ParseOptions, export_to_csv, export_to_json
from utils.text import slugify


def main():
    parser = argparse.ArgumentParser(description="Parse a compliance matrix, checklist or questionnaire")
    parser.add_argument(
        "input",
        help="Text, CSV/TSV or HTML document to parse"
    )
    parser.add_argument(
        "--name",
        default=None,
        help="Document name (defaults to MATRIX_DOCUMENT_NAME or the file name)"
    )
    parser.add_argument(
        "--type",
        dest="document_type",
        default=None,
        help="Document type (defaults to MATRIX_DOCUMENT_TYPE or 'custom')"
    )
    parser.add_argument(
        "--output-dir",
        default=os.getenv("MATRIX_OUTPUT_DIR", "data/parsed"),
        help="Directory for the exported results"
    )
    parser.add_argument(
        "--csv",
        action="store_true",
        help="Also write a CSV export"
    )
    args = parser.parse_args()

    input_path = Path(args.input)
    options = ParseOptions.from_env()
    if args.name:
        options.document_name = args.name
    elif "MATRIX_DOCUMENT_NAME" not in os.environ:
        options.document_name = input_path.stem
    if args.document_type:
        options.document_type = args.document_type

    print(f"\n=== Parsing {input_path} ===\n")
    result = ComplianceMatrixParser(options).parse_file(input_path)
    if result is None:
        print("ERROR: Could not read input document!")
        sys.exit(1)

    print(f"Structure: {result.detected_structure.type.value} "
          f"(confidence {result.detected_structure.confidence:.2f})")
    print(f"Requirements: {result.stats.total_requirements} "
          f"({result.stats.categorized} categorized, {result.stats.with_reg_ref} with references)")
    for warning in result.warnings:
        print(f"WARNING: {warning}")

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    stem = slugify(result.document_name) or "document"

    json_path = output_dir / f"{stem}.json"
    with open(json_path, 'w', encoding='utf-8') as f:
        json.dump(export_to_json(result), f, ensure_ascii=False, indent=2)
    print(f"Saved: {json_path}")

    if args.csv:
        csv_path = output_dir / f"{stem}.csv"
        csv_path.write_text(export_to_csv(result), encoding='utf-8')
        print(f"Saved: {csv_path}")

    print("\n=== Parsing Complete ===\n")
    sys.exit(0 if result.requirements else 2)


if __name__ == "__main__":
    main()
