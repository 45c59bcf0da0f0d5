#!/usr/bin/env python3
"""
fieldtree - Mappings normalization tool

Main entry point for fieldtree. Loads a mappings document (JSON or YAML),
runs it through the normalization engine and prints the result.
"""

import json
import logging
import sys
import argparse
from pathlib import Path
from typing import Any, Dict, List

import yaml

from fieldtree.config import config
from fieldtree.models import NormalizedField, NormalizedFields, TreeItem
from fieldtree.normalization import (
    FieldNormalizer,
    build_field_tree_from_ids,
    can_use_mappings_editor,
    rename_field,
)


def setup_logging():
    """Configure logging for the application."""
    level = getattr(logging, config.log_level.upper())

    logging.basicConfig(
        level=level,
        format=config.log_format,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )


def load_document(path: str) -> Dict[str, Any]:
    """
    Load a JSON or YAML document.

    Args:
        path: Path to the file; ".json" is parsed as JSON, anything else as YAML

    Returns:
        The parsed document
    """
    file_path = Path(path)
    with open(file_path, 'r', encoding='utf-8') as f:
        if file_path.suffix.lower() == ".json":
            document = json.load(f)
        else:
            document = yaml.safe_load(f)

    if not isinstance(document, dict):
        raise ValueError(f"Expected a mapping at the top of {path}")

    logging.info(f"Loaded document from {path}")
    return document


def extract_fields(document: Dict[str, Any]) -> Dict[str, Any]:
    """
    Get the root-level fields of a mappings document.

    Accepts either `{"properties": {...}}`, `{"mappings": {"properties": {...}}}`
    or the bare field mapping. A bare mapping may itself declare a field named
    "properties"; the key is only unwrapped when it holds field declarations.
    """
    if "mappings" in document and isinstance(document["mappings"], dict):
        document = document["mappings"]
    if "properties" in document and is_field_container(document["properties"]):
        return document["properties"]
    return document


def is_field_container(value: Any) -> bool:
    """Whether every entry of `value` is a field declaration."""
    return isinstance(value, dict) and all(isinstance(v, dict) for v in value.values())


def render_label(field: NormalizedField) -> str:
    """Label a field as `name (type)`."""
    data_type = field.source.get("type", "object")
    return f"{field.name} ({data_type})"


def format_tree(items: List[TreeItem], depth: int = 0) -> List[str]:
    """Flatten an outline into indented lines."""
    indent = config.get("output.tree_indent", "  ")
    lines = []
    for item in items:
        lines.append(f"{indent * depth}{item.label}")
        if item.children:
            lines.extend(format_tree(item.children, depth + 1))
    return lines


def find_field_by_path(normalized: NormalizedFields, path: str) -> NormalizedField:
    """
    Look up a row by its dotted path.

    Raises:
        KeyError: If no field has that path
    """
    for field in normalized.by_id.values():
        if field.path == path:
            return field
    raise KeyError(f"No field found at path '{path}'")


def cmd_normalize(args) -> int:
    fields = extract_fields(load_document(args.file))
    normalized = FieldNormalizer().normalize(fields)
    print(normalized.model_dump_json(indent=config.get("output.indent", 2)))
    return 0


def cmd_denormalize(args) -> int:
    normalized = NormalizedFields.model_validate(load_document(args.file))
    fields = FieldNormalizer().denormalize(normalized)
    print(json.dumps({"properties": fields}, indent=config.get("output.indent", 2)))
    return 0


def cmd_tree(args) -> int:
    normalized = FieldNormalizer().normalize(extract_fields(load_document(args.file)))
    items = build_field_tree_from_ids(normalized.root_level_fields, normalized.by_id, render_label)
    for line in format_tree(items):
        print(line)
    return 0


def cmd_depth(args) -> int:
    normalized = FieldNormalizer().normalize(extract_fields(load_document(args.file)))
    usable = can_use_mappings_editor(normalized.max_nested_depth)
    print(f"Max nested depth: {normalized.max_nested_depth}")
    print(f"Form editor available: {'yes' if usable else 'no'}")
    return 0 if usable else 2


def cmd_rename(args) -> int:
    normalized = FieldNormalizer().normalize(extract_fields(load_document(args.file)))
    field = find_field_by_path(normalized, args.path)
    new_path, by_id = rename_field(field.id, args.new_name, normalized.by_id)
    logging.info(f"Renamed {args.path} to {new_path}")

    for row in sorted(by_id.values(), key=lambda f: f.path):
        print(row.path)
    return 0


def main(argv=None) -> int:
    """Main entry point with command line argument parsing."""
    parser = argparse.ArgumentParser(
        description="fieldtree - Normalize and inspect index mappings fields"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    normalize_parser = subparsers.add_parser("normalize", help="Print the normalized table as JSON")
    normalize_parser.add_argument("file", help="Mappings document (JSON or YAML)")
    normalize_parser.set_defaults(func=cmd_normalize)

    denormalize_parser = subparsers.add_parser("denormalize", help="Rebuild fields from a normalized table")
    denormalize_parser.add_argument("file", help="Normalized table (JSON or YAML)")
    denormalize_parser.set_defaults(func=cmd_denormalize)

    tree_parser = subparsers.add_parser("tree", help="Print the fields as an outline")
    tree_parser.add_argument("file", help="Mappings document (JSON or YAML)")
    tree_parser.set_defaults(func=cmd_tree)

    depth_parser = subparsers.add_parser("depth", help="Report nesting depth and editor availability")
    depth_parser.add_argument("file", help="Mappings document (JSON or YAML)")
    depth_parser.set_defaults(func=cmd_depth)

    rename_parser = subparsers.add_parser("rename", help="Rename a field and print the updated paths")
    rename_parser.add_argument("file", help="Mappings document (JSON or YAML)")
    rename_parser.add_argument("path", help="Dotted path of the field to rename")
    rename_parser.add_argument("new_name", help="New field name")
    rename_parser.set_defaults(func=cmd_rename)

    args = parser.parse_args(argv)
    setup_logging()

    try:
        return args.func(args)
    except (OSError, ValueError, KeyError, yaml.YAMLError) as e:
        logging.error(f"{args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
