"""
Entry point of the application

Parses a DDL file and prints the parsed types.

Usage
-----
python app.py <ddl-file> [--config FILE] [--strict]
"""
import argparse
import sys
from typing import Optional

from ddl_schema.config import ParserConfig, load_config
from ddl_schema.schema_toolkit import DdlParser, TypeDescriptor



def format_type(descriptor:TypeDescriptor) -> str:
    """Text representation of a parsed type"""
    lines = [f"Type: {descriptor.name}"]
    for f in descriptor.fields:
        lines.append(f"  Property: {f.name} [{f.ftype.name}]")
    if descriptor.primary_key is not None:
        lines.append(f"  Primary key: {descriptor.primary_key}")
    return "\n".join(lines)

def main(argv:Optional[list[str]]=None) -> int:
    """
    Entry point of the application

    Returns
    -------
    int
        Exit code
    """
    arg_parser = argparse.ArgumentParser(description="Parse SQL DDL into type descriptions")
    arg_parser.add_argument("ddl_file", help="file containing the DDL statements")
    arg_parser.add_argument("--config", help="TOML settings file")
    arg_parser.add_argument("--strict", action="store_true",
                            help="fail on unknown SQL type names")
    args = arg_parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else ParserConfig()
        if args.strict:
            config.strict_types = True

        builders = DdlParser(config).parse_file(args.ddl_file)
        descriptors = [b.create() for b in builders]
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Parsed types: {len(descriptors)}")
    for descriptor in descriptors:
        print(format_type(descriptor))
    return 0



if __name__ == "__main__":
    sys.exit(main())
