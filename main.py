from __future__ import annotations
import logging
import os
import sys
from colors import Color, WHITE, parse_rgb_triplet
from errors import SVGError
from svg_document import SVGDocument
from renderer import Renderer

USAGE = """SVG to PNG Converter
Usage: svgraster <svg_file1> [svg_file2] ... [options]

Options:
  -v, --verbose         Print detailed information
  -o, --output PATH     Output file (single input) or output directory
  -b, --background RGB  Background color as R,G,B (default: 255,255,255)
  --lenient             Skip elements with bad attributes instead of aborting
  --skip-render         Skip rendering (only load and report)

Examples:
  svgraster test.svg
  svgraster file1.svg file2.svg -o out/
  svgraster test.svg -b 0,0,0  # Black background"""

def default_output_path(svg_path: str, output_dir: str | None = None) -> str:
    base_name = os.path.splitext(os.path.basename(svg_path))[0]
    if output_dir:
        return os.path.join(output_dir, f"{base_name}.png")
    return f"{base_name}.png"

def process_svg_file(svg_path: str, output_path: str | None = None, verbose: bool = False,
                     background: Color = WHITE, strict: bool = True,
                     skip_render: bool = False) -> bool:
    if not svg_path.lower().endswith('.svg'):
        print(f"Warning: {svg_path} does not have .svg extension")

    try:
        document = SVGDocument.from_file(svg_path, strict=strict)
    except SVGError as e:
        print(f"Error: {e}")
        return False

    if verbose:
        print(f"\nProcessing: {svg_path}")
        print(f"Canvas: {document.width}x{document.height}")
        document.svg_tree.print_tree()
        document.print_report()

    if output_path is None:
        output_path = default_output_path(svg_path)

    if skip_render:
        print(f"[OK] Loaded: {svg_path} (rendering skipped)")
        return True

    try:
        Renderer(document, background).render().save(output_path)
    except (OSError, ValueError) as e:
        print(f"Error saving {output_path}: {e}")
        return False

    print(f"[OK] {svg_path} -> {output_path}")
    return True

def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    if len(args) == 0:
        print(USAGE)
        return 0

    verbose = False
    output = None
    background = WHITE
    strict = True
    skip_render = False
    svg_files = []

    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ['-v', '--verbose']:
            verbose = True
        elif arg in ['-o', '--output']:
            if i + 1 >= len(args):
                print("Error: -o/--output requires a path argument")
                return 2
            output = args[i + 1]
            i += 1
        elif arg in ['-b', '--background']:
            if i + 1 >= len(args):
                print("Error: -b/--background requires R,G,B values")
                return 2
            try:
                background = parse_rgb_triplet(args[i + 1])
            except ValueError:
                print("Error: Background must be R,G,B integers (e.g., 255,255,255)")
                return 2
            i += 1
        elif arg == '--lenient':
            strict = False
        elif arg == '--skip-render':
            skip_render = True
        elif arg.startswith('-'):
            print(f"Unknown option: {arg}")
            return 2
        else:
            svg_files.append(arg)
        i += 1

    if len(svg_files) == 0:
        print("Error: No SVG files specified")
        return 2

    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    if output and len(svg_files) > 1 and not os.path.isdir(output):
        print("Error: -o with multiple files requires an existing directory")
        return 2

    success_count = 0
    for svg_file in svg_files:
        if output is None:
            output_path = None
        elif os.path.isdir(output):
            output_path = default_output_path(svg_file, output)
        else:
            output_path = output

        if process_svg_file(svg_file, output_path, verbose, background, strict, skip_render):
            success_count += 1

    print(f"\nProcessed {success_count}/{len(svg_files)} file(s) successfully")
    return 0 if success_count == len(svg_files) else 1

if __name__ == "__main__":
    sys.exit(main())
