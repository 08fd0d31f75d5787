#!/usr/bin/env python3
"""
docdirectives - Component API documentation extractor

Scans a documentation tree for per-component pages, extracts the
directives documented in their API sections and writes them as one JSON
list for downstream documentation/search generators.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Usage:
    docdirectives inputdir/ outputdir/ --lang zh-CN

    Pages matching --filePattern under inputdir/ are processed in sorted
    order and the result is written to outputdir/directives.<lang>.json.

Examples:
    # Chinese pages of an ng-zorro-antd checkout
    docdirectives ng-zorro-antd/components/ out/ --lang zh-CN

    # English pages, custom layout, verbose
    docdirectives docs/ out/ --lang en-US --filePattern '**/*.{lang}.md' -vv
"""

import sys
import json
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import DirectiveExtractor, zone_resolve, __version__, LOG, state_connectToLogger
from .models import DocumentError, LocaleError, ProgramState, pipeline


# Define CLI arguments
parser = ArgumentParser(
    description="docdirectives - extract component directives from API documentation pages",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--lang",
    default=appsettings.default_lang,
    type=str,
    help="Locale code of the pages (zh-CN or en-US)",
)

parser.add_argument(
    "--filePattern",
    default=appsettings.file_pattern,
    type=str,
    help="Glob (relative to inputdir) of pages to process; {lang} is substituted",
)

parser.add_argument(
    "--outputFile",
    default=appsettings.output_name,
    type=str,
    help="Output JSON filename within outputdir; {lang} is substituted",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and discover the pages to process.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputFiles: Sorted page paths
            - jsonOutputFile: Resolved output path
            - envOK: True if environment is valid

    Exits:
        1 if the locale is unsupported, inputdir is missing or no page matches
    """

    state = inputstate.copy()

    LOG("Checking environment...", level=2)

    try:
        zone_resolve(state.lang)
    except LocaleError as e:
        print(f"Error: {e}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    if state.inputdir is None or not state.inputdir.is_dir():
        print(f"Error: Input directory not found: {state.inputdir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    pattern = appsettings.filePattern_make(state.lang, state.filePattern)
    state.inputFiles = sorted(p for p in state.inputdir.glob(pattern) if p.is_file())
    if not state.inputFiles:
        print(f"Error: No pages match {pattern} in {state.inputdir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)
    LOG(f"Found {len(state.inputFiles)} pages matching {pattern}", level=2)

    state.outputdir.mkdir(parents=True, exist_ok=True)
    state.jsonOutputFile = state.outputdir / appsettings.outputName_make(state.lang, state.outputFile)
    LOG(f"Output file: {state.jsonOutputFile}", level=2)

    state.envOK = True
    return state


def directives_extract(inputstate: ProgramState) -> ProgramState:
    """
    Extract directives from every discovered page.

    Args:
        inputstate: Program state with inputFiles set

    Returns:
        ProgramState with added field:
            - directives: List[Directive] in page, then heading, order

    Exits:
        1 if a page cannot be read or its front matter is invalid
    """

    state = inputstate.copy()

    LOG("Extracting directives...", level=1)

    extractor = DirectiveExtractor()
    try:
        state.directives = extractor.directives_make(state.lang, state.inputFiles)
    except (OSError, DocumentError) as e:
        print(f"Extraction error: {e}", file=sys.stderr)
        sys.exit(1)

    LOG(f"Extracted {len(state.directives)} directives", level=2)
    return state


def results_write(inputstate: ProgramState) -> ProgramState:
    """
    Write extracted directives as a JSON list.

    Returns:
        ProgramState with added field:
            - writeResult: Dict containing:
                - status: bool (write success)
                - output_file: str (path to the JSON file)
                - directive_count: int
                - file_count: int (pages processed)

    Exits:
        1 if directives is None or the file cannot be written
    """

    state = inputstate.copy()

    if state.directives is None:
        print("Error: No extracted directives available", file=sys.stderr)
        sys.exit(1)

    records = [directive.dict_build() for directive in state.directives]
    indent = appsettings.json_indent or None
    try:
        state.jsonOutputFile.write_text(
            json.dumps(records, ensure_ascii=False, indent=indent), encoding="utf-8"
        )
    except OSError as e:
        print(f"Error writing output file: {e}", file=sys.stderr)
        sys.exit(1)
    LOG(f"Wrote {state.jsonOutputFile}", level=2)

    state.writeResult = {
        "status": True,
        "output_file": str(state.jsonOutputFile),
        "directive_count": len(records),
        "file_count": len(state.inputFiles),
    }
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display extraction results to user.

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if writeResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.writeResult:
        print("Error: Extraction failed", file=sys.stderr)
        sys.exit(1)

    LOG("\n✓ Extraction successful!", level=1)
    LOG(f"  Output: {state.writeResult['output_file']}", level=1)
    LOG(f"  Pages: {state.writeResult['file_count']}", level=1)
    LOG(f"  Directives: {state.writeResult['directive_count']}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="docdirectives - Component API documentation extractor",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - extract directives from a documentation tree.

    Orchestrates the full extraction pipeline:
        1. env_check: Validate locale and paths, discover pages
        2. directives_extract: Extract directives from every page
        3. results_write: Write the JSON list
        4. results_report: Display results to user

    Args:
        options: CLI arguments from argparse
            - lang: str - Locale code
            - filePattern: str - Page glob
            - outputFile: str - Output filename
            - verbosity: int - Logging verbosity level (1-3)
        inputdir: Directory containing documentation pages
        outputdir: Directory where the JSON file will be written

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, directives_extract, results_write, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
