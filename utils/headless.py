# utils/headless.py
"""
Headless run of the code viewer for CI and terminals:
load -> print DisplayText -> save the LineSequence under the save title.

    code-viewer-headless [RESOURCE] [--out DIR] [--crlf]
"""

from __future__ import annotations
import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence, Union

from services.text_saver import save_lines
from state import CodePresenter
from utils.constants import LINE_ENDING
from utils.runtime import artifacts_dir, encoding, resource_path


def run_headless(
    resource: Union[str, Path, None] = None,
    out_dir: Union[str, Path, None] = None,
    *,
    line_ending: str = LINE_ENDING,
) -> Optional[Path]:
    """
    Returns the saved file path, or None when the load failed
    (the failure has already gone to the diagnostic channel).
    """
    path = Path(resource) if resource is not None else resource_path()
    enc = encoding()
    presenter = CodePresenter()
    presenter.request(path, enc)
    presenter.wait()
    if not presenter.can_save:
        return None

    print(presenter.display_text)
    request = presenter.save()
    return save_lines(
        request.lines,
        request.title,
        out_dir if out_dir is not None else artifacts_dir(),
        line_ending=line_ending,
        encoding=enc,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="code-viewer-headless", description=__doc__.splitlines()[1])
    parser.add_argument("resource", nargs="?", default=None, help="text file to load (default: code.txt)")
    parser.add_argument("--out", default=None, help="directory for the saved file (default: artifacts/)")
    parser.add_argument("--crlf", action="store_true", help="write \\r\\n line endings")
    args = parser.parse_args(argv)

    saved = run_headless(args.resource, args.out, line_ending="\r\n" if args.crlf else LINE_ENDING)
    if saved is None:
        return 1
    print(f"saved: {saved}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
