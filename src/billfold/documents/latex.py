#!/usr/bin/env python3
"""
LaTeX Escaping and Compilation

Escapes user text for LaTeX and runs an external compiler (pdflatex by default)
on a rendered document in a scratch directory.
"""

import logging
import shutil
import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path

from ..core.exceptions import LatexCompileError

logger = logging.getLogger(__name__)

_LATEX_SPECIAL_CHARS = {
    "\\": r"\textbackslash{}",
    "{": r"\{",
    "}": r"\}",
    "$": r"\$",
    "&": r"\&",
    "#": r"\#",
    "^": r"\textasciicircum{}",
    "_": r"\_",
    "%": r"\%",
    "~": r"\textasciitilde{}",
}

DOCUMENT_BASENAME = "document"


class LatexMarkup(str):
    """String that is already valid LaTeX and must not be escaped again."""


def escape_latex(text: str) -> LatexMarkup:
    """
    Escape characters that have special meaning in LaTeX.

    Example:
        escape_latex("R&D 100%") -> "R\\&D 100\\%"
    """
    if isinstance(text, LatexMarkup):
        return text
    return LatexMarkup("".join(_LATEX_SPECIAL_CHARS.get(char, char) for char in text))


def href(url: str, text: str) -> LatexMarkup:
    """Hyperlink; requires the hyperref package in the document."""
    escaped_url = url.replace("\\", "").replace("%", r"\%").replace("#", r"\#")
    return LatexMarkup(rf"\href{{{escaped_url}}}{{{escape_latex(text)}}}")


@dataclass(frozen=True)
class Asset:
    """Supporting file copied next to the document before compiling."""

    filename: str
    data: bytes


def compile_latex(
    tex: str,
    pdf_output_path: Path,
    assets: list[Asset] | None = None,
    compiler: str = "pdflatex",
) -> Path:
    """
    Compile LaTeX source to PDF and copy the result to `pdf_output_path`.

    Args:
        tex: Complete LaTeX document
        pdf_output_path: Destination of the PDF
        assets: Supporting files (class/style files) for the compilation directory
        compiler: Compiler executable

    Returns:
        The output path

    Raises:
        LatexCompileError: If the compiler is missing or exits unsuccessfully
        OSError: If writing the sources or copying the PDF fails
    """
    with tempfile.TemporaryDirectory(prefix="billfold-") as tmp:
        tmp_dir = Path(tmp)
        tex_path = tmp_dir / f"{DOCUMENT_BASENAME}.tex"
        pdf_path = tmp_dir / f"{DOCUMENT_BASENAME}.pdf"

        tex_path.write_text(tex, encoding="utf-8")
        for asset in assets or []:
            (tmp_dir / asset.filename).write_bytes(asset.data)

        command = [compiler, "-interaction=nonstopmode", "-halt-on-error", tex_path.name]
        logger.debug(f"Running {' '.join(command)} in {tmp_dir}")

        try:
            result = subprocess.run(command, cwd=tmp_dir, stdin=subprocess.DEVNULL)
        except FileNotFoundError as e:
            raise LatexCompileError(f"LaTeX compiler not found: {compiler}") from e

        if result.returncode != 0:
            raise LatexCompileError(
                f"{compiler} exited with non-success status {result.returncode}",
                returncode=result.returncode,
            )

        pdf_output_path = Path(pdf_output_path)
        pdf_output_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(pdf_path, pdf_output_path)

    return pdf_output_path
