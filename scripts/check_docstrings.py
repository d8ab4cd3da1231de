"""Check that all code blocks in docstrings are properly closed."""

import ast
import re
from pathlib import Path
from typing import NamedTuple, TypeIs

import rich
import rich.table
import rich.text

import seqchain as sc

SRC_DIR = Path().joinpath("src", "seqchain")
CODE_BLOCK_PATTERN = re.compile(r"^```(\w*)")


class DocstringError(NamedTuple):
    """Error found in a docstring."""

    file_path: Path
    func_name: str
    line_no: int
    message: str


def _is_documentable(
    node: ast.AST,
) -> TypeIs[ast.FunctionDef | ast.AsyncFunctionDef | ast.ClassDef]:
    return isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef))


def _check_file(file_path: Path) -> sc.Seq[DocstringError]:
    try:
        tree = ast.parse(file_path.read_text(encoding="utf-8"))
    except SyntaxError as e:
        return sc.Seq([DocstringError(file_path, "<module>", e.lineno or 0, str(e))])

    return (
        sc.Seq(ast.walk(tree))
        .filter(_is_documentable)
        .map(lambda node: _check_node(file_path, node))
        .flatten()
    )


def _check_node(
    file_path: Path, node: ast.FunctionDef | ast.AsyncFunctionDef | ast.ClassDef
) -> list[DocstringError]:
    """Return the unbalanced fences of one docstring, if any."""
    docstring = ast.get_docstring(node)
    if docstring is None:
        return []
    opened: list[int] = []
    errors: list[DocstringError] = []
    for idx, line in sc.Seq(docstring.split("\n")).enumerate(node.lineno + 1):
        match = CODE_BLOCK_PATTERN.search(line.strip())
        if match is None:
            continue
        if match.group(1):
            opened.append(idx)
        elif opened:
            opened.pop()
        else:
            errors.append(
                DocstringError(
                    file_path, node.name, idx, "Closing ``` without matching opening"
                )
            )
    errors.extend(
        DocstringError(file_path, node.name, idx, "Unclosed ``` block")
        for idx in opened
    )
    return errors


def main() -> None:
    """Check all docstrings in the project."""
    rich.print(
        rich.text.Text(
            "Checking docstrings for properly closed code blocks...", style="cyan bold"
        )
    )
    files = sorted(SRC_DIR.rglob("*.py"))
    rich.print(f"Checking {len(files)} py files...")
    all_errors = sc.Seq(files).map(_check_file).flatten().collect()

    if not all_errors:
        rich.print(rich.text.Text("[OK] No issues found!", style="green"))
        return

    table = rich.table.Table(title="Issues Found", show_header=True)
    table.add_column("File", style="cyan")
    table.add_column("Function", style="magenta")
    table.add_column("Error", style="red")
    for error in all_errors:
        table.add_row(
            f"{error.file_path}:{error.line_no}", error.func_name, error.message
        )
    rich.print(table)
    rich.print(rich.text.Text(f"\n[FAILED] Found {len(all_errors)} issue(s)", style="red"))
    raise SystemExit(1)


if __name__ == "__main__":
    main()
