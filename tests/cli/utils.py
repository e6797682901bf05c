from contextlib import redirect_stderr, redirect_stdout
from io import StringIO
from types import ModuleType
from typing import NamedTuple, Optional
from unittest.mock import patch


class CommandResult(NamedTuple):
    code: int
    stdout: str
    stderr: str


def run_command(module: ModuleType, argv: list[str], *, stdin: Optional[str] = None) -> CommandResult:
    """Parse `argv` with the command's parser and execute it, capturing its output."""
    args = module.create_parser().parse_args(argv)
    out, err = StringIO(), StringIO()
    with redirect_stdout(out), redirect_stderr(err), patch('sys.stdin', StringIO(stdin or '')):
        code = module.execute(args)
    return CommandResult(code, out.getvalue(), err.getvalue())
