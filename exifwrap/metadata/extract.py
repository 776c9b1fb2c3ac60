import io
import logging
import os
import shlex
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Optional, Sequence, Tuple

from .. import config
from ..exceptions import (
    PathNotFoundError,
    PathInaccessibleError,
    EnvironmentUnavailableError,
    ToolNotInstalledError,
    LaunchFailedError,
    ExecutionFailedError,
)
from ..models import MediaRecord


@dataclass(frozen=True)
class ToolCommand:
    """
    Explicit replacement for the exiftool lookup.

    argv[0] is the executable, anything after it is passed ahead of the
    per-call arguments. Useful to pin a binary or to point tests at a fake.
    """
    argv: Tuple[str, ...]

    def __post_init__(self):
        if not self.argv:
            raise ValueError("ToolCommand needs at least an executable")
        object.__setattr__(self, "argv", tuple(str(a) for a in self.argv))

    @classmethod
    def parse(cls, command_line: str) -> "ToolCommand":
        """Builds a command from a shell-style string, e.g. "perl /opt/exiftool -fast"."""
        return cls(tuple(shlex.split(command_line)))


def resolve_existing_path(path) -> Path:
    """
    Returns an absolute, normalised version of `path`, which must exist.
    Relative paths are taken from the current working directory.
    """
    raw = os.fspath(path)
    if not os.path.isabs(raw):
        try:
            cwd = os.getcwd()
        except OSError as e:
            raise EnvironmentUnavailableError(
                f"Cannot determine working directory to resolve {raw}: {e}"
            ) from e
        raw = os.path.join(cwd, raw)

    resolved = Path(os.path.normpath(raw))
    try:
        resolved.stat()
    except (FileNotFoundError, NotADirectoryError) as e:
        raise PathNotFoundError(f"Path not found: {resolved}") from e
    except (OSError, ValueError) as e:
        # ValueError: embedded null byte
        raise PathInaccessibleError(f"Cannot access {resolved}: {e}") from e
    return resolved


def parse_output_lines(lines: Iterable[str], fields: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """
    Parses exiftool's "Label : Value" output into `fields`.

    Only the first colon splits, so values such as timestamps keep theirs.
    Lines without a colon are ignored and later labels overwrite earlier ones.
    """
    if fields is None:
        fields = {}
    for line in lines:
        key, sep, value = line.partition(":")
        if not sep:
            continue
        fields[key.strip()] = value.strip()
    return fields


class ExifToolExtractor:
    """
    Runs exiftool against a file and collects its textual output.

    Each call to `extract` launches its own process and builds a fresh
    MediaRecord, so one extractor can be shared between threads.
    """

    def __init__(self, command: Optional[ToolCommand] = None):
        self.command = command

    def extract(self, path, args: Optional[Sequence[str]] = None) -> MediaRecord:
        """
        Builds a MediaRecord for `path`.

        Args:
            path: File to analyze, absolute or relative to the working directory.
            args: Extra exiftool arguments placed before the file name.

        Raises:
            PathNotFoundError, PathInaccessibleError, EnvironmentUnavailableError,
            ToolNotInstalledError, LaunchFailedError, ExecutionFailedError
        """
        resolved = resolve_existing_path(path)
        record = MediaRecord(path=resolved)

        cmd = self._build_command(resolved, args or [])
        logging.debug(f"Running {' '.join(cmd)}")

        try:
            proc = subprocess.Popen(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
            )
        except OSError as e:
            raise LaunchFailedError(f"Error starting {cmd[0]}: {e}") from e

        # Leaving the block closes stdout and waits for the process,
        # including when parsing raises. Lines end at "\n" only, a bare "\r"
        # stays inside its value.
        with proc, io.TextIOWrapper(
            proc.stdout,
            encoding=config.OUTPUT_ENCODING,
            errors=config.OUTPUT_ERRORS,
            newline="\n",
        ) as stdout:
            parse_output_lines(stdout, record.fields)
            returncode = proc.wait()

        logging.debug(f"{cmd[0]} exited with {returncode}, {len(record.fields)} fields for {resolved}")

        if returncode != 0:
            raise ExecutionFailedError(
                f"{cmd[0]} failed on {resolved} (exit status {returncode})",
                returncode=returncode,
                record=record,
            )
        return record

    def _build_command(self, path: Path, args: Sequence[str]) -> list:
        if self.command is None:
            exe = shutil.which(config.EXIFTOOL_NAME)
            if exe is None:
                raise ToolNotInstalledError(f"{config.EXIFTOOL_NAME} is not installed")
            base = [exe]
        else:
            base = list(self.command.argv)
        return base + [str(a) for a in args] + [str(path)]


def load_media_record(path, *args: str, command: Optional[ToolCommand] = None) -> MediaRecord:
    """Shortcut for ExifToolExtractor(command).extract(path, args)."""
    return ExifToolExtractor(command).extract(path, list(args))
