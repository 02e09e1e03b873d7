# File: hyprtune/document/model.py
"""
Line-record model of a Hyprland-style config document.

The document is kept as an ordered list of records, one per physical line.
A record is either passed through verbatim (``RawLine``) or recognised as a
scalar ``key = value`` assignment (``Assignment``) whose value span can be
replaced on its own. Rendering the records reproduces the parsed text
byte-for-byte, including line endings and a missing final newline.
"""

import logging
import os
import re
import shutil
import tempfile
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ..errors import ConfigNotFoundError, ConfigReadError, ConfigWriteError

logger = logging.getLogger(__name__)

_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+")
_ASSIGNMENT_RE = re.compile(
    r"^(?P<indent>\s*)(?P<key>[^=]*?)(?P<operator>\s*=\s*)(?P<value>.*?)(?P<pad>\s*)$",
    re.DOTALL,
)


def split_comment(text: str) -> tuple[str, str]:
    """
    Splits a line body into (code, comment) at the first unescaped ``#``.

    ``##`` is Hyprland's escape for a literal ``#`` and does not start a comment.
    """
    i = 0
    while i < len(text):
        if text[i] == "#":
            if text[i + 1 : i + 2] == "#":
                i += 2
                continue
            return text[:i], text[i:]
        i += 1
    return text, ""


class RawLine(BaseModel):
    """A line that is passed through untouched."""

    model_config = ConfigDict(frozen=True)

    body: str
    ending: str = ""

    @property
    def code(self) -> str:
        return split_comment(self.body)[0]

    def render(self) -> str:
        return self.body + self.ending


class Assignment(BaseModel):
    """A ``key = value`` line, split into spans that render back to the original."""

    model_config = ConfigDict(frozen=True)

    indent: str = ""
    key: str
    operator: str = Field(..., description="'=' with its surrounding spacing.")
    value: str
    trailing: str = Field(
        default="", description="Whitespace after the value plus any comment."
    )
    ending: str = ""

    @property
    def code(self) -> str:
        return self.indent + self.key + self.operator + self.value

    def render(self) -> str:
        return self.code + self.trailing + self.ending

    def with_value(self, value: str) -> "Assignment":
        return self.model_copy(update={"value": value})


LineRecord = RawLine | Assignment


def parse_line(body: str, ending: str = "") -> LineRecord:
    """Classifies one line body. Lines that carry braces are never assignments."""
    code, comment = split_comment(body)
    if "=" not in code or "{" in code or "}" in code:
        return RawLine(body=body, ending=ending)
    match = _ASSIGNMENT_RE.match(code)
    if not match or not match.group("key"):
        return RawLine(body=body, ending=ending)
    return Assignment(
        indent=match.group("indent"),
        key=match.group("key"),
        operator=match.group("operator"),
        value=match.group("value"),
        trailing=match.group("pad") + comment,
        ending=ending,
    )


class ConfigDocument(BaseModel):
    """An ordered sequence of line records parsed from config text."""

    lines: list[LineRecord] = Field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> "ConfigDocument":
        records: list[LineRecord] = []
        for chunk in _LINE_RE.findall(text):
            if chunk.endswith("\r\n"):
                ending = "\r\n"
            elif chunk.endswith("\n"):
                ending = "\n"
            else:
                ending = ""
            records.append(parse_line(chunk[: len(chunk) - len(ending)], ending))
        return cls(lines=records)

    @classmethod
    def load(cls, path: Path) -> "ConfigDocument":
        """Reads and parses ``path``. Newlines are read untranslated."""
        path = Path(path)
        try:
            with open(path, encoding="utf-8", newline="") as handle:
                text = handle.read()
        except FileNotFoundError as e:
            raise ConfigNotFoundError(path) from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigReadError(path, str(e)) from e
        return cls.parse(text)

    def render(self) -> str:
        return "".join(record.render() for record in self.lines)

    def replace_value(self, index: int, value: str) -> None:
        record = self.lines[index]
        if not isinstance(record, Assignment):
            raise TypeError(f"Line {index + 1} is not an assignment.")
        self.lines[index] = record.with_value(value)

    def save(self, path: Path) -> None:
        """
        Writes the rendered document over ``path``.

        The text goes to a temporary file beside the real target (symlinks are
        followed) and is moved into place, so readers never see a partial file.
        """
        target = Path(path).resolve()
        tmp_name: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                newline="",
                dir=target.parent,
                prefix=f".{target.name}.",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(self.render())
            if target.exists():
                shutil.copymode(target, tmp_name)
            os.replace(tmp_name, target)
            tmp_name = None
        except OSError as e:
            raise ConfigWriteError(target, str(e)) from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
        logger.debug(f"Wrote {len(self.lines)} lines to {target}")
