"""Reading help text files and laying out command tables.

A help file is split into sections, each starting with a line that begins
with ``@``; a section holds topics, each starting with a line that begins
with ``~``.  The text of a topic runs until the next such line.
"""

from __future__ import annotations

from typing import Iterable, Sequence

_SECTION = "@"
_TOPIC = "~"
_FILE_HELP = ";;;"


class HelpFile:
    """The lines of a help file, with lookup by section and topic number."""

    def __init__(self, lines: Iterable[str]):
        self.lines = [line if line.endswith("\n") else line + "\n" for line in lines]

    @classmethod
    def from_text(cls, text: str) -> HelpFile:
        """Build a help file from its whole text."""
        return cls(text.splitlines(keepends=True))

    def sections(self) -> list[str]:
        """Titles of the sections, in order."""
        return [line[1:].rstrip("\n") for line in self.lines if line.startswith(_SECTION)]

    def topics(self, secn: int) -> list[str]:
        """Titles of the topics of section number ``secn`` (counted from 1)."""
        if secn < 1:
            return []
        seen = 0
        titles: list[str] = []
        for line in self.lines:
            if line.startswith(_SECTION):
                seen += 1
                if seen > secn:
                    break
            elif seen == secn and line.startswith(_TOPIC):
                titles.append(line[1:].rstrip("\n"))
        return titles

    def find_topic(self, name: str) -> tuple[int, int] | None:
        """``(section, topic)`` of the first header starting with ``name``.

        The topic number is 0 when a section title matches.  Returns None
        when no header matches.
        """
        secn = topn = 0
        for line in self.lines:
            if line.startswith(_SECTION):
                secn += 1
                topn = 0
            elif line.startswith(_TOPIC):
                topn += 1
            else:
                continue
            if line[1:].startswith(name):
                return secn, topn
        return None

    def topic_text(self, secn: int, topn: int) -> str:
        """Title and body of a topic, preceded by a blank line.

        Returns an empty string when either number is 0, and raises
        LookupError when there is no such topic.
        """
        if secn == 0 or topn == 0:
            return ""
        lines = iter(self.lines)
        for line in lines:
            if line.startswith(_SECTION):
                secn -= 1
            if line.startswith(_TOPIC) and secn == 0:
                topn -= 1
                if topn == 0:
                    out = ["\n", line[1:]]
                    for body in lines:
                        if body.startswith(_SECTION) or body.startswith(_TOPIC):
                            break
                        out.append(body)
                    return "".join(out)
        raise LookupError("no help on this topic")


def format_command_table(
    names: Sequence[str], linesize: int = 80, comment: bool = False
) -> str:
    """Lay out ``names`` in columns, filling each column top to bottom."""
    if comment:
        linesize -= 2
    nelems = len(names)
    if nelems == 0:
        return "\n\n"
    maxlength = max(len(name) for name in names)
    ncolumns = max(linesize // (maxlength + 1), 1)
    nlines = (nelems - 1) // ncolumns + 1
    out: list[str] = []
    for i in range(nlines):
        out.append("\n")
        for m in range(i, nelems, nlines):
            out.append(f"{names[m]:<{maxlength}} ")
    out.append("\n")
    return "".join(out)


def extract_file_help(lines: Iterable[str]) -> str:
    """The help lines (``;;;`` prefix removed) of a script, up to the first ``@`` line."""
    out: list[str] = []
    for line in lines:
        if line.startswith(_FILE_HELP):
            out.append(line[len(_FILE_HELP):])
        elif line.startswith(_SECTION):
            break
    return "".join(out)