# src/pr_review/review/diff.py
import re


ChangedLineSet = dict[str, set[int]]

FILE_HEADER_RE = re.compile(r"^diff --git a/(.+) b/(.+)$")
HUNK_HEADER_RE = re.compile(r"^@@ -(\d+)(?:,(\d*))? \+(\d+)(?:,(\d*))? @@")


def parse_changed_lines(diff_text: str) -> ChangedLineSet:
    """Map each file in a unified diff to the new-side line numbers its hunks cover.

    Only hunk headers are read: every line in ``[start, start + count)`` of the
    new side is recorded, context lines included. Headers that don't match are
    skipped.
    """
    changed: ChangedLineSet = {}
    current_file: str | None = None

    for line in diff_text.split("\n"):
        if line.startswith("diff --git"):
            match = FILE_HEADER_RE.match(line)
            current_file = match.group(2) if match else None
        elif line.startswith("@@") and current_file is not None:
            match = HUNK_HEADER_RE.match(line)
            if not match:
                continue
            start = int(match.group(3))
            count = int(match.group(4)) if match.group(4) else 1
            changed.setdefault(current_file, set()).update(range(start, start + count))

    return changed


def is_line_changed(changed: ChangedLineSet, path: str, line: int) -> bool:
    return line in changed.get(path, set())
