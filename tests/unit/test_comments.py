import pytest
from pr_review.models.review import FindingKind, SpellingSuggestion
from pr_review.review.checks import find_debug_statements
from pr_review.review.comments import CommentAssembler
from pr_review.review.messages import LINE_TEMPLATES, render_line_comment


def file_with_console_at_line_10() -> str:
    lines = [f"const line{i} = {i};" for i in range(1, 10)]
    lines.append('console.log("x")')
    return "\n".join(lines)


def assemble_debug(changed_lines) -> CommentAssembler:
    assembler = CommentAssembler(changed_lines)
    content = file_with_console_at_line_10()
    for line in find_debug_statements("src/app/page.tsx", content):
        assembler.add_line_comment(FindingKind.DEBUG_STATEMENT, "src/app/page.tsx", line)
    return assembler


@pytest.mark.unit
def test_debug_statement_in_diff_gets_one_comment():
    assembler = assemble_debug({"src/app/page.tsx": {9, 10, 11}})

    assert len(assembler.line_comments) == 1
    comment = assembler.line_comments[0]
    assert comment.line == 10
    assert comment.side == "RIGHT"
    assert comment.body == LINE_TEMPLATES[FindingKind.DEBUG_STATEMENT]


@pytest.mark.unit
def test_debug_statement_outside_diff_is_dropped():
    assembler = assemble_debug({"src/app/page.tsx": {1, 2, 3}})

    assert assembler.line_comments == []
    assert assembler.summary == []


@pytest.mark.unit
def test_todo_comment_requires_changed_file():
    assembler = CommentAssembler({"a.ts": {4}})

    assert assembler.add_line_comment(FindingKind.TODO, "b.ts", 4) is False
    assert assembler.add_line_comment(FindingKind.TODO, "a.ts", 4) is True
    assert "TODO/FIXME Comment Detected" in assembler.line_comments[0].body


@pytest.mark.unit
def test_large_file_template():
    assembler = CommentAssembler({"a.ts": {1}})

    assembler.add_line_comment(FindingKind.LARGE_FILE, "a.ts", 1, changes=420)

    assert "(420 lines)" in assembler.line_comments[0].body


@pytest.mark.unit
def test_spelling_bypasses_diff_filter():
    content = "import x from 'y';\nconst usrNam = 1;\n"
    assembler = CommentAssembler({})

    placed = assembler.add_spelling(
        "a.ts", content, SpellingSuggestion(identifier="usrNam", suggestion="userName", reason="typo")
    )

    assert placed is True
    comment = assembler.line_comments[0]
    assert comment.line == 2
    assert "`usrNam` → `userName`" in comment.body
    assert "**Reason:** typo" in comment.body


@pytest.mark.unit
def test_spelling_without_reason_uses_default():
    assembler = CommentAssembler({})

    assembler.add_spelling("a.ts", "const Shp = 1;", SpellingSuggestion(identifier="Shp", suggestion="Shop"))

    assert "Possible typo in variable or identifier name." in assembler.line_comments[0].body


@pytest.mark.unit
def test_unlocated_spelling_becomes_summary_remark():
    assembler = CommentAssembler({})

    placed = assembler.add_spelling(
        "a.ts", "const a = 1;", SpellingSuggestion(identifier="Elctronics", suggestion="Electronics")
    )

    assert placed is False
    assert assembler.line_comments == []
    assert assembler.summary == [
        "🔤 **Spelling Issue in `a.ts`:** `Elctronics` → `Electronics` (spelling issue)"
    ]


@pytest.mark.unit
def test_render_line_comment_unknown_kind():
    with pytest.raises(KeyError):
        render_line_comment(FindingKind.SIZE)
