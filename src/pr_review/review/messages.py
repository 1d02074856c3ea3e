from pr_review.models.review import FindingKind


REVIEW_HEADER = "## 🤖 Automated PR Review"

ALL_CHECKS_PASSED = "✅ **All checks passed!** This PR looks good and meets our quality standards."

INLINE_ONLY = (
    "✅ **Code quality check completed.** Found some minor issues in the code "
    "that have been highlighted inline."
)

INLINE_BLOCKING = (
    "❌ **Changes requested.** Found issues that must be addressed before merging; "
    "see the inline comments."
)

OUTSIDE_DIFF_ONLY = (
    "⚠️ **Review completed.** Blocking markers were found outside the lines "
    "changed in this PR, so no inline comments were added."
)

REVIEW_ERROR = "❌ **Review Error:** An error occurred during automated review: {error}"


LARGE_PR = (
    "🚨 **Large Pull Request:** This PR has {total} lines changed (+{additions}, -{deletions}). "
    "Consider breaking it down into smaller, more focused PRs for easier review."
)

MEDIUM_PR = (
    "⚠️ **Medium-sized PR:** This PR has {total} lines changed (+{additions}, -{deletions}). "
    "Please ensure thorough testing."
)

SHORT_DESCRIPTION = (
    "📝 **Missing/Short Description:** Please provide a comprehensive description including:\n"
    "• What changes were made\n"
    "• Why these changes are needed\n"
    "• Any relevant context or linked issues\n"
    "• Testing steps (if applicable)"
)

SUSPICIOUS_FILES = (
    "⚠️ **Suspicious File Names:** The following files have concerning names:\n"
    "{files}\n"
    "Please ensure these are intentional and properly named."
)

LARGE_FILES = (
    "📏 **Large Files:** The following files have many changes:\n"
    "{files}\n"
    "Please ensure these changes are necessary and well-tested."
)

SPELLING_REMARK = "🔤 **Spelling Issue in `{path}`:** `{identifier}` → `{suggestion}` ({reason})"


LINE_TEMPLATES = {
    FindingKind.SPELLING: (
        "🔤 **Spelling Issue:** `{identifier}` → `{suggestion}`\n\n"
        "**Reason:** {reason}\n\n"
        "**Suggestion:** Consider renaming to `{suggestion}` for better code clarity."
    ),
    FindingKind.DEBUG_STATEMENT: (
        "💡 **Console Statement Detected**\n\n"
        "**Issue:** Console statements should be removed in production code.\n\n"
        "**Suggestion:** Consider using a proper logging library or removing this debug statement."
    ),
    FindingKind.TODO: (
        "⚠️ **TODO/FIXME Comment Detected**\n\n"
        "**Issue:** This comment indicates incomplete work or technical debt.\n\n"
        "**Suggestion:** Please address this before merging, or create an issue to track it."
    ),
    FindingKind.LARGE_FILE: (
        "📏 **Large File Warning**\n\n"
        "**Issue:** This file has many changes ({changes} lines).\n\n"
        "**Suggestion:** Consider breaking this into smaller, more focused changes for easier review."
    ),
}

DEFAULT_SPELLING_REASON = "Possible typo in variable or identifier name."


def render_line_comment(kind: FindingKind, **details) -> str:
    """Fill the inline template for ``kind``; KeyError for kinds without one."""
    if kind == FindingKind.SPELLING and not details.get("reason"):
        details["reason"] = DEFAULT_SPELLING_REASON
    return LINE_TEMPLATES[kind].format(**details)


def bullet_list(items: list[str]) -> str:
    return "\n".join(f"• {item}" for item in items)
