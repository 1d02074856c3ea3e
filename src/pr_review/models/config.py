from pydantic import BaseModel, Field


class ReviewConfig(BaseModel):
    """Per-repository review thresholds, read from .pr-review.yaml."""

    large_pr_lines: int = 500
    medium_pr_lines: int = 200
    min_description_length: int = 50
    suspicious_name_patterns: list[str] = Field(
        default_factory=lambda: ["temp", "tmp", "debug", "TODO"]
    )
    large_file_changes: int = 300
    max_scanned_files: int = 5
    max_identifiers: int = 20
    script_extensions: list[str] = Field(
        default_factory=lambda: [".ts", ".tsx", ".js", ".jsx"]
    )
    spelling_check: bool = True
    large_file_inline: bool = False
