from pr_review.review.prompts import SPELLING_SYSTEM_PROMPT, build_spelling_prompt


def test_build_spelling_prompt_lists_items():
    prompt = build_spelling_prompt(["usrNam", "Elctronics"])

    assert "- usrNam\n- Elctronics" in prompt
    assert '"identifier"' in prompt
    assert '"suggestion"' in prompt


def test_system_prompt_asks_for_json():
    assert "JSON" in SPELLING_SYSTEM_PROMPT
