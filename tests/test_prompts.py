from mindvault.workflow.prompts import Action, Tone, build_prompt


def test_summarize_prompt_asks_for_three_bullets() -> None:
    prompt = build_prompt("summarize", {"content": "  Weekly sync notes  "})
    assert "3 concise bullet points" in prompt
    assert "No extra commentary" in prompt
    assert prompt.endswith("Weekly sync notes")


def test_improve_prompt_defaults_to_professional_tone() -> None:
    prompt = build_prompt(Action.IMPROVE, {"content": "draft"})
    assert "Use a professional tone." in prompt
    assert "ONLY a single rewritten version" in prompt
    assert "max 2 short paragraphs" in prompt
    assert "preserve the original meaning" in prompt


def test_improve_prompt_uses_requested_tone() -> None:
    prompt = build_prompt("improve", {"content": "draft", "tone": Tone.CASUAL})
    assert "Use a casual tone." in prompt


def test_tags_prompt_requests_comma_separated_list() -> None:
    prompt = build_prompt("tags", {"content": "Trip to Kyoto"})
    assert "5 short tags" in prompt
    assert "comma-separated list without hashtags" in prompt


def test_generate_prompt_uses_prompt_field() -> None:
    prompt = build_prompt("generate", {"prompt": "morning routine", "content": "ignored"})
    assert "concise draft note" in prompt
    assert "no headings, no options" in prompt
    assert prompt.endswith("morning routine")
    assert "ignored" not in prompt


def test_ask_prompt_contains_notes_and_question() -> None:
    prompt = build_prompt(
        "ask",
        {"notesContext": "Title: Kyoto\nTags: travel\nContent: temples", "question": "Where did I travel?"},
    )
    assert "access to the user's notes" in prompt
    assert "could not find a relevant note" in prompt
    assert "Notes:\nTitle: Kyoto" in prompt
    assert prompt.endswith("Question: Where did I travel?")


def test_missing_fields_become_empty_strings() -> None:
    assert build_prompt("generate", {}).endswith("(no headings, no options):\n\n")
    assert build_prompt("summarize", {"content": None}).endswith("No extra commentary:\n\n")


def test_unrecognized_action_yields_empty_prompt() -> None:
    assert build_prompt("translate", {"content": "hola"}) == ""
    assert build_prompt(None, {"content": "hola"}) == ""


def test_action_parse_matches_exact_values_only() -> None:
    assert Action.parse("tags") is Action.TAGS
    assert Action.parse(Action.ASK) is Action.ASK
    assert Action.parse("Tags") is None
    assert Action.parse(" tags ") is None
    assert Action.parse("nope") is None
