from persona import PERSONA_SEED, to_history


def test_seed_is_instruction_then_acknowledgement():
    assert [turn.role for turn in PERSONA_SEED] == ["user", "model"]
    assert "Amina" in PERSONA_SEED[0].text
    assert "190" in PERSONA_SEED[0].text and "180" in PERSONA_SEED[0].text
    assert PERSONA_SEED[1].text.startswith("Entendido.")


def test_to_history_copies_seed_verbatim():
    history = to_history()

    assert len(history) == 2
    for content, turn in zip(history, PERSONA_SEED):
        assert content.role == turn.role
        assert len(content.parts) == 1
        assert content.parts[0].text == turn.text


def test_to_history_returns_fresh_list():
    first = to_history()
    first.append("ignored")

    assert len(to_history()) == 2
