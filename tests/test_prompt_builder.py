"""
Name: Prompt Builder Unit Tests

Responsibilities:
  - Model and temperature selection
  - Partial-segment instruction toggling
  - Mode and level specific rules
"""

import pytest

from src.models.api_models import HumanizeSettings, Level, Mode, ModelType, Provider, Quality
from src.rewriters.prompt_builder import (
    BANNED_WORDS,
    PARTIAL_SEGMENT_INSTRUCTION,
    build_system_instruction,
    get_model,
    get_temperature,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "provider, quality, expected",
    [
        (Provider.GROQ, Quality.EQUILIBRE, ModelType.GROQ_FAST),
        (Provider.GROQ, Quality.AMELIORE, ModelType.GROQ_QUALITY),
        (Provider.GEMINI, Quality.QUALITE, ModelType.GEMINI_FLASH),
        (Provider.GEMINI, Quality.AMELIORE, ModelType.GEMINI_PRO),
    ],
)
def test_get_model(provider, quality, expected):
    assert get_model(HumanizeSettings(provider=provider, quality=quality)) == expected


@pytest.mark.unit
def test_get_temperature():
    assert get_temperature(Quality.QUALITE) == 0.7
    assert get_temperature(Quality.EQUILIBRE) == 0.9
    assert get_temperature(Quality.AMELIORE) == 1.0


@pytest.mark.unit
def test_partial_instruction_only_for_partial_segments():
    settings = HumanizeSettings()

    assert PARTIAL_SEGMENT_INSTRUCTION in build_system_instruction(settings, True)
    assert PARTIAL_SEGMENT_INSTRUCTION not in build_system_instruction(settings, False)


@pytest.mark.unit
def test_default_prompt_keeps_length_and_bans_jargon():
    prompt = build_system_instruction(HumanizeSettings(), False)

    assert "Iso-longueur" in prompt
    assert BANNED_WORDS in prompt
    assert "Ghostwriter expert" in prompt
    assert "Réécris intégralement" in prompt


@pytest.mark.unit
def test_mode_specific_rules():
    simplify = build_system_instruction(HumanizeSettings(mode=Mode.SIMPLIFIER), False)
    develop = build_system_instruction(HumanizeSettings(mode=Mode.DEVELOPPER), False)
    blog = build_system_instruction(HumanizeSettings(mode=Mode.BLOG), False)
    academic = build_system_instruction(HumanizeSettings(mode=Mode.ACADEMIQUE), False)

    assert "-20% de longueur" in simplify
    assert "+20% de longueur" in develop
    assert "copywriter web" in blog and "tutoiement" in blog
    assert "chercheur universitaire" in academic and "vouvoiement" in academic


@pytest.mark.unit
def test_basic_level_light_correction():
    prompt = build_system_instruction(HumanizeSettings(level=Level.BASIQUE), False)

    assert "Corrige légèrement" in prompt
    assert "Réécris intégralement" not in prompt
