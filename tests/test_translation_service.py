import asyncio

import pytest

from scripture_ai.services.translation_service import (
    TeluguExplainer,
    TranslationError,
    clean_output,
    is_mostly_telugu,
)


def run(coro):
    return asyncio.run(coro)


def test_is_mostly_telugu():
    assert is_mostly_telugu("ధర్మం")
    assert not is_mostly_telugu("dharma")
    assert not is_mostly_telugu("")


def test_clean_output():
    assert clean_output("  a \n b\t c ") == "a b c"


def test_blank_input_returns_empty():
    explainer = TeluguExplainer([])
    assert run(explainer.explain("   ")) == ""


def test_telugu_input_passes_through():
    explainer = TeluguExplainer([])
    assert run(explainer.explain(" ధర్మం ")) == "ధర్మం"


def test_first_successful_translator_wins_and_is_cached():
    calls = []

    async def broken(text):
        calls.append("broken")
        raise RuntimeError("status 503")

    async def empty(text):
        calls.append("empty")
        return "   "

    async def working(text):
        calls.append("working")
        return "  అనువాదం   "

    explainer = TeluguExplainer([broken, empty, working])
    assert run(explainer.explain("Do your duty ")) == "అనువాదం"
    assert calls == ["broken", "empty", "working"]

    # cached by the stripped source text
    assert run(explainer.explain("Do your duty")) == "అనువాదం"
    assert calls == ["broken", "empty", "working"]
    assert explainer.cache_size == 1


def test_all_translators_fail():
    async def broken(text):
        raise RuntimeError("status 500")

    explainer = TeluguExplainer([broken])
    with pytest.raises(TranslationError, match="status 500"):
        run(explainer.explain("peace"))
    assert explainer.cache_size == 0
