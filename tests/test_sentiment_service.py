from scripture_ai.models.entities import Sentiment
from scripture_ai.services.sentiment_service import (
    NEUTRAL_RESPONSE,
    _EMPATHETIC_RESPONSES,
    analyze_sentiment,
    get_empathetic_response,
)


def test_positive_text():
    result = analyze_sentiment("I am so grateful and happy today!")
    assert result.sentiment == Sentiment.POSITIVE
    assert result.score == 1.0
    assert result.confidence == 1.0


def test_negative_words_alone_stay_neutral():
    # only the positive bucket feeds the score
    result = analyze_sentiment("I feel lonely and worried.")
    assert result.sentiment == Sentiment.NEUTRAL
    assert result.score == 0.0
    assert result.confidence == 0.0


def test_no_lexicon_words_is_neutral():
    result = analyze_sentiment("Open chapter two for me")
    assert result.sentiment == Sentiment.NEUTRAL
    assert result.score == 0.0
    assert result.confidence == 0.0


def test_negated_positive_turns_negative():
    result = analyze_sentiment("I am not happy")
    assert result.sentiment == Sentiment.NEGATIVE
    assert result.score == -1.0


def test_negated_negative_is_neutral():
    result = analyze_sentiment("I am not sad")
    assert result.sentiment == Sentiment.NEUTRAL
    assert result.score == 0.0


def test_negator_survives_until_next_lexicon_word():
    # "never" arms the flag, "really" does not consume it
    result = analyze_sentiment("I never really enjoyed it")
    assert result.sentiment == Sentiment.NEGATIVE


def test_intensifier_weights_mixed_text():
    # 1.5 positive vs 1 negative -> 1.5 / 2.5
    result = analyze_sentiment("very happy but tired")
    assert result.score == 0.6
    assert result.sentiment == Sentiment.POSITIVE


def test_mixed_text_leans_positive():
    result = analyze_sentiment("good and bad")
    assert result.score == 0.5
    assert result.sentiment == Sentiment.POSITIVE
    assert result.confidence == 0.5


def test_threshold_is_exclusive():
    # -1 positive over a total weight of 5
    result = analyze_sentiment("not good, sad sad sad sad")
    assert result.score == -0.2
    assert result.sentiment == Sentiment.NEUTRAL


def test_punctuation_is_stripped():
    assert analyze_sentiment("Thanks!!!").sentiment == Sentiment.POSITIVE


def test_empathetic_response_pools():
    assert get_empathetic_response(Sentiment.NEGATIVE) in _EMPATHETIC_RESPONSES[Sentiment.NEGATIVE]
    assert get_empathetic_response(Sentiment.POSITIVE) in _EMPATHETIC_RESPONSES[Sentiment.POSITIVE]
    assert get_empathetic_response(Sentiment.NEUTRAL) == NEUTRAL_RESPONSE
