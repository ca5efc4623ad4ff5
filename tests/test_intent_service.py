from scripture_ai.services.intent_service import NO_MATCH_RESPONSE, match_intent


def test_search_verse_extracts_term():
    result = match_intent("Find verses about peace")
    assert result.intent == "search_verse"
    assert result.response == (
        'I\'ll search for verses about "verses about peace". '
        "Let me find the most relevant passages for you."
    )


def test_search_wins_over_later_intents():
    assert match_intent("find gita verses on duty").intent == "search_verse"


def test_gita_verse_with_chapter_and_verse():
    result = match_intent("Bhagavad Gita chapter 2 verse 47")
    assert result.intent == "gita_verse"
    assert result.response == "Loading Bhagavad Gita Chapter 2, Verse 47."


def test_gita_verse_missing_numbers():
    result = match_intent("read me a sloka")
    assert result.intent == "gita_verse"
    assert "please mention the chapter and verse number" in result.response


def test_bible_verse():
    result = match_intent("Read John chapter 3 verse 16")
    assert result.intent == "bible_verse"
    assert result.response == "Opening John 3:16 for you."


def test_bible_verse_incomplete():
    result = match_intent("open the bible")
    assert result.intent == "bible_verse"
    assert result.response.startswith("To access a specific Bible verse")


def test_music_genre_and_default():
    assert match_intent("play some peaceful music").response == "Playing peaceful music for you. Enjoy!"
    assert match_intent("play a song").response == "Playing meditation music for you. Enjoy!"


def test_weather_location():
    result = match_intent("what's the weather in Hyderabad")
    assert result.intent == "weather"
    assert result.response == "Fetching weather information for Hyderabad. One moment please."


def test_weather_default_location():
    assert "your area" in match_intent("forecast please").response


def test_news():
    assert match_intent("latest news").intent == "news"


def test_time():
    result = match_intent("what time is it")
    assert result.intent == "time"
    assert result.response.startswith("It's currently ")


def test_help_mentions_assistant():
    result = match_intent("can you help")
    assert result.intent == "help"
    assert result.response.startswith("I'm Roko")


def test_no_match():
    result = match_intent("xyz")
    assert not result.matched
    assert result.intent is None
    assert result.response == NO_MATCH_RESPONSE
