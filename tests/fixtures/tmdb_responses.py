"""
Mock TMDB API responses for testing.

Contains realistic responses from the TMDB API for the TV search and
translations endpoints. These fixtures are used with respx to mock httpx calls.
"""

# GET /search/tv?query=la+casa+de+papel&include_adult=true&language=en-US&page=1
# Aucun resultat ne porte exactement le nom recherche : traductions necessaires
TMDB_SEARCH_TV_RESPONSE = {
    "page": 1,
    "results": [
        {
            "adult": False,
            "backdrop_path": "/gFZriCkpJYsApPZEF3jhxL4yLzG.jpg",
            "genre_ids": [80, 18],
            "id": 71446,
            "origin_country": ["ES"],
            "original_language": "es",
            "original_name": "La casa de papel",
            "overview": "To carry out the biggest heist in history...",
            "popularity": 120.5,
            "first_air_date": "2017-05-02",
            "name": "Money Heist",
            "vote_average": 8.2,
            "vote_count": 18000,
        },
        {
            "adult": False,
            "backdrop_path": None,
            "genre_ids": [80, 18],
            "id": 114863,
            "origin_country": ["KR"],
            "original_language": "ko",
            "original_name": "종이의 집: 공동경제구역",
            "overview": "Disguised under the shadows of a mask...",
            "popularity": 35.1,
            "first_air_date": "2022-06-24",
            "name": "Money Heist: Korea - Joint Economic Area",
            "vote_average": 7.3,
            "vote_count": 600,
        },
    ],
    "total_pages": 1,
    "total_results": 2,
}

# GET /search/tv?query=breaking+bad : le premier resultat porte le nom exact
TMDB_SEARCH_TV_EXACT_RESPONSE = {
    "page": 1,
    "results": [
        {
            "adult": False,
            "id": 1396,
            "origin_country": ["US"],
            "original_language": "en",
            "original_name": "Breaking Bad",
            "name": "Breaking Bad",
            "first_air_date": "2008-01-20",
        },
        {
            "adult": False,
            "id": 1397,
            "origin_country": ["US"],
            "original_language": "en",
            "original_name": "Breaking Bad: Original Minisodes",
            "name": "Breaking Bad: Original Minisodes",
            "first_air_date": "2009-02-17",
        },
    ],
    "total_pages": 1,
    "total_results": 2,
}

TMDB_SEARCH_TV_EMPTY_RESPONSE = {
    "page": 1,
    "results": [],
    "total_pages": 0,
    "total_results": 0,
}

# GET /tv/71446/translations
TMDB_TRANSLATIONS_71446_RESPONSE = {
    "id": 71446,
    "translations": [
        {
            "iso_3166_1": "ES",
            "iso_639_1": "es",
            "name": "Español",
            "english_name": "Spanish",
            "data": {"name": "La casa de papel", "overview": "Ocho ladrones...", "homepage": ""},
        },
        {
            "iso_3166_1": "FR",
            "iso_639_1": "fr",
            "name": "Français",
            "english_name": "French",
            "data": {"name": "La Casa de Papel", "overview": "Huit voleurs...", "homepage": ""},
        },
        {
            "iso_3166_1": "DE",
            "iso_639_1": "de",
            "name": "Deutsch",
            "english_name": "German",
            "data": {"name": "Haus des Geldes", "overview": "", "homepage": ""},
        },
        {
            "iso_3166_1": "IT",
            "iso_639_1": "it",
            "name": "Italiano",
            "english_name": "Italian",
            "data": {"name": "", "overview": "Otto ladri...", "homepage": ""},
        },
    ],
}

# GET /tv/114863/translations
TMDB_TRANSLATIONS_114863_RESPONSE = {
    "id": 114863,
    "translations": [
        {
            "iso_3166_1": "KR",
            "iso_639_1": "ko",
            "name": "한국어/조선말",
            "english_name": "Korean",
            "data": {"name": "종이의 집: 공동경제구역", "overview": "", "homepage": ""},
        },
    ],
}
