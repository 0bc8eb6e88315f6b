# ABOUTME: Maps free-form provider categories and subjects onto the suggested genre list.
# ABOUTME: Keyword table is ordered; the first keyword list that matches decides the genre.

# Order matters: "fiction" is checked first, so categories such as
# "Science Fiction" and "Non-Fiction" resolve to Fiction.
GENRE_KEYWORDS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("fiction",), "Fiction"),
    (("non-fiction", "nonfiction"), "Non-Fiction"),
    (("mystery", "detective", "crime"), "Mystery"),
    (("science fiction", "sci-fi", "scifi"), "Science Fiction"),
    (("fantasy",), "Fantasy"),
    (("romance",), "Romance"),
    (("thriller", "suspense"), "Thriller"),
    (("horror",), "Horror"),
    (("biography", "autobiography", "memoir"), "Biography"),
    (("history", "historical"), "History"),
    (("science", "physics", "chemistry", "biology"), "Science"),
    (("self-help", "self help", "personal development"), "Self-Help"),
    (("business", "economics", "finance"), "Business"),
    (("children", "juvenile", "kids"), "Children"),
    (("young adult", "ya", "teen"), "Young Adult"),
    (("poetry", "poems"), "Poetry"),
    (("art", "photography"), "Art"),
    (("cooking", "cookbook", "food", "recipes"), "Cooking"),
    (("travel", "adventure"), "Travel"),
    (("religion", "spirituality", "faith"), "Religion"),
    (("philosophy",), "Philosophy"),
)

FALLBACK_GENRE = "Other"


def map_category_to_genre(category: str | None) -> str | None:
    """Translate a provider category into a genre.

    Returns None when there is no category, and "Other" when there is one
    but none of the keywords appear in it.
    """
    if category is None:
        return None
    lowered = category.lower()
    for keywords, genre in GENRE_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return genre
    return FALLBACK_GENRE
