SUMMARY_PROMPT = """Summarize the following text in {language}.
Keep it short enough to read on screen in a few seconds.

Text:
{text}

Summary:"""

KEYWORD_PROMPTS = {
    "image": """From the summary below, return the single keyword best suited to searching for a photo.
Answer with one word only, no punctuation.

Summary: {summary}
Keyword:""",
    "music": """From the summary below, return the single keyword best suited to searching for background music.
Answer with one word only, no punctuation.

Summary: {summary}
Keyword:""",
}
