"""
AI prompts for LinguaScribe text and media capabilities
"""

# =============================================================================
# SYSTEM PROMPTS
# =============================================================================

SYSTEM_TRANSCRIBER = """You are a professional transcriptionist.
Write down exactly what is spoken in the media, in the language it is spoken in.
Do not summarize, translate or comment on the content."""

SYSTEM_TRANSCRIPTION_EDITOR = "You are an expert transcription editor."

SYSTEM_SUMMARIZER = "You are a helpful assistant that creates concise summaries."

SYSTEM_KEYWORD_EXTRACTOR = "You are an expert in extracting keywords from text. Always respond with valid JSON."

# =============================================================================
# USER PROMPTS
# =============================================================================

TRANSCRIBE_AUDIO_PROMPT = "Transcribe the audio from this file."

IMPROVE_TRANSCRIPTION_PROMPT = """Review the following transcription and correct any errors in spelling, grammar, punctuation, and clarity. Return only the corrected transcription.

Original Transcription: {transcription}"""

GENERATE_SUMMARY_PROMPT = """Summarize the following transcription. Capture the main points, key information and conclusions in a few short paragraphs.
The summary must be noticeably shorter than the original. Return only the summary.

Transcription: {transcription}"""

GENERATE_KEYWORDS_PROMPT = """Analyze the following transcription and identify the most relevant keywords that represent the main topics and themes discussed.

OUTPUT FORMAT:
Return a JSON object with a "keywords" array of strings, most relevant first, for example:
{{"keywords": ["first keyword", "second keyword"]}}
Do not include any other text or backticks.

Transcription: {transcription}"""
