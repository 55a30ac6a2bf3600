"""
Core utility functions for LinguaScribe
"""
import re

FENCE_PATTERN = re.compile(r'^```[\w-]*\s*\n?(.*?)\n?```$', re.DOTALL)


def extract_json_block(response: str) -> str:
    """
    Pull the JSON document out of a model reply.

    Keyword replies sometimes arrive fenced (```json ... ```) or with a lead-in
    such as ``Here are the keywords:``. The fence is dropped, then the text is
    cut from the first ``{`` or ``[`` to the last matching closer. Replies with
    no JSON-looking block are returned stripped, for ``json.loads`` to reject.
    """
    cleaned = response.strip()

    match = FENCE_PATTERN.match(cleaned)
    if match:
        cleaned = match.group(1).strip()

    starts = [i for i in (cleaned.find('{'), cleaned.find('[')) if i != -1]
    if not starts:
        return cleaned
    start = min(starts)
    end = cleaned.rfind('}' if cleaned[start] == '{' else ']')
    if end <= start:
        return cleaned
    return cleaned[start:end + 1]


def truncate(text: str, limit: int = 50) -> str:
    """Shorten text for log lines"""
    if len(text) <= limit:
        return text
    return f"{text[:limit]}..."
