"""
Basic LinguaScribe usage example
Transcribe a file, then improve, summarize and extract keywords
"""

import asyncio
import os
import sys

from linguascribe import create_linguascribe, LinguaScribeError
from linguascribe.core.config import setup_logging


SAMPLE_TEXT = (
    "so um the quarterly numbers came in higher then we expected, mostly because "
    "the new onboarding flow cut churn in half and support tickets dropped to"
    " about two hundred a week"
)


async def main():
    """Demonstrate basic LinguaScribe functionality"""

    print("🎙️  LinguaScribe Example")
    print("=" * 40)

    setup_logging("WARNING")

    provider = os.getenv("LINGUASCRIBE_PROVIDER", "gemini")
    scribe = create_linguascribe(provider=provider)

    print(f"✓ Created LinguaScribe instance")
    print(f"  Provider: {scribe.config.provider}")
    print(f"  Text model: {scribe.config.model}")
    print(f"  Media model: {scribe.config.media_model}")
    print()

    text = SAMPLE_TEXT
    if len(sys.argv) > 1:
        if not scribe.supports_media():
            print(f"❌ {scribe.config.provider} cannot transcribe audio or video")
            return

        file_path = sys.argv[1]
        print(f"🔄 Transcribing: {os.path.basename(file_path)}")
        try:
            result = await scribe.transcribe_file(
                file_path,
                progress_callback=lambda pct: print(f"  Reading file: {pct}%", end="\r")
            )
        except LinguaScribeError as e:
            print(f"\n❌ Transcription failed: {e}")
            return
        text = result.transcription
        print(f"\n✓ Transcribed {len(text)} characters")
    else:
        print("💡 Pass an audio or video file to transcribe it; using sample text instead")
    print()

    try:
        improved = await scribe.improve(text)
        print("📝 Improved Transcription:")
        print(f"  {improved.improved_transcription}")
        print()

        summary = await scribe.summarize(improved.improved_transcription)
        print("📋 Summary:")
        print(f"  {summary.summary}")
        print()

        keywords = await scribe.extract_keywords(improved.improved_transcription)
        print("🏷️  Keywords:")
        print(f"  {', '.join(keywords.keywords)}")
        print()
    except LinguaScribeError as e:
        print(f"❌ AI request failed: {e}")
        return

    stats = scribe.get_stats()
    print("📊 Stats:")
    print(f"  Provider calls: {stats['provider']['calls']}")
    print(f"  Capabilities: {', '.join(stats['capabilities'])}")


if __name__ == "__main__":
    asyncio.run(main())
