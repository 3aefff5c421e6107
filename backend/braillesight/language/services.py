"""Language collaborators: translation, detection, speech and sign resources.

``LanguageServices`` is the seam the API depends on. ``InMemoryLanguageServices``
is a deterministic stand-in backed by the static tables; it never touches the
network and never sleeps.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Protocol
from urllib.parse import quote

from braillesight.language.tables import COMMON_PHRASES, SIGN_LANGUAGES

logger = logging.getLogger(__name__)

# Ordered: first match wins. Keyword lists are checked against lowercased text.
_KEYWORD_LANGS: list[tuple[str, tuple[str, ...]]] = [
    ("es", ("hola", "gracias", "cómo estás")),
    ("fr", ("bonjour", "merci", "comment allez-vous")),
    ("de", ("hallo", "danke", "wie geht es dir")),
    ("it", ("ciao", "grazie", "come stai")),
    ("pt", ("olá", "obrigado", "como vai")),
    ("ru", ("привет", "спасибо", "как дела")),
]

# Han before kana: text with only CJK ideographs reads as Chinese
_SCRIPT_LANGS: list[tuple[str, re.Pattern[str]]] = [
    ("zh", re.compile(r"[一-龥]")),
    ("ja", re.compile(r"[぀-ヿ㐀-䶿一-鿿]")),
    ("ko", re.compile(r"[가-힯ᄀ-ᇿ]")),
    ("ar", re.compile(r"[؀-ۿ]")),
    ("hi", re.compile(r"[ऀ-ॿ]")),
]


@dataclass(frozen=True)
class SignResource:
    word: str
    resource_url: str


class LanguageServices(Protocol):
    async def translate(self, text: str, from_lang: str, to_lang: str) -> str: ...

    async def detect_language(self, text: str) -> str: ...

    async def text_to_speech_url(self, text: str, lang: str = "en-US") -> str: ...

    async def text_to_sign_language(self, text: str, lang: str = "en") -> list[SignResource]: ...


def _base_lang(code: str) -> str:
    return code.split("-")[0].lower()


class InMemoryLanguageServices:
    """Dictionary-backed implementation of LanguageServices."""

    def __init__(
        self,
        phrases: dict[str, dict[str, str]] | None = None,
        tts_placeholder_url: str = "https://example.com/tts-audio.mp3",
        sign_resource_base_url: str = "https://example.com/sign-language",
    ) -> None:
        self.phrases = phrases if phrases is not None else COMMON_PHRASES
        self.tts_placeholder_url = tts_placeholder_url
        self.sign_resource_base_url = sign_resource_base_url.rstrip("/")

    async def translate(self, text: str, from_lang: str, to_lang: str) -> str:
        logger.debug("Translating from %s to %s: %r", from_lang, to_lang, text)
        base_from = _base_lang(from_lang)
        base_to = _base_lang(to_lang)

        if base_to in SIGN_LANGUAGES:
            return f"[Sign Language Translation - {to_lang}] {text}"

        source = self.phrases.get(base_from)
        target = self.phrases.get(base_to)
        if source and target:
            # Dictionary keys are the English phrases; they are matched against
            # the untouched input whatever the source language is.
            lower = text.lower()
            translated = text
            for key in source:
                replacement = target.get(key)
                if not replacement or key not in lower:
                    continue
                translated = re.sub(
                    re.escape(key),
                    lambda _m, r=replacement: r,
                    translated,
                    flags=re.IGNORECASE,
                )
            if translated != text:
                return translated

        return f'(Translation from {from_lang} to {to_lang}: "{text}")'

    async def detect_language(self, text: str) -> str:
        lower = text.lower()
        for lang, keywords in _KEYWORD_LANGS:
            if any(k in lower for k in keywords):
                return lang
        for lang, pattern in _SCRIPT_LANGS:
            if pattern.search(text):
                return lang
        return "en"

    async def text_to_speech_url(self, text: str, lang: str = "en-US") -> str:
        logger.debug("TTS placeholder for %r in %s", text, lang)
        return self.tts_placeholder_url

    async def text_to_sign_language(self, text: str, lang: str = "en") -> list[SignResource]:
        words = [w for w in text.lower().split() if w]
        return [
            SignResource(
                word=w,
                resource_url=f"{self.sign_resource_base_url}/{lang}/{quote(w, safe='')}.gif",
            )
            for w in words
        ]
