"""Static language tables: demo phrase dictionary and BCP-47 speech tags."""

from __future__ import annotations

# Base language → canonical English phrase → localized phrase
COMMON_PHRASES: dict[str, dict[str, str]] = {
    "en": {
        "hello": "hello",
        "thank you": "thank you",
        "goodbye": "goodbye",
        "how are you": "how are you",
        "welcome": "welcome",
        "please": "please",
    },
    "es": {
        "hello": "hola",
        "thank you": "gracias",
        "goodbye": "adiós",
        "how are you": "cómo estás",
        "welcome": "bienvenido",
        "please": "por favor",
    },
    "fr": {
        "hello": "bonjour",
        "thank you": "merci",
        "goodbye": "au revoir",
        "how are you": "comment allez-vous",
        "welcome": "bienvenue",
        "please": "s'il vous plaît",
    },
    "de": {
        "hello": "hallo",
        "thank you": "danke",
        "goodbye": "auf wiedersehen",
        "how are you": "wie geht es dir",
        "welcome": "willkommen",
        "please": "bitte",
    },
    "it": {
        "hello": "ciao",
        "thank you": "grazie",
        "goodbye": "arrivederci",
        "how are you": "come stai",
        "welcome": "benvenuto",
        "please": "per favore",
    },
    "pt": {
        "hello": "olá",
        "thank you": "obrigado",
        "goodbye": "adeus",
        "how are you": "como vai",
        "welcome": "bem-vindo",
        "please": "por favor",
    },
    "ru": {
        "hello": "привет",
        "thank you": "спасибо",
        "goodbye": "до свидания",
        "how are you": "как дела",
        "welcome": "добро пожаловать",
        "please": "пожалуйста",
    },
    "zh": {
        "hello": "你好",
        "thank you": "谢谢",
        "goodbye": "再见",
        "how are you": "你好吗",
        "welcome": "欢迎",
        "please": "请",
    },
    "ja": {
        "hello": "こんにちは",
        "thank you": "ありがとう",
        "goodbye": "さようなら",
        "how are you": "お元気ですか",
        "welcome": "ようこそ",
        "please": "お願いします",
    },
    "ko": {
        "hello": "안녕하세요",
        "thank you": "감사합니다",
        "goodbye": "안녕히 가세요",
        "how are you": "어떻게 지내세요",
        "welcome": "환영합니다",
        "please": "부탁합니다",
    },
    "ar": {
        "hello": "مرحبا",
        "thank you": "شكرا لك",
        "goodbye": "مع السلامة",
        "how are you": "كيف حالك",
        "welcome": "أهلا بك",
        "please": "من فضلك",
    },
    "hi": {
        "hello": "नमस्ते",
        "thank you": "धन्यवाद",
        "goodbye": "अलविदा",
        "how are you": "आप कैसे हैं",
        "welcome": "स्वागत है",
        "please": "कृपया",
    },
}

SIGN_LANGUAGES = frozenset({"asl", "bsl", "isl", "lsf", "lse"})

# Internal language code → BCP-47 tag for speech synthesis
_SPEECH_LANG_MAP = {
    "en": "en-US",
    "en-us": "en-US",
    "en-gb": "en-GB",
    "es": "es-ES",
    "es-es": "es-ES",
    "es-mx": "es-MX",
    "fr": "fr-FR",
    "fr-fr": "fr-FR",
    "fr-ca": "fr-CA",
    "de": "de-DE",
    "it": "it-IT",
    "pt": "pt-PT",
    "pt-br": "pt-BR",
    "pt-pt": "pt-PT",
    "nl": "nl-NL",
    "pl": "pl-PL",
    "sv": "sv-SE",
    "no": "nb-NO",
    "da": "da-DK",
    "fi": "fi-FI",
    "zh": "zh-CN",
    "zh-cn": "zh-CN",
    "zh-tw": "zh-TW",
    "ja": "ja-JP",
    "ko": "ko-KR",
    "th": "th-TH",
    "vi": "vi-VN",
    "id": "id-ID",
    "ms": "ms-MY",
    "hi": "hi-IN",
    "ar": "ar-SA",
    "he": "he-IL",
    "tr": "tr-TR",
    "ru": "ru-RU",
    "uk": "uk-UA",
    "cs": "cs-CZ",
    "hu": "hu-HU",
    "ro": "ro-RO",
    "bg": "bg-BG",
    "el": "el-GR",
}


def speech_synthesis_lang(lang_code: str) -> str:
    return _SPEECH_LANG_MAP.get(lang_code, "en-US")
