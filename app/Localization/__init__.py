from .Translator import (
    Translator,
    TranslationError,
    translator,
    app_locale,
    set_app_locale,
    current_locale
)

__all__ = [
    'Translator',
    'TranslationError',
    'translator',
    'app_locale',
    'set_app_locale',
    'current_locale'
]
