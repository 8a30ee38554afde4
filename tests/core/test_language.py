"""Unit tests for language entities."""

from cafe_reviews.core import (
    AvailableLanguage,
    LanguagePair,
    SupportCheck,
    TranslationSupport,
)


class TestLanguagePair:

    def test_equality_is_pairwise(self):
        assert LanguagePair("en-US", "de-DE") == LanguagePair("en-US", "de-DE")
        assert LanguagePair("en-US", "de-DE") != LanguagePair("de-DE", "en-US")

    def test_is_complete_requires_both_sides(self):
        assert LanguagePair("en-US", "de-DE").is_complete
        assert not LanguagePair("en-US", None).is_complete
        assert not LanguagePair(None, "de-DE").is_complete
        assert not LanguagePair().is_complete

    def test_usable_as_dict_key(self):
        cache = {LanguagePair("en-US", "fr-FR"): TranslationSupport.SUPPORTED}
        assert cache[LanguagePair("en-US", "fr-FR")] is TranslationSupport.SUPPORTED


class TestSupportCheck:

    def test_is_supported_only_for_supported(self):
        pair = LanguagePair("en-US", "de-DE")
        assert SupportCheck(pair, TranslationSupport.SUPPORTED).is_supported
        assert not SupportCheck(pair, TranslationSupport.UNSUPPORTED).is_supported
        assert not SupportCheck(pair, TranslationSupport.UNKNOWN).is_supported


class TestAvailableLanguage:

    def test_short_name_includes_region(self):
        assert AvailableLanguage("en-US").short_name() == "en-US"
        assert AvailableLanguage("pt_BR").short_name() == "pt-BR"

    def test_short_name_without_region(self):
        assert AvailableLanguage("de").short_name() == "de-"

    def test_localized_name_uses_language_name(self):
        assert AvailableLanguage("de-DE").localized_name() == "German (de-DE)"

    def test_unknown_code(self):
        assert AvailableLanguage("").localized_name() == "Unknown language code"

    def test_equality_by_locale_code(self):
        assert AvailableLanguage("en-US") == AvailableLanguage("en-US")
        assert AvailableLanguage("en-US") != AvailableLanguage("en-GB")
        assert len({AvailableLanguage("en-US"), AvailableLanguage("en-US")}) == 1

    def test_sorted_by_localized_name_not_code(self):
        languages = [AvailableLanguage(code) for code in ["de-DE", "en-US", "fr-FR"]]
        ordered = [language.locale_code for language in sorted(languages)]
        # English < French < German by display name
        assert ordered == ["en-US", "fr-FR", "de-DE"]

    def test_same_language_sorted_by_region(self):
        languages = [AvailableLanguage("en-US"), AvailableLanguage("en-GB")]
        assert [language.locale_code for language in sorted(languages)] == ["en-GB", "en-US"]
