"""Tests for the text cleanup rules applied after content extraction."""

from __future__ import annotations

import re

import pytest

from summary_tester.scraper.cleaner import clean_text
from summary_tester.scraper.rules import DEFAULT_STRIP_RULES, TextStripRule


_DIRTY_SAMPLES = [
    "TTS-Player überspringen\nBerlin (dpa) – Ein Text.\nArtikel weiterlesen",
    "Anfang.\n\n\n\n\nWeiterlesen mit BILDplus\n\nEnde.",
    "Wir haben personalisierte Videos für dich! Dafür brauchen wir deine Zustimmung.\nRest.",
    "Teilen\nKommentare\nEmpfehlungen\nAuch interessant\nLesen Sie auch\nBILD Deals\nNewsletter",
    "Artikel Artikel lesen lesen",
    "15.03.2024 - 14:30 Uhr\nFoto: Agentur\nQuelle: BILD\nText.",
    "   nur Leerraum   \n\n\n",
    "",
    "Mit dem Klick auf den Schalter erklärst du dich einverstanden, dass Daten fließen.",
]


# ---------------------------------------------------------------------------
# Invariants
# ---------------------------------------------------------------------------

class TestInvariants:
    @pytest.mark.parametrize("text", _DIRTY_SAMPLES)
    def test_idempotent(self, text: str) -> None:
        once = clean_text(text)
        assert clean_text(once) == once

    @pytest.mark.parametrize("text", _DIRTY_SAMPLES)
    def test_no_surrounding_whitespace_or_blank_runs(self, text: str) -> None:
        result = clean_text(text)
        assert result == result.strip()
        assert "\n\n\n" not in result

    def test_collapses_blank_line_runs(self) -> None:
        assert clean_text("  \n\nA\n\n\n\n\nB  \n") == "A\n\nB"

    def test_collapses_blank_lines_holding_whitespace(self) -> None:
        assert clean_text("A\n \n \n \nB") == "A\n\nB"
        assert clean_text("A\n\t\n\nB") == "A\n\nB"

    def test_single_blank_line_kept(self) -> None:
        assert clean_text("A\n\nB") == "A\n\nB"

    def test_clean_text_passes_through(self) -> None:
        text = "Berlin (dpa) – Der Senat tagt.\n\nDie Sitzung dauert an."
        assert clean_text(text) == text

    def test_matches_uncovered_by_a_removal_are_removed_too(self) -> None:
        # Removing the inner prompt joins "Artikel" and "lesen" into a new one.
        assert clean_text("Artikel Artikel lesen lesen") == ""

    def test_rule_set_is_immutable(self) -> None:
        assert isinstance(DEFAULT_STRIP_RULES, tuple)
        assert all(isinstance(r, TextStripRule) for r in DEFAULT_STRIP_RULES)

    def test_custom_rules(self) -> None:
        rules = [TextStripRule(name="x", pattern=re.compile(r"X+"))]
        assert clean_text("aXXb", rules) == "ab"


# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------

class TestPromptsAndPaywall:
    def test_tts_skip_prompt(self) -> None:
        assert clean_text("TTS-Player überspringen\nText.") == "Text."

    def test_continue_reading_prompts(self) -> None:
        assert clean_text("Text.\nArtikel weiterlesen") == "Text."
        assert clean_text("Artikel lesen\nText.") == "Text."

    def test_full_paywall_prompt_removed_as_one_span(self) -> None:
        assert clean_text("Der Anfang.\nWeiterlesen mit BILDplus\nDer Rest.") == "Der Anfang.\nDer Rest."
        assert clean_text("A.\nJetzt mit BILDplus lesen") == "A."

    def test_paywall_prompts_are_case_insensitive(self) -> None:
        assert clean_text("A.\nweiterlesen mit bildplus") == "A."

    def test_bare_brand_removed(self) -> None:
        assert clean_text("Exklusiv BILDplus Inhalt") == "Exklusiv Inhalt"

    def test_brand_compound_kept(self) -> None:
        text = "Das BILDplus-Abo kostet Geld."
        assert clean_text(text) == text

    def test_bare_brand_rule_is_case_sensitive(self) -> None:
        text = "Ein bildplus in Kleinbuchstaben."
        assert clean_text(text) == text

    def test_continuation_rules_run_before_bare_brand(self) -> None:
        names = [r.name for r in DEFAULT_STRIP_RULES]
        assert names.index("paywall-continue") < names.index("paywall-brand")
        assert names.index("paywall-read-now") < names.index("paywall-brand")


class TestCredits:
    def test_photo_credit_line(self) -> None:
        text = "Berlin (dpa) – Beispiel.\nFoto: Someone/Agency\nMehr Text."
        assert clean_text(text) == "Berlin (dpa) – Beispiel.\nMehr Text."

    def test_photo_credit_at_end(self) -> None:
        assert clean_text("Text.\nFoto: dpa") == "Text."

    def test_long_photo_credit_kept(self) -> None:
        text = "Foto: " + "x" * 70
        assert clean_text(text) == text

    def test_source_credit(self) -> None:
        assert clean_text("Text.\nQuelle: BILD") == "Text."

    def test_video_prompt(self) -> None:
        assert clean_text("Mehr zum Video anzeigen\nText.") == "Text."


class TestConsentBlocks:
    def test_video_consent_spans_lines(self) -> None:
        text = (
            "Vorher.\n"
            "Wir haben personalisierte Videos für dich! Dafür brauchen\n"
            "wir deine Zustimmung.\n"
            "Nachher."
        )
        result = clean_text(text)
        assert "Zustimmung" not in result
        assert "personalisierte" not in result
        assert result.startswith("Vorher.")
        assert result.endswith("Nachher.")

    def test_third_party_consent_until_end(self) -> None:
        text = "Vorher.\nUm mit Inhalten von Drittanbietern zu interagieren, klicke hier"
        assert clean_text(text) == "Vorher."

    def test_consent_phrase(self) -> None:
        assert clean_text("Dafür brauchen wir deine Zustimmung. Text.") == "Dafür Text."

    def test_external_content_block(self) -> None:
        text = (
            "Vorher.\n"
            "Externer Inhalt\n"
            "Aktiviere externe Inhalte, um den Beitrag zu sehen. "
            "Ich bin damit einverstanden, dass mir externe Inhalte angezeigt werden. "
            "Mehr Informationen dazu findest du in unserer Datenschutzerklärung.\n"
            "Nachher."
        )
        result = clean_text(text)
        for gone in ("Externer Inhalt", "Aktiviere", "einverstanden", "Datenschutzerklärung", "Mehr Informationen"):
            assert gone not in result
        assert result.startswith("Vorher.")
        assert result.endswith("Nachher.")

    def test_embedded_content_and_switch(self) -> None:
        text = (
            "Vorher.\n"
            "Um eingebettete Inhalte anzuzeigen, ist deine widerrufliche Einwilligung "
            "notwendig (Art. 6 Abs. 1 lit. a DSGVO). "
            "Mit dem Klick auf den Schalter oben bist du\ndamit einverstanden.\n"
            "Widerruf Tracking und Cookies\n"
            "Nachher."
        )
        result = clean_text(text)
        for gone in ("eingebettete", "DSGVO", "Schalter", "Widerruf"):
            assert gone not in result
        assert result.startswith("Vorher.")
        assert result.endswith("Nachher.")

    def test_third_country_notice(self) -> None:
        text = "Vorher. Dabei können Daten in Drittländer übermittelt werden. Nachher."
        assert clean_text(text) == "Vorher. Nachher."


class TestStandaloneLines:
    def test_newsletter_line_removed(self) -> None:
        result = clean_text("Erster Absatz.\n\nNewsletter\n\nZweiter Absatz.")
        assert "Newsletter" not in result
        assert result == "Erster Absatz.\n\nZweiter Absatz."

    def test_newsletter_inside_sentence_kept(self) -> None:
        text = "Jetzt zur Newsletter-Anmeldung klicken."
        assert clean_text(text) == text

    @pytest.mark.parametrize(
        "label",
        ["Teilen", "Kommentare", "Empfehlungen", "Auch interessant", "Lesen Sie auch", "BILD Deals"],
    )
    def test_ui_labels_removed(self, label: str) -> None:
        assert clean_text(f"Oben.\n{label}\nUnten.") == "Oben.\n\nUnten."

    def test_label_within_line_kept(self) -> None:
        text = "Wir teilen die Sorge der Anwohner."
        assert clean_text(text) == text


class TestTimestamps:
    def test_timestamp_line_removed(self) -> None:
        result = clean_text("Text davor.\n15.03.2024 - 14:30 Uhr\nText danach.")
        assert "15.03.2024 - 14:30 Uhr" not in result
        assert result == "Text davor.\nText danach."

    def test_other_dates_kept(self) -> None:
        text = "Am 15.03.2024 tagte der Rat."
        assert clean_text(text) == text
