import pytest

from data_designer_content_scan.density import (
    DensityPolicy,
    analyze_density,
    analyze_tokens,
    classify_density,
    count_frequencies,
)
from data_designer_content_scan.tokenizer import tokenize

DENSE_TEXT = "seo seo seo tools tools content content content content analysis"


class TestTokenize:
    def test_lowercases_and_strips_punctuation(self):
        assert tokenize("Data-driven SEO, FTW!") == ["data", "driven", "seo", "ftw"]

    def test_drops_short_tokens(self):
        assert tokenize("an ox is big") == ["big"]

    def test_empty(self):
        assert tokenize("") == []


class TestClassifyDensity:
    @pytest.mark.parametrize(
        "density,tier",
        [
            (0.0, "low"),
            (0.99, "low"),
            (1.0, "good"),
            (1.99, "good"),
            (2.0, "optimal"),
            (3.99, "optimal"),
            (4.0, "high"),
            (40.0, "high"),
        ],
    )
    def test_tier_boundaries(self, density, tier):
        assert classify_density(density) == tier

    def test_tiers_never_step_down(self):
        order = ["low", "good", "optimal", "high"]
        ranks = [order.index(classify_density(d / 10)) for d in range(0, 100)]
        assert ranks == sorted(ranks)


class TestAnalyzeDensity:
    def test_dense_repeated_keyword(self):
        report = analyze_density(DENSE_TEXT)
        assert report.total_words == 10
        assert report.unique_keyword_count == 4
        by_word = {k.word: k for k in report.top_keywords}
        assert by_word["seo"].frequency == 3
        assert by_word["seo"].density == 30.0
        assert by_word["seo"].tier == "high"
        assert by_word["content"].frequency == 4
        assert by_word["content"].density == 40.0
        assert by_word["content"].tier == "high"
        assert report.top_density == 40.0
        assert report.average_density == 25.0

    def test_frequencies_sum_to_total(self):
        text = "The quick brown fox jumps over the lazy dog while the other fox sleeps near the dog."
        tokens = tokenize(text)
        report = analyze_density(text)
        assert sum(count_frequencies(tokens).values()) == report.total_words

    def test_top_keywords_capped_and_sorted(self):
        words = []
        for i in range(30):
            words.extend([f"word{i:02d}"] * (i + 1))
        report = analyze_density(" ".join(words))
        assert report.unique_keyword_count == 30
        assert len(report.top_keywords) == 20
        freqs = [k.frequency for k in report.top_keywords]
        assert freqs == sorted(freqs, reverse=True)
        assert report.top_keywords[0].word == "word29"

    def test_ties_keep_first_seen_order(self):
        report = analyze_density("beta alpha beta alpha gamma")
        assert [k.word for k in report.top_keywords] == ["beta", "alpha", "gamma"]

    def test_average_is_mean_of_returned_records(self):
        report = analyze_density("one two three four five six seven eight nine ten one two")
        expected = round(sum(k.density for k in report.top_keywords) / len(report.top_keywords), 2)
        assert report.average_density == expected

    def test_degenerate_input_returns_zeros(self):
        report = analyze_density("a b c !! ?? .. it is to of")
        assert report.total_words == 0
        assert report.unique_keyword_count == 0
        assert report.top_keywords == ()
        assert report.average_density == 0.0
        assert report.top_density == 0.0

    def test_empty_token_stream(self):
        assert analyze_tokens([]).to_payload() == {
            "total_words": 0,
            "unique_keyword_count": 0,
            "top_keywords": [],
            "average_density": 0.0,
            "top_density": 0.0,
        }

    def test_custom_policy(self):
        report = analyze_density(DENSE_TEXT, policy=DensityPolicy(top_n=2, high_min=50.0))
        assert [k.word for k in report.top_keywords] == ["content", "seo"]
        assert report.top_keywords[0].tier == "optimal"

    def test_idempotent(self):
        assert analyze_density(DENSE_TEXT).to_payload() == analyze_density(DENSE_TEXT).to_payload()
