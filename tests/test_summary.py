import pytest

from arbcase.config import AllStarRegistry
from arbcase.matching import (
    ArbitrationTier,
    arbitration_tier,
    parse_salary,
    round_half_up,
    summarize_comparables,
)
from arbcase.models import HistoricalArbitrationRecord, SeasonStats


@pytest.mark.parametrize(
    ("mls", "tier"),
    [
        (2.17, ArbitrationTier.PRE_ARB),
        (3.0, ArbitrationTier.FIRST),
        (3.035, ArbitrationTier.FIRST),
        (3.151, ArbitrationTier.SECOND),
        (4.1, ArbitrationTier.THIRD),
        (5.099, ArbitrationTier.THIRD),
        (5.1, ArbitrationTier.FOURTH),
        (6.0, ArbitrationTier.FREE_AGENT),
    ],
)
def test_arbitration_tier_thresholds(mls, tier):
    assert arbitration_tier(mls) is tier


def test_tier_values_are_display_labels():
    assert arbitration_tier(3.2).value == "2nd Arb"
    assert arbitration_tier(7.0).value == "FA Eligible"


def test_parse_salary_formats():
    assert parse_salary("$4,250,000") == 4_250_000
    assert parse_salary("$3.5M") == 3_500_000
    assert parse_salary("790K") == 790_000
    assert parse_salary("TBD") is None
    assert parse_salary("") is None
    assert parse_salary(None) is None


def _comp(player: str, salary: str, **kwargs) -> HistoricalArbitrationRecord:
    data = {
        "player": player,
        "salary": salary,
        "mls": 3.5,
        "era": 3.0,
        "wins": 10.4,
        "strikeouts": 150.6,
        "innings": 170.0,
        "whip": 1.1,
        "fip": 3.2,
        "war": 3.0,
    }
    data.update(kwargs)
    return HistoricalArbitrationRecord(**data)


def test_summarize_comparables_averages():
    reference = SeasonStats(season=2025, name="Joe Ryan", era=3.42, wins=12.6, strikeouts=194, innings=171.0)
    comps = [
        _comp("A", "$6,000,000", era=3.0, wins=10.4),
        _comp("B", "$4,000,000", era=4.0, wins=12.6),
        _comp("C", "n/a", era=5.0, wins=8.0),
    ]

    summary = summarize_comparables(reference, comps, reference_salary="$5,800,000")

    assert summary is not None
    assert summary.comparables == 3
    assert summary.avg_era == pytest.approx(4.0)
    # 10 + 13 + 8, rounded per record before averaging
    assert summary.avg_wins == pytest.approx(31 / 3)
    assert summary.avg_strikeouts == pytest.approx(151)
    assert summary.avg_salary == pytest.approx(5_000_000)
    assert summary.reference_wins == 13
    assert summary.reference_salary == pytest.approx(5_800_000)


def test_summarize_comparables_without_salaries_or_rows():
    reference = SeasonStats(season=2025, name="Joe Ryan")

    summary = summarize_comparables(reference, [_comp("A", "")])
    assert summary is not None
    assert summary.avg_salary == 0.0
    assert summary.reference_salary == 0.0

    assert summarize_comparables(reference, []) is None


def test_round_half_up_rounds_halves_away_from_even():
    assert round_half_up(12.5) == 13
    assert round_half_up(11.5) == 12
    assert round_half_up(12.4) == 12
    assert round_half_up(0.5) == 1


def test_summarize_comparables_rounds_half_wins_up():
    reference = SeasonStats(season=2025, name="Joe Ryan", wins=12.5, strikeouts=150.5)

    summary = summarize_comparables(reference, [_comp("A", "", wins=10.5, strikeouts=98.5)])

    assert summary.reference_wins == 13
    assert summary.reference_strikeouts == 151
    assert summary.avg_wins == pytest.approx(11)
    assert summary.avg_strikeouts == pytest.approx(99)


def test_summarize_comparables_averages_all_star_appearances():
    reference = SeasonStats(season=2025, name="Joe Ryan")
    comps = [
        _comp("Frankie Montas", ""),
        _comp("Tyler Mahle", ""),
        _comp("Kyle Hendricks", ""),
        _comp("Shane Bieber", ""),
    ]

    summary = summarize_comparables(reference, comps, reference_all_star_appearances=1)

    assert summary.reference_all_star_appearances == 1
    assert summary.avg_all_star_appearances == pytest.approx(0.5)


def test_summarize_comparables_uses_given_all_star_registry():
    reference = SeasonStats(season=2025, name="Joe Ryan")
    registry = AllStarRegistry.from_pairs([("cole", 6)])

    summary = summarize_comparables(
        reference,
        [_comp("Gerrit Cole", ""), _comp("Unlisted Arm", "")],
        all_stars=registry,
    )

    assert summary.reference_all_star_appearances == 0
    assert summary.avg_all_star_appearances == pytest.approx(3)
