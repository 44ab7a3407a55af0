"""
Tests for per-champion aggregation and the top champion selector.
"""

import pytest

from rankboard.core.exceptions import ConfigurationError
from rankboard.features.player_stats.aggregators import ChampionAggregator
from rankboard.features.player_stats.schemas import ChampionAggregate


@pytest.fixture
def aggregator():
    return ChampionAggregator()


class TestAggregate:
    """Test cases for folding games into champion aggregates."""

    def test_scenario_champion_totals(self, aggregator, scenario_games):
        champions = aggregator.aggregate(scenario_games)

        ahri = champions["Ahri"]
        assert ahri.games == 2
        assert ahri.wins == 1
        assert ahri.losses == 1
        assert ahri.kills == 13
        assert ahri.deaths == 7
        assert ahri.assists == 7
        assert ahri.kda == pytest.approx(20 / 7)
        assert ahri.winrate == 50

        lux = champions["Lux"]
        assert lux.games == 1
        assert lux.winrate == 100
        assert lux.kda == pytest.approx(18.0)

    def test_running_mean_cs_per_minute(self, aggregator, scenario_games):
        champions = aggregator.aggregate(scenario_games)

        # 20 CS in 20 minutes and 15 CS in 25 minutes
        assert champions["Ahri"].cs_per_minute == pytest.approx((1.0 + 0.6) / 2)

    def test_running_mean_matches_plain_mean(self, aggregator, make_game):
        games = [
            make_game(champion="Jinx", cs=cs, duration=duration)
            for cs, duration in [(210, 1800), (180, 1500), (320, 2400), (95, 900)]
        ]

        champions = aggregator.aggregate(games)

        expected = sum(game.cs_per_minute for game in games) / len(games)
        assert champions["Jinx"].cs_per_minute == pytest.approx(expected)

    def test_winrate_rounds_halves_up(self, aggregator, make_game):
        games = [make_game(champion="Ahri", win=i < 1) for i in range(8)]
        games += [make_game(champion="Lux", win=i < 5) for i in range(8)]

        champions = aggregator.aggregate(games)

        # 12.5% and 62.5%
        assert champions["Ahri"].winrate == 13
        assert champions["Lux"].winrate == 63

    def test_wins_plus_losses_equals_games(self, aggregator, make_game):
        games = [
            make_game(win=i % 3 == 0, champion=["Ahri", "Lux", "Zed"][i % 3])
            for i in range(17)
        ]

        champions = aggregator.aggregate(games)

        for entry in champions.values():
            assert entry.wins + entry.losses == entry.games
            assert entry.total == entry.games
        assert sum(entry.games for entry in champions.values()) == 17

    def test_deathless_champion_kda(self, aggregator, make_game):
        champions = aggregator.aggregate(
            [make_game(champion="Sona", kills=2, deaths=0, assists=20)]
        )

        assert champions["Sona"].kda == 22

    def test_first_encounter_order(self, aggregator, make_game):
        games = [make_game(champion=name) for name in ["Zed", "Ahri", "Zed", "Lux"]]

        assert list(aggregator.aggregate(games)) == ["Zed", "Ahri", "Lux"]

    def test_empty_games(self, aggregator):
        assert aggregator.aggregate([]) == {}

    def test_each_call_starts_fresh(self, aggregator, scenario_games):
        first = aggregator.aggregate(scenario_games)
        second = aggregator.aggregate(scenario_games)

        assert first == second
        assert first["Ahri"] is not second["Ahri"]


class TestTopChampions:
    """Test cases for the bounded champion list."""

    @staticmethod
    def _entry(name, wins, losses):
        return ChampionAggregate(
            champion_name=name, wins=wins, losses=losses, games=wins + losses
        )

    def test_orders_by_games_then_winrate_then_name(self, aggregator):
        champions = {
            entry.champion_name: entry
            for entry in [
                self._entry("Lux", 1, 1),
                self._entry("Ahri", 3, 1),
                self._entry("Zed", 2, 0),
                self._entry("Annie", 1, 1),
                self._entry("Jinx", 1, 3),
            ]
        }

        top = aggregator.top_champions(champions)

        assert [entry.champion_name for entry in top] == [
            "Ahri",
            "Jinx",
            "Zed",
            "Annie",
            "Lux",
        ]

    def test_half_percent_winrate_decides_order(self, aggregator):
        # 62.5% rounds up past Ahri's 62%
        champions = {
            entry.champion_name: entry
            for entry in [self._entry("Ahri", 124, 76), self._entry("Lux", 125, 75)]
        }

        top = aggregator.top_champions(champions)

        assert [(entry.champion_name, entry.winrate) for entry in top] == [
            ("Lux", 63),
            ("Ahri", 62),
        ]

    def test_respects_count(self, aggregator, make_game):
        games = [make_game(champion=f"Champ{i}") for i in range(8)]
        champions = aggregator.aggregate(games)

        assert len(aggregator.top_champions(champions)) == 5
        assert len(aggregator.top_champions(champions, 3)) == 3
        assert len(ChampionAggregator(top_champion_count=7).top_champions(champions)) == 7

    def test_returns_references_into_map(self, aggregator, scenario_games):
        champions = aggregator.aggregate(scenario_games)

        assert aggregator.best_champion(champions) is champions["Ahri"]

    def test_best_champion_of_empty_map(self, aggregator):
        assert aggregator.best_champion({}) is None

    @pytest.mark.parametrize("count", [0, -1, 2.5, True])
    def test_invalid_count_raises(self, aggregator, count):
        with pytest.raises(ConfigurationError):
            aggregator.top_champions({}, count)

    def test_invalid_default_count_raises(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ChampionAggregator(top_champion_count=0)

        assert exc_info.value.option == "top_champion_count"
