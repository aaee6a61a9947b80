from __future__ import annotations

from solid_showcase.domain.catalog import sample_games, sample_movies
from solid_showcase.domain.models import Movie, Record
from solid_showcase.queries import filters
from solid_showcase.queries.media_store import MediaStore
from solid_showcase.queries.service import RecordQueryService


def test_filters_match_service_answers(games_with_duplicates):
    service = RecordQueryService(games_with_duplicates)

    assert filters.by_metric(games_with_duplicates, 1993) == service.find_by_metric(1993)
    assert filters.by_name(games_with_duplicates, "Doom") == service.find_by_name("Doom")
    assert filters.older_than(games_with_duplicates, 1996) == service.find_older_than(1996)
    assert filters.newer_than(games_with_duplicates, 1993) == service.find_newer_than(1993)


def test_filters_accept_generators_and_keep_order():
    records = (Record(name=f"game-{year}", metric=year) for year in (2001, 1999, 2003, 2000))
    assert [r.metric for r in filters.newer_than(records, 1999)] == [2001, 2003, 2000]


def test_select_with_custom_predicate(classic_games):
    picked = filters.select(classic_games, lambda record: record.name.startswith("Doom"))
    assert [r.name for r in picked] == ["Doom", "Doom II"]


def test_filters_do_not_mutate_input(classic_games):
    snapshot = list(classic_games)
    filters.older_than(classic_games, 1994)
    assert classic_games == snapshot


class TestMediaStore:
    def test_record_queries_match_base_service(self):
        games = sample_games()
        store = MediaStore(games, sample_movies())
        base = RecordQueryService(games)

        assert isinstance(store, RecordQueryService)
        for year in (1984, 1994, 1998):
            assert store.find_by_metric(year) == base.find_by_metric(year)
            assert store.find_older_than(year) == base.find_older_than(year)
            assert store.find_newer_than(year) == base.find_newer_than(year)
        assert store.find_by_name("Doom") == base.find_by_name("Doom")

    def test_movies_by_category_keep_shelf_order(self):
        store = MediaStore(sample_games(), sample_movies())
        assert [m.name for m in store.find_movies_by_category("sci-fi")] == ["Alien", "Blade Runner"]
        assert store.find_movies_by_category("Sci-Fi") == []

    def test_movies_snapshot(self):
        movies = [Movie(name="Heat", category="crime")]
        store = MediaStore([], movies)
        movies.append(Movie(name="Alien", category="sci-fi"))
        assert store.movies == (Movie(name="Heat", category="crime"),)
        assert len(store) == 0
        assert repr(store) == "MediaStore(records=0, movies=1)"


def test_sample_catalog_contains_canonical_games():
    games = sample_games()
    assert Record(name="Chrono Trigger", metric=1995) in games
    assert Record(name="Doom", metric=1993) in games
    assert Record(name="Doom II", metric=1994) in games
    assert sample_games() is not games
