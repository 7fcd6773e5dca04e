"""Integration tests: configuration -> compiled filter -> pipeline over an items file.

These tests exercise the same path the CLI takes, without going through argparse.
"""

import pytest

from feedfilter import FeedItem, KeywordFilter, matches
from feedfilter.config import load_config
from feedfilter.pipeline import FilterPipeline, load_items

CONFIG_YAML = """
filter:
  keywords: >-
    flood,"traffic jam",-"canvey island",-chelmsford,-advertisement,
    except("museum","country park"),except('lifeboat')
pipeline:
  max_workers: 4
logging:
  level: DEBUG
"""

ITEMS_YAML = """
items:
  - title: Traffic jam reported in Chelmsford
  - title: Museum reopens after flood in Canvey Island
    summary: near the country park
  - title: Canvey Island museum extends opening hours
  - title: Canvey Island lifeboat called out to flooded caravan park
  - title: "ADVERTISEMENT: flood insurance deals"
  - title: Flood barrier test on Thames
  - title: Traffic JAM eases on A13
    summary: ""
  - title: Southend pier train timetable
"""


@pytest.fixture(autouse=True)
def isolate(monkeypatch, tmp_path):
    for name in ["FEEDFILTER_KEYWORDS", "FEEDFILTER_MAX_WORKERS", "LOG_LEVEL", "ENVIRONMENT"]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def configured_run(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(CONFIG_YAML)
    items_file = tmp_path / "items.yaml"
    items_file.write_text(ITEMS_YAML)

    app_config, _ = load_config(config_file)
    keyword_filter = KeywordFilter.from_query(app_config.filter.keywords)
    pipeline = FilterPipeline(keyword_filter, max_workers=app_config.pipeline.max_workers)
    return keyword_filter, pipeline.run(load_items(items_file))


def test_compiled_filter_from_config(configured_run):
    keyword_filter, _ = configured_run

    assert keyword_filter.compiled.include == ("traffic jam", "flood")
    assert keyword_filter.compiled.exclude == ("canvey island", "chelmsford", "advertisement")
    assert keyword_filter.compiled.override_groups == (("museum", "country park"), ("lifeboat",))


def test_kept_items(configured_run):
    _, result = configured_run

    assert [item.title for item in result.kept_items] == [
        "Museum reopens after flood in Canvey Island",
        "Canvey Island lifeboat called out to flooded caravan park",
        "Flood barrier test on Thames",
        "Traffic JAM eases on A13",
    ]


def test_run_counts(configured_run):
    _, result = configured_run

    assert result.total_items == 8
    assert result.kept_count == 4
    assert result.excluded_count == 3
    assert result.overridden_count == 2
    assert result.unmatched_count == 1


def test_library_surface_agrees_with_pipeline(configured_run):
    keyword_filter, result = configured_run

    for item, match_result in result.evaluations:
        assert matches(keyword_filter.compiled, item.to_match_input()) is match_result.is_match


def test_feed_item_is_exported():
    assert FeedItem(title="Flood").to_match_input().title == "Flood"
