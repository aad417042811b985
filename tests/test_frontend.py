import pytest
import requests
from pathlib import Path
from fastapi.testclient import TestClient
from streamlit.testing.v1 import AppTest
from app.main import app
from app.core.matcher_config import MatcherConfig
from app.services.matcher import recipe_matcher


FRONTEND = str(Path(__file__).resolve().parents[1] / "app" / "frontend.py")

api = TestClient(app)


@pytest.fixture
def frontend(monkeypatch):
    def post_to_api(url, json=None, **kwargs):
        return api.post(url[url.index("/api/"):], json=json)

    monkeypatch.setattr(recipe_matcher, "config", MatcherConfig(simulated_delay_ms=0))
    monkeypatch.setattr(requests, "post", post_to_api)

    at = AppTest.from_file(FRONTEND, default_timeout=10)
    at.run()
    return at


def submit(at, cuisines):
    at.multiselect(key="cuisines").set_value(cuisines)
    next(b for b in at.button if b.label == "Find recipes").click()
    at.run()
    return at.session_state["recipes"]


def sort_results(at, sort_by):
    at.selectbox(key="sort_by").set_value(sort_by)
    at.run()
    return at.session_state["recipes"]


def test_switching_back_to_relevance_restores_ranking(frontend):
    ranked = submit(frontend, ["chinese"])
    scores = [r["match_score"] for r in ranked]
    assert scores == sorted(scores, reverse=True)

    by_time = sort_results(frontend, "time")
    times = [r["cooking_time"] for r in by_time]
    assert times == sorted(times)

    restored = sort_results(frontend, "relevance")
    assert [r["id"] for r in restored] == [r["id"] for r in ranked]
    assert [r["match_score"] for r in restored] == scores
    assert not frontend.exception


def test_new_search_keeps_selected_sort(frontend):
    submit(frontend, ["chinese"])
    sort_results(frontend, "calories")

    displayed = submit(frontend, ["thai"])
    calories = [r["nutrition"]["calories"] for r in displayed]
    assert calories == sorted(calories)

    restored = sort_results(frontend, "relevance")
    scores = [r["match_score"] for r in restored]
    assert scores == sorted(scores, reverse=True)
