from conftest import make_job
from nextgen.charts import match_chart, skills_chart
from nextgen.matcher import rank
from nextgen.skills import normalize


def test_match_chart_uses_top_results():
    ranked = rank(normalize("a"), [make_job("1", "a", job_title="One"), make_job("2", "a, b", job_title="Two")])
    fig = match_chart(ranked)
    bar = fig.data[0]
    assert list(bar.x) == ["1. One @ Acme", "2. Two @ Acme"]
    assert list(bar.y) == [100, 50]
    assert list(fig.layout.yaxis.range) == [0, 100]


def test_match_chart_placeholder_when_empty():
    bar = match_chart([]).data[0]
    assert list(bar.x) == ["No data"]
    assert list(bar.y) == [0]


def test_skills_chart():
    assert skills_chart(0, 0) is None
    pie = skills_chart(3, 2).data[0]
    assert list(pie.labels) == ["Skills you have", "Skills to learn"]
    assert list(pie.values) == [3, 2]


def test_match_chart_keeps_same_titles_apart():
    jobs = [
        make_job("1", "a", job_title="Data Analyst", company_name="Acme"),
        make_job("2", "a, b", job_title="Data Analyst", company_name="Acme"),
    ]
    bar = match_chart(rank(normalize("a"), jobs)).data[0]
    assert len(set(bar.x)) == 2
    assert list(bar.y) == [100, 50]
