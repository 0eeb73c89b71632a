"""Plotly figures for the performance dashboard."""
from __future__ import annotations

from typing import Sequence

import plotly.graph_objects as go

from nextgen.models import MatchResult


def match_chart(top: Sequence[MatchResult]) -> go.Figure:
    """Bar chart of match % for the top jobs; a single empty bar when none."""
    if top:
        # one bar per job even when titles repeat
        labels = [
            f"{i}. {r.job.job_title or 'Untitled Role'} @ {r.job.company_name}"
            for i, r in enumerate(top, 1)
        ]
        values = [r.match_percent for r in top]
    else:
        labels, values = ["No data"], [0]

    fig = go.Figure(data=[go.Bar(x=labels, y=values, name="Match %")])
    fig.update_layout(
        title="Top Job Matches",
        yaxis=dict(title="Match %", range=[0, 100]),
        showlegend=False,
        height=360,
    )
    return fig


def skills_chart(have: int, need: int) -> go.Figure | None:
    if have == 0 and need == 0:
        return None
    fig = go.Figure(data=[go.Pie(
        labels=["Skills you have", "Skills to learn"],
        values=[have, need],
        hole=0.5,
        textinfo="label+value",
    )])
    fig.update_layout(
        title="Skills Coverage",
        legend=dict(orientation="h", y=-0.1),
        height=360,
    )
    return fig
