# ABOUTME: Shared fixtures and HTML builders for listing page markup
# ABOUTME: Produces story rows shaped like the live front page, with optional fields left out on request

from datetime import UTC, datetime

import pytest

import newsmirror.config as config_module

FIXED_NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=UTC)


def story_rows(
    story_id: int,
    title: str | None = "A story",
    link: str = "https://example.com/story",
    points: str | None = "150 points",
    author: str | None = "alice",
    age: str | None = "3 hours ago",
    comments: str | None = "42&nbsp;comments",
    rank: int = 1,
) -> str:
    """Build the story row, its subtext row and the trailing spacer for one listing entry."""
    anchor = f'<span class="titleline"><a href="{link}">{title}</a></span>' if title is not None else ""
    subline = []
    if points is not None:
        subline.append(f'<span class="score" id="score_{story_id}">{points}</span> by ')
    if author is not None:
        subline.append(f'<a href="user?id={author}" class="hnuser">{author}</a> ')
    if age is not None:
        subline.append(f'<span class="age" title="2024-05-01T09:00:00"><a href="item?id={story_id}">{age}</a></span> ')
    subline.append(f'<span id="unv_{story_id}"></span> | <a href="hide?id={story_id}&amp;goto=news">hide</a>')
    if comments is not None:
        subline.append(f' | <a href="item?id={story_id}">{comments}</a>')

    return (
        f'<tr class="athing submission" id="{story_id}">'
        f'<td align="right" valign="top" class="title"><span class="rank">{rank}.</span></td>'
        f'<td valign="top" class="votelinks"></td>'
        f'<td class="title">{anchor}</td>'
        f"</tr>"
        f'<tr><td colspan="2"></td><td class="subtext"><span class="subline">{"".join(subline)}</span></td></tr>'
        f'<tr class="spacer" style="height:5px"></tr>'
    )


def listing_page(rows: list[str], more: bool = False, next_page: int = 2) -> str:
    """Wrap story rows in the listing table, adding the load-more control when ``more`` is set."""
    more_rows = ""
    if more:
        more_rows = (
            '<tr class="morespace" style="height:10px"></tr>'
            f'<tr><td colspan="2"></td><td class="title"><a href="?p={next_page}" class="morelink" rel="next">More</a>'
            "</td></tr>"
        )
    return (
        "<html><head><title>Hacker News</title></head><body><center><table id='hnmain'>"
        "<tr id='bigbox'><td><table border='0' cellpadding='0' cellspacing='0' class='itemlist'><tbody>"
        f"{''.join(rows)}{more_rows}"
        "</tbody></table></td></tr></table></center></body></html>"
    )


@pytest.fixture
def fixed_now():
    return lambda: FIXED_NOW


@pytest.fixture
def reference_time():
    return FIXED_NOW


@pytest.fixture
def story():
    return story_rows


@pytest.fixture
def listing():
    return listing_page


@pytest.fixture(autouse=True)
def reset_config(monkeypatch, tmp_path):
    """Give every test a fresh config whose dataset lives in a temporary directory."""
    monkeypatch.setenv("NEWSMIRROR_DATASET_PATH", str(tmp_path / "data.json"))
    config_module._config_instance = None
    yield
    config_module._config_instance = None
